"""Guacamole client module for guacamole-client.

This module provides a client for the Apache Guacamole REST API.
"""

from urllib.parse import quote

import requests

from guacamole_client.clients.activity import ActiveConnectionsMixin, HistoryMixin, SelfMixin
from guacamole_client.clients.base import DEFAULT_TIMEOUT, BaseClient, TimeoutType
from guacamole_client.clients.connection_groups import ConnectionGroupsMixin
from guacamole_client.clients.connections import ConnectionsMixin, SharingProfilesMixin
from guacamole_client.clients.users import UserGroupsMixin, UsersMixin
from guacamole_client.config.settings import Settings, get_settings
from guacamole_client.models.auth import AuthResponse, SessionState


TOKEN_HEADER = "Guacamole-Token"


class GuacamoleClient(
    ConnectionsMixin,
    SharingProfilesMixin,
    ConnectionGroupsMixin,
    UsersMixin,
    UserGroupsMixin,
    ActiveConnectionsMixin,
    HistoryMixin,
    SelfMixin,
    BaseClient,
):
    """Client for interacting with Apache Guacamole.

    This client provides methods for:
    - Authentication
    - Connection, connection group and sharing profile management
    - User and user group management
    - Permission and membership management
    - Active connections and history

    Call authenticate() before any resource method. The client holds no
    lock: re-authenticating while other calls are in flight is not
    synchronized.

    Every operation accepts a ``timeout`` (seconds or a ``(connect, read)``
    tuple) that bounds how long it may block. This is the only way to
    cancel a call: requests cannot abort an in-flight request early, so a
    caller needing to give up sooner must pass a shorter timeout.
    """

    def __init__(
        self,
        guacamole_url: str,
        timeout: TimeoutType = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """Initialize GuacamoleClient.

        Args:
            guacamole_url: Guacamole base URL, e.g. "http://localhost:8080/guacamole"
            timeout: Default timeout for requests in seconds
            session: Session to send requests with, for custom TLS or proxies
        """
        # Ensure the base URL doesn't end with a slash
        self.guacamole_url = guacamole_url.rstrip("/")
        super().__init__(base_url=self.guacamole_url, timeout=timeout, session=session)
        self.state = SessionState()

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "GuacamoleClient":
        """Create a client from GUACAMOLE_* settings.

        Args:
            settings: Settings to use, defaults to get_settings()

        Returns:
            GuacamoleClient: Unauthenticated client
        """
        settings = settings or get_settings()
        client = cls(settings.URL, timeout=settings.TIMEOUT)
        client.session.verify = settings.VERIFY_SSL
        return client

    @property
    def auth_token(self) -> str | None:
        """Token received from the last successful authenticate()."""
        return self.state.auth_token

    @property
    def data_source(self) -> str:
        """Data source received from the last successful authenticate(), e.g. "postgresql"."""
        return self.state.data_source

    def _auth_headers(self) -> dict[str, str]:
        if self.state.auth_token:
            return {TOKEN_HEADER: self.state.auth_token}
        return {}

    def data_path(self, *segments: str) -> str:
        """Build a path below the session data source.

        The data source and every segment are percent-encoded on their own,
        so "/" inside a segment becomes %2F and "bob@example.com" becomes
        "bob%40example.com".

        Args:
            segments: Path segments below the data source

        Returns:
            str: Path such as "/api/session/data/postgresql/users/bob%40example.com"
        """
        parts = [quote(self.state.data_source, safe="")]
        parts.extend(quote(segment, safe="") for segment in segments)
        return "/api/session/data/" + "/".join(parts)

    def authenticate(self, username: str, password: str, timeout: TimeoutType = None) -> AuthResponse:
        """Log in to Guacamole and store the session token and data source.

        Calling this again replaces the stored session. On failure the
        previous session, if any, is left untouched.

        Args:
            username: Guacamole username
            password: Guacamole password
            timeout: Request timeout

        Returns:
            AuthResponse: The token exchange response

        Raises:
            OperationError: If login fails
        """
        with self._operation("authenticate", username):
            tokens_url = f"{self.guacamole_url}/api/tokens"
            self.logger.info("Logging in to %s as %s", tokens_url, username)

            headers = {"Content-Type": "application/x-www-form-urlencoded"}
            response = self.session.post(
                url=tokens_url,
                data={
                    "username": username,
                    "password": password,
                },
                headers=headers,
                timeout=timeout if timeout is not None else self.timeout,
            )
            self.logger.info("Login response status: %s", response.status_code)
            data, _ = self._handle_response(response)

            auth = AuthResponse.model_validate(data)
            self.state = SessionState(auth_token=auth.auth_token, data_source=auth.data_source)
            self.logger.info("Successfully logged in to Guacamole, data source %s", auth.data_source)
            return auth

    def logout(self, timeout: TimeoutType = None) -> None:
        """Invalidate the current session token on the server.

        The local session state is kept; discard the client afterwards.

        Raises:
            OperationError: If logout fails
        """
        with self._operation("logout"):
            self.delete("/api/session", timeout=timeout)
            self.logger.info("Logged out of Guacamole")

"""Base client module for guacamole-client.

This module provides the request pipeline shared by all clients.
"""

import json
import logging
from typing import Any

import requests
from requests.exceptions import RequestException, Timeout

from guacamole_client.core.exceptions import APIError, RequestEncodingError
from guacamole_client.models.base import GuacamoleModel


DEFAULT_TIMEOUT = 30.0

TimeoutType = float | tuple[float, float] | None


def _to_jsonable(data: Any) -> Any:
    if isinstance(data, GuacamoleModel):
        return data.to_api()
    if isinstance(data, (list, tuple)):
        return [_to_jsonable(item) for item in data]
    return data


class BaseClient:
    """Base client for API interactions.

    This class provides common functionality for all clients, including:
    - HTTP request methods (GET, POST, PUT, DELETE, PATCH)
    - Error classification
    - Logging
    """

    def __init__(
        self,
        base_url: str | None = None,
        timeout: TimeoutType = DEFAULT_TIMEOUT,
        session: requests.Session | None = None,
    ):
        """Initialize BaseClient.

        Args:
            base_url: Base URL for API requests
            timeout: Default timeout for requests in seconds
            session: Session used to send requests. Supply one to configure
                TLS verification, client certificates, proxies or adapters.
        """
        self.logger = logging.getLogger(self.__class__.__name__)
        self.base_url = base_url
        self.timeout = timeout
        self._owns_session = session is None
        self.session = session if session is not None else requests.Session()

    def close(self) -> None:
        """Close the underlying session if this client created it."""
        if self._owns_session:
            self.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def _get_base_url(self) -> str:
        """Get the base URL for API requests.

        Returns:
            str: Base URL
        """
        if self.base_url:
            return self.base_url
        return ""

    def _auth_headers(self) -> dict[str, str]:
        """Headers that authenticate a request. None by default."""
        return {}

    def _get_headers(self, has_body: bool) -> dict[str, str]:
        """Get headers for API requests.

        Args:
            has_body: Whether the request carries a JSON body

        Returns:
            Dict[str, str]: Headers
        """
        headers = {}
        if has_body:
            headers["Content-Type"] = "application/json"
        headers.update(self._auth_headers())
        return headers

    def _encode_body(self, data: Any) -> str:
        """Serialize a request body to JSON.

        Raises:
            RequestEncodingError: If the body cannot be serialized
        """
        try:
            return json.dumps(_to_jsonable(data))
        except (TypeError, ValueError) as e:
            self.logger.error("Could not encode request body: %s", str(e))
            raise RequestEncodingError(f"Could not encode request body: {e!s}") from e

    def _parse_error(self, response: requests.Response) -> APIError:
        """Build an APIError from a non-2xx response.

        A JSON object body supplies ``message`` and ``type``. Any other body
        becomes the message as-is; an empty body falls back to the reason
        phrase.
        """
        status_code = response.status_code
        text = response.text
        if not text:
            return APIError(response.reason or f"HTTP {status_code}", status_code=status_code)

        try:
            error_data = response.json()
        except (ValueError, requests.exceptions.JSONDecodeError):
            self.logger.warning("Could not parse error response as JSON")
            return APIError(text, status_code=status_code)

        if not isinstance(error_data, dict):
            return APIError(text, status_code=status_code)
        return APIError(
            str(error_data.get("message") or ""),
            status_code=status_code,
            type=str(error_data.get("type") or ""),
            details=error_data,
        )

    def _handle_response(self, response: requests.Response, decode: bool = True) -> tuple[Any, int]:
        """Handle API response.

        Args:
            response: Response object
            decode: Whether a JSON body is expected

        Returns:
            Tuple[Any, int]: Response data (None when not decoded) and status code

        Raises:
            APIError: If response is not successful or its body is not JSON
        """
        if not 200 <= response.status_code < 300:
            error = self._parse_error(response)
            self.logger.error("API error: %s, Status: %s", error.message, error.status_code)
            raise error

        if not decode or response.status_code == 204 or not response.content:
            return None, response.status_code

        try:
            return response.json(), response.status_code
        except (ValueError, requests.exceptions.JSONDecodeError) as e:
            self.logger.error("Invalid JSON response, Status: %s", response.status_code)
            raise APIError("Invalid JSON response", status_code=response.status_code) from e

    def _request(
        self,
        method: str,
        endpoint: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
        timeout: TimeoutType = None,
        headers: dict[str, str] | None = None,
        decode: bool = True,
    ) -> tuple[Any, int]:
        """Make an API request.

        Args:
            method: HTTP method
            endpoint: API endpoint
            data: Request body, serialized as JSON when not None
            params: Query parameters
            timeout: Request timeout, overrides the client default
            headers: Custom headers
            decode: Whether to decode a JSON response body

        Returns:
            Tuple[Any, int]: Response data and status code

        Raises:
            APIError: If the server answers with a non-2xx status
            RequestEncodingError: If the body cannot be serialized
            requests.RequestException: On transport failures, unchanged
        """
        self.logger.debug("Requesting %s %s", method, endpoint)
        if timeout is None:
            timeout = self.timeout

        url = f"{self._get_base_url()}{endpoint}"
        body = self._encode_body(data) if data is not None else None
        request_headers = self._get_headers(body is not None)

        if headers:
            request_headers.update(headers)

        try:
            response = self.session.request(
                method=method,
                url=url,
                data=body,
                params=params,
                headers=request_headers,
                timeout=timeout,
            )
        except Timeout:
            self.logger.error("Request timeout: %s %s", method, url)
            raise
        except RequestException as e:
            self.logger.error("Request error: %s %s - %s", method, url, str(e))
            raise

        return self._handle_response(response, decode=decode)

    def get(
        self,
        endpoint: str,
        params: dict[str, Any] | None = None,
        timeout: TimeoutType = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, int]:
        """Make a GET request.

        Args:
            endpoint: API endpoint
            params: Query parameters
            timeout: Request timeout
            headers: Custom headers

        Returns:
            Tuple[Any, int]: Response data and status code
        """
        return self._request(
            method="GET",
            endpoint=endpoint,
            params=params,
            timeout=timeout,
            headers=headers,
        )

    def post(
        self,
        endpoint: str,
        data: Any = None,
        params: dict[str, Any] | None = None,
        timeout: TimeoutType = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, int]:
        """Make a POST request and decode the response body."""
        return self._request(
            method="POST",
            endpoint=endpoint,
            data=data,
            params=params,
            timeout=timeout,
            headers=headers,
        )

    def put(
        self,
        endpoint: str,
        data: Any = None,
        timeout: TimeoutType = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, int]:
        """Make a PUT request. Guacamole answers with 204, nothing is decoded."""
        return self._request(
            method="PUT",
            endpoint=endpoint,
            data=data,
            timeout=timeout,
            headers=headers,
            decode=False,
        )

    def delete(
        self,
        endpoint: str,
        timeout: TimeoutType = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, int]:
        """Make a DELETE request. Nothing is decoded."""
        return self._request(
            method="DELETE",
            endpoint=endpoint,
            timeout=timeout,
            headers=headers,
            decode=False,
        )

    def patch(
        self,
        endpoint: str,
        data: Any = None,
        timeout: TimeoutType = None,
        headers: dict[str, str] | None = None,
    ) -> tuple[Any, int]:
        """Make a PATCH request. Nothing is decoded."""
        return self._request(
            method="PATCH",
            endpoint=endpoint,
            data=data,
            timeout=timeout,
            headers=headers,
            decode=False,
        )

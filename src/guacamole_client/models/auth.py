"""Authentication and session models."""

from typing import Optional

from pydantic import Field

from guacamole_client.models.base import GuacamoleModel


class AuthResponse(GuacamoleModel):
    """Response of ``POST /api/tokens``."""

    auth_token: str
    username: str = ""
    data_source: str = ""
    available_data_sources: list[str] = Field(default_factory=list)


class SessionState(GuacamoleModel):
    """Authentication state held by a client instance.

    ``auth_token`` is None until a successful login. ``data_source`` is the
    backend name embedded in every resource path.
    """

    auth_token: Optional[str] = None
    data_source: str = ""

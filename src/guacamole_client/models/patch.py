"""JSON Patch operation model."""

from typing import Literal

from guacamole_client.models.base import GuacamoleModel


class PatchOperation(GuacamoleModel):
    """A single RFC 6902 style edit, as used by permission and membership endpoints."""

    op: Literal["add", "remove"]
    path: str
    value: str

"""Pydantic models for Guacamole REST resources."""

from guacamole_client.models.activity import ActiveConnection, HistoryEntry
from guacamole_client.models.auth import AuthResponse, SessionState
from guacamole_client.models.base import (
    GuacamoleModel,
    NullableStringMap,
    decode_attributes,
    encode_attributes,
)
from guacamole_client.models.connection import (
    CONNECTION_GROUP_TYPE_BALANCING,
    CONNECTION_GROUP_TYPE_ORGANIZATIONAL,
    ROOT_CONNECTION_GROUP,
    Connection,
    ConnectionGroup,
    SharingProfile,
)
from guacamole_client.models.patch import PatchOperation
from guacamole_client.models.user import (
    PERMISSION_ADMINISTER,
    PERMISSION_DELETE,
    PERMISSION_READ,
    PERMISSION_UPDATE,
    SYSTEM_PERMISSION_ADMINISTER,
    SYSTEM_PERMISSION_CREATE_CONNECTION,
    SYSTEM_PERMISSION_CREATE_CONNECTION_GROUP,
    SYSTEM_PERMISSION_CREATE_SHARING_PROFILE,
    SYSTEM_PERMISSION_CREATE_USER,
    SYSTEM_PERMISSION_CREATE_USER_GROUP,
    CurrentUser,
    Permissions,
    User,
    UserGroup,
)


__all__ = [
    "CONNECTION_GROUP_TYPE_BALANCING",
    "CONNECTION_GROUP_TYPE_ORGANIZATIONAL",
    "PERMISSION_ADMINISTER",
    "PERMISSION_DELETE",
    "PERMISSION_READ",
    "PERMISSION_UPDATE",
    "ROOT_CONNECTION_GROUP",
    "SYSTEM_PERMISSION_ADMINISTER",
    "SYSTEM_PERMISSION_CREATE_CONNECTION",
    "SYSTEM_PERMISSION_CREATE_CONNECTION_GROUP",
    "SYSTEM_PERMISSION_CREATE_SHARING_PROFILE",
    "SYSTEM_PERMISSION_CREATE_USER",
    "SYSTEM_PERMISSION_CREATE_USER_GROUP",
    "ActiveConnection",
    "AuthResponse",
    "Connection",
    "ConnectionGroup",
    "CurrentUser",
    "GuacamoleModel",
    "HistoryEntry",
    "NullableStringMap",
    "PatchOperation",
    "Permissions",
    "SessionState",
    "SharingProfile",
    "User",
    "UserGroup",
    "decode_attributes",
    "encode_attributes",
]

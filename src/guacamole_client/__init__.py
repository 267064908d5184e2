"""Typed client for the Apache Guacamole REST API.

Usage:

    client = GuacamoleClient("http://localhost:8080/guacamole")
    client.authenticate("guacadmin", "guacadmin")
    connection = client.create_connection(
        Connection(name="desktop", parent_identifier=ROOT_CONNECTION_GROUP, protocol="vnc")
    )
"""

from guacamole_client.clients import (
    HISTORY_ORDER_ASCENDING,
    HISTORY_ORDER_DESCENDING,
    GuacamoleClient,
)
from guacamole_client.core.exceptions import (
    ERROR_TYPE_NOT_FOUND,
    ERROR_TYPE_PERMISSION_DENIED,
    APIError,
    GuacamoleError,
    OperationError,
    RequestEncodingError,
    find_api_error,
    is_not_found,
    is_permission_denied,
)
from guacamole_client.models import (
    CONNECTION_GROUP_TYPE_BALANCING,
    CONNECTION_GROUP_TYPE_ORGANIZATIONAL,
    PERMISSION_ADMINISTER,
    PERMISSION_DELETE,
    PERMISSION_READ,
    PERMISSION_UPDATE,
    ROOT_CONNECTION_GROUP,
    SYSTEM_PERMISSION_ADMINISTER,
    SYSTEM_PERMISSION_CREATE_CONNECTION,
    SYSTEM_PERMISSION_CREATE_CONNECTION_GROUP,
    SYSTEM_PERMISSION_CREATE_SHARING_PROFILE,
    SYSTEM_PERMISSION_CREATE_USER,
    SYSTEM_PERMISSION_CREATE_USER_GROUP,
    ActiveConnection,
    AuthResponse,
    Connection,
    ConnectionGroup,
    CurrentUser,
    GuacamoleModel,
    HistoryEntry,
    NullableStringMap,
    PatchOperation,
    Permissions,
    SessionState,
    SharingProfile,
    User,
    UserGroup,
    decode_attributes,
    encode_attributes,
)
from guacamole_client.utils.patch import (
    add_connection_group_permission,
    add_connection_permission,
    add_group_membership,
    add_sharing_profile_permission,
    add_system_permission,
    add_user_group_permission,
    add_user_permission,
    remove_connection_group_permission,
    remove_connection_permission,
    remove_group_membership,
    remove_sharing_profile_permission,
    remove_system_permission,
    remove_user_group_permission,
    remove_user_permission,
)


__all__ = [
    "ERROR_TYPE_NOT_FOUND",
    "ERROR_TYPE_PERMISSION_DENIED",
    "HISTORY_ORDER_ASCENDING",
    "HISTORY_ORDER_DESCENDING",
    "APIError",
    "GuacamoleClient",
    "GuacamoleError",
    "OperationError",
    "RequestEncodingError",
    "add_connection_group_permission",
    "add_connection_permission",
    "add_group_membership",
    "add_sharing_profile_permission",
    "add_system_permission",
    "add_user_group_permission",
    "add_user_permission",
    "find_api_error",
    "is_not_found",
    "is_permission_denied",
    "remove_connection_group_permission",
    "remove_connection_permission",
    "remove_group_membership",
    "remove_sharing_profile_permission",
    "remove_system_permission",
    "remove_user_group_permission",
    "remove_user_permission",
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

"""Builders for permission and membership patch operations.

Each function returns one :class:`PatchOperation`. Collect them in a list
and pass it to an ``update_*_permissions`` or membership update method; the
server applies the whole list or none of it.
"""

from guacamole_client.models.patch import PatchOperation


def _permission(op: str, collection: str, identifier: str, permission: str) -> PatchOperation:
    return PatchOperation(op=op, path=f"/{collection}/{identifier}", value=permission)


def add_connection_permission(connection_id: str, permission: str) -> PatchOperation:
    """Grant a permission on a connection."""
    return _permission("add", "connectionPermissions", connection_id, permission)


def remove_connection_permission(connection_id: str, permission: str) -> PatchOperation:
    """Revoke a permission on a connection."""
    return _permission("remove", "connectionPermissions", connection_id, permission)


def add_connection_group_permission(group_id: str, permission: str) -> PatchOperation:
    """Grant a permission on a connection group."""
    return _permission("add", "connectionGroupPermissions", group_id, permission)


def remove_connection_group_permission(group_id: str, permission: str) -> PatchOperation:
    """Revoke a permission on a connection group."""
    return _permission("remove", "connectionGroupPermissions", group_id, permission)


def add_sharing_profile_permission(profile_id: str, permission: str) -> PatchOperation:
    """Grant a permission on a sharing profile."""
    return _permission("add", "sharingProfilePermissions", profile_id, permission)


def remove_sharing_profile_permission(profile_id: str, permission: str) -> PatchOperation:
    """Revoke a permission on a sharing profile."""
    return _permission("remove", "sharingProfilePermissions", profile_id, permission)


def add_user_permission(username: str, permission: str) -> PatchOperation:
    """Grant a permission on a user account (e.g. READ, UPDATE, ADMINISTER)."""
    return _permission("add", "userPermissions", username, permission)


def remove_user_permission(username: str, permission: str) -> PatchOperation:
    """Revoke a permission on a user account."""
    return _permission("remove", "userPermissions", username, permission)


def add_user_group_permission(group_id: str, permission: str) -> PatchOperation:
    """Grant a permission on a user group."""
    return _permission("add", "userGroupPermissions", group_id, permission)


def remove_user_group_permission(group_id: str, permission: str) -> PatchOperation:
    """Revoke a permission on a user group."""
    return _permission("remove", "userGroupPermissions", group_id, permission)


def add_system_permission(permission: str) -> PatchOperation:
    """Grant a system permission such as CREATE_CONNECTION."""
    return PatchOperation(op="add", path="/systemPermissions", value=permission)


def remove_system_permission(permission: str) -> PatchOperation:
    """Revoke a system permission."""
    return PatchOperation(op="remove", path="/systemPermissions", value=permission)


def add_group_membership(identifier: str) -> PatchOperation:
    """Add a user or group to a membership list."""
    return PatchOperation(op="add", path="/", value=identifier)


def remove_group_membership(identifier: str) -> PatchOperation:
    """Remove a user or group from a membership list."""
    return PatchOperation(op="remove", path="/", value=identifier)

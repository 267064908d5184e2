"""User, user group and permission models."""

from typing import Annotated, Any, Optional

from pydantic import BeforeValidator, Field

from guacamole_client.models.base import GuacamoleModel, NullableStringMap


PERMISSION_READ = "READ"
PERMISSION_UPDATE = "UPDATE"
PERMISSION_DELETE = "DELETE"
PERMISSION_ADMINISTER = "ADMINISTER"

SYSTEM_PERMISSION_CREATE_USER = "CREATE_USER"
SYSTEM_PERMISSION_CREATE_USER_GROUP = "CREATE_USER_GROUP"
SYSTEM_PERMISSION_CREATE_CONNECTION = "CREATE_CONNECTION"
SYSTEM_PERMISSION_CREATE_CONNECTION_GROUP = "CREATE_CONNECTION_GROUP"
SYSTEM_PERMISSION_CREATE_SHARING_PROFILE = "CREATE_SHARING_PROFILE"
SYSTEM_PERMISSION_ADMINISTER = "ADMINISTER"


def _none_to_empty(factory):
    def validator(value: Any) -> Any:
        return factory() if value is None else value

    return BeforeValidator(validator)


ObjectPermissionMap = Annotated[dict[str, list[str]], _none_to_empty(dict)]
PermissionList = Annotated[list[str], _none_to_empty(list)]


class User(GuacamoleModel):
    """A Guacamole user account.

    ``password`` is write only: it is accepted on create/update and never
    returned. Leave it None on update to keep the current password.
    """

    username: str
    password: Optional[str] = None
    disabled: Optional[bool] = None
    attributes: NullableStringMap = Field(default_factory=dict)
    last_active: Optional[int] = None


class UserGroup(GuacamoleModel):
    """A Guacamole user group."""

    identifier: str
    disabled: Optional[bool] = None
    attributes: NullableStringMap = Field(default_factory=dict)


class CurrentUser(GuacamoleModel):
    """The currently authenticated identity."""

    username: str
    disabled: bool = False
    last_active: Optional[int] = None
    attributes: NullableStringMap = Field(default_factory=dict)


class Permissions(GuacamoleModel):
    """Permission set of a user or user group.

    Object permission maps are keyed by resource identifier and hold values
    such as READ, UPDATE, DELETE and ADMINISTER. ``system_permissions`` holds
    CREATE_* and ADMINISTER values.
    """

    connection_permissions: ObjectPermissionMap = Field(default_factory=dict)
    connection_group_permissions: ObjectPermissionMap = Field(default_factory=dict)
    sharing_profile_permissions: ObjectPermissionMap = Field(default_factory=dict)
    active_connection_permissions: ObjectPermissionMap = Field(default_factory=dict)
    user_permissions: ObjectPermissionMap = Field(default_factory=dict)
    user_group_permissions: ObjectPermissionMap = Field(default_factory=dict)
    system_permissions: PermissionList = Field(default_factory=list)

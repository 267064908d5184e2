"""User and user group operations, including permissions and memberships."""

from collections.abc import Iterable

from guacamole_client.clients.base import TimeoutType
from guacamole_client.clients.resource import ResourceMixin, parse_list, parse_map
from guacamole_client.models.activity import HistoryEntry
from guacamole_client.models.patch import PatchOperation
from guacamole_client.models.user import Permissions, User, UserGroup


class UsersMixin(ResourceMixin):
    """Operations on ``/users``."""

    def list_users(self, timeout: TimeoutType = None) -> dict[str, User]:
        """Get all users visible to the authenticated user.

        Returns:
            Dict[str, User]: Users keyed by username
        """
        with self._operation("list users"):
            data, _ = self.get(self.data_path("users"), timeout=timeout)
            return parse_map(User, data)

    def create_user(self, user: User, timeout: TimeoutType = None) -> User:
        """Create a user.

        Args:
            user: User to create. Set ``password`` to give the account a
                password.
            timeout: Request timeout

        Returns:
            User: Created user. The password is never echoed back.

        Raises:
            OperationError: If user creation fails
        """
        with self._operation("create user", user.username):
            data, _ = self.post(self.data_path("users"), data=user, timeout=timeout)
            created = User.model_validate(data)
            self.logger.info("Created user %s", created.username)
            return created

    def get_user(self, username: str, timeout: TimeoutType = None) -> User:
        """Get a user by username."""
        with self._operation("get user", username):
            data, _ = self.get(self.data_path("users", username), timeout=timeout)
            return User.model_validate(data)

    def update_user(self, username: str, user: User, timeout: TimeoutType = None) -> None:
        """Replace a user.

        Leave ``user.password`` unset to keep the current password.

        Args:
            username: Username of the account to replace
            user: New user definition
            timeout: Request timeout

        Raises:
            OperationError: If the update fails
        """
        with self._operation("update user", username):
            self.put(self.data_path("users", username), data=user, timeout=timeout)
            self.logger.info("Updated user %s", username)

    def delete_user(self, username: str, timeout: TimeoutType = None) -> None:
        """Delete a user."""
        with self._operation("delete user", username):
            self.delete(self.data_path("users", username), timeout=timeout)
            self.logger.info("Deleted user %s", username)

    def get_user_permissions(self, username: str, timeout: TimeoutType = None) -> Permissions:
        """Get the permissions granted directly to a user.

        Permissions inherited through group membership are not included, see
        get_user_effective_permissions.
        """
        with self._operation("get user permissions", username):
            data, _ = self.get(self.data_path("users", username, "permissions"), timeout=timeout)
            return Permissions.model_validate(data)

    def get_user_effective_permissions(self, username: str, timeout: TimeoutType = None) -> Permissions:
        """Get the resolved permissions of a user, including inherited ones."""
        with self._operation("get user effective permissions", username):
            data, _ = self.get(self.data_path("users", username, "effectivePermissions"), timeout=timeout)
            return Permissions.model_validate(data)

    def update_user_permissions(
        self,
        username: str,
        operations: Iterable[PatchOperation],
        timeout: TimeoutType = None,
    ) -> None:
        """Apply permission patch operations to a user.

        Build the operations with the helpers in guacamole_client.utils.patch.
        The server applies all of them or none.

        Args:
            username: Username
            operations: Patch operations to apply
            timeout: Request timeout

        Raises:
            OperationError: If the patch is rejected
        """
        operations = list(operations)
        with self._operation("update user permissions", username):
            self.patch(self.data_path("users", username, "permissions"), data=operations, timeout=timeout)
            self.logger.info("Applied %s permission change(s) to user %s", len(operations), username)

    def get_user_groups(self, username: str, timeout: TimeoutType = None) -> list[str]:
        """Get the identifiers of the groups a user is a direct member of."""
        with self._operation("get user groups", username):
            data, _ = self.get(self.data_path("users", username, "userGroups"), timeout=timeout)
            return list(data or [])

    def update_user_groups(
        self,
        username: str,
        operations: Iterable[PatchOperation],
        timeout: TimeoutType = None,
    ) -> None:
        """Apply membership patch operations to the groups of a user."""
        operations = list(operations)
        with self._operation("update user groups", username):
            self.patch(self.data_path("users", username, "userGroups"), data=operations, timeout=timeout)
            self.logger.info("Applied %s membership change(s) to user %s", len(operations), username)

    def get_user_history(self, username: str, timeout: TimeoutType = None) -> list[HistoryEntry]:
        """Get the connection history of a user."""
        with self._operation("get user history", username):
            data, _ = self.get(self.data_path("users", username, "history"), timeout=timeout)
            return parse_list(HistoryEntry, data)


class UserGroupsMixin(ResourceMixin):
    """Operations on ``/userGroups``.

    A group has three independent membership lists: member users
    (``memberUsers``), member groups (``memberUserGroups``) and the groups it
    belongs to itself (``userGroups``).
    """

    def list_user_groups(self, timeout: TimeoutType = None) -> dict[str, UserGroup]:
        with self._operation("list user groups"):
            data, _ = self.get(self.data_path("userGroups"), timeout=timeout)
            return parse_map(UserGroup, data)

    def create_user_group(self, group: UserGroup, timeout: TimeoutType = None) -> UserGroup:
        with self._operation("create user group", group.identifier):
            data, _ = self.post(self.data_path("userGroups"), data=group, timeout=timeout)
            created = UserGroup.model_validate(data)
            self.logger.info("Created user group %s", created.identifier)
            return created

    def get_user_group(self, group_id: str, timeout: TimeoutType = None) -> UserGroup:
        with self._operation("get user group", group_id):
            data, _ = self.get(self.data_path("userGroups", group_id), timeout=timeout)
            return UserGroup.model_validate(data)

    def update_user_group(self, group_id: str, group: UserGroup, timeout: TimeoutType = None) -> None:
        """Replace a user group. ``group_id`` wins over the identifier in ``group``."""
        with self._operation("update user group", group_id):
            self.put(self.data_path("userGroups", group_id), data=group, timeout=timeout)
            self.logger.info("Updated user group %s", group_id)

    def delete_user_group(self, group_id: str, timeout: TimeoutType = None) -> None:
        with self._operation("delete user group", group_id):
            self.delete(self.data_path("userGroups", group_id), timeout=timeout)
            self.logger.info("Deleted user group %s", group_id)

    def get_user_group_permissions(self, group_id: str, timeout: TimeoutType = None) -> Permissions:
        """Get the permissions granted directly to a user group."""
        with self._operation("get user group permissions", group_id):
            data, _ = self.get(self.data_path("userGroups", group_id, "permissions"), timeout=timeout)
            return Permissions.model_validate(data)

    def get_user_group_effective_permissions(self, group_id: str, timeout: TimeoutType = None) -> Permissions:
        """Get the resolved permissions of a user group, including inherited ones."""
        with self._operation("get user group effective permissions", group_id):
            data, _ = self.get(self.data_path("userGroups", group_id, "effectivePermissions"), timeout=timeout)
            return Permissions.model_validate(data)

    def update_user_group_permissions(
        self,
        group_id: str,
        operations: Iterable[PatchOperation],
        timeout: TimeoutType = None,
    ) -> None:
        """Apply permission patch operations to a user group, all or nothing."""
        operations = list(operations)
        with self._operation("update user group permissions", group_id):
            self.patch(self.data_path("userGroups", group_id, "permissions"), data=operations, timeout=timeout)
            self.logger.info("Applied %s permission change(s) to user group %s", len(operations), group_id)

    def _get_memberships(self, operation: str, group_id: str, sub_path: str, timeout: TimeoutType) -> list[str]:
        with self._operation(operation, group_id):
            data, _ = self.get(self.data_path("userGroups", group_id, sub_path), timeout=timeout)
            return list(data or [])

    def _update_memberships(
        self,
        operation: str,
        group_id: str,
        sub_path: str,
        operations: Iterable[PatchOperation],
        timeout: TimeoutType,
    ) -> None:
        operations = list(operations)
        with self._operation(operation, group_id):
            self.patch(self.data_path("userGroups", group_id, sub_path), data=operations, timeout=timeout)
            self.logger.info("Applied %s change(s) to %s of user group %s", len(operations), sub_path, group_id)

    def get_user_group_member_users(self, group_id: str, timeout: TimeoutType = None) -> list[str]:
        """Get the usernames of the users in a group."""
        return self._get_memberships("get member users of user group", group_id, "memberUsers", timeout)

    def update_user_group_member_users(
        self,
        group_id: str,
        operations: Iterable[PatchOperation],
        timeout: TimeoutType = None,
    ) -> None:
        """Add or remove users of a group, using add/remove_group_membership operations."""
        self._update_memberships("update member users of user group", group_id, "memberUsers", operations, timeout)

    def get_user_group_member_groups(self, group_id: str, timeout: TimeoutType = None) -> list[str]:
        """Get the identifiers of the groups contained in a group."""
        return self._get_memberships("get member groups of user group", group_id, "memberUserGroups", timeout)

    def update_user_group_member_groups(
        self,
        group_id: str,
        operations: Iterable[PatchOperation],
        timeout: TimeoutType = None,
    ) -> None:
        self._update_memberships(
            "update member groups of user group", group_id, "memberUserGroups", operations, timeout
        )

    def get_user_group_parent_groups(self, group_id: str, timeout: TimeoutType = None) -> list[str]:
        """Get the identifiers of the groups this group is a member of."""
        return self._get_memberships("get parent groups of user group", group_id, "userGroups", timeout)

    def update_user_group_parent_groups(
        self,
        group_id: str,
        operations: Iterable[PatchOperation],
        timeout: TimeoutType = None,
    ) -> None:
        self._update_memberships("update parent groups of user group", group_id, "userGroups", operations, timeout)

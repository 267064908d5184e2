"""Connection group operations."""

from guacamole_client.clients.base import TimeoutType
from guacamole_client.clients.resource import ResourceMixin, parse_map
from guacamole_client.models.connection import ROOT_CONNECTION_GROUP, ConnectionGroup


class ConnectionGroupsMixin(ResourceMixin):
    """Operations on ``/connectionGroups``."""

    def list_connection_groups(self, timeout: TimeoutType = None) -> dict[str, ConnectionGroup]:
        """Get all connection groups visible to the authenticated user, keyed by identifier."""
        with self._operation("list connection groups"):
            data, _ = self.get(self.data_path("connectionGroups"), timeout=timeout)
            return parse_map(ConnectionGroup, data)

    def get_connection_group_tree(
        self,
        root_id: str = ROOT_CONNECTION_GROUP,
        timeout: TimeoutType = None,
    ) -> ConnectionGroup:
        """Get a connection group with all nested groups and connections.

        Args:
            root_id: Group to start from. The default ROOT returns the whole
                topology.
            timeout: Request timeout

        Returns:
            ConnectionGroup: The group, with child_connections and
            child_connection_groups filled in recursively

        Raises:
            OperationError: If the tree cannot be fetched
        """
        with self._operation("get connection group tree", root_id):
            data, _ = self.get(self.data_path("connectionGroups", root_id, "tree"), timeout=timeout)
            return ConnectionGroup.model_validate(data)

    def create_connection_group(self, group: ConnectionGroup, timeout: TimeoutType = None) -> ConnectionGroup:
        """Create a connection group and return it with its server-assigned identifier."""
        with self._operation("create connection group", group.name):
            data, _ = self.post(self.data_path("connectionGroups"), data=group, timeout=timeout)
            created = ConnectionGroup.model_validate(data)
            self.logger.info("Created connection group %s with ID %s", created.name, created.identifier)
            return created

    def get_connection_group(self, group_id: str, timeout: TimeoutType = None) -> ConnectionGroup:
        with self._operation("get connection group", group_id):
            data, _ = self.get(self.data_path("connectionGroups", group_id), timeout=timeout)
            return ConnectionGroup.model_validate(data)

    def update_connection_group(self, group_id: str, group: ConnectionGroup, timeout: TimeoutType = None) -> None:
        """Replace a connection group. ``group_id`` wins over the identifier in ``group``."""
        with self._operation("update connection group", group_id):
            self.put(self.data_path("connectionGroups", group_id), data=group, timeout=timeout)
            self.logger.info("Updated connection group %s", group_id)

    def delete_connection_group(self, group_id: str, timeout: TimeoutType = None) -> None:
        with self._operation("delete connection group", group_id):
            self.delete(self.data_path("connectionGroups", group_id), timeout=timeout)
            self.logger.info("Deleted connection group %s", group_id)

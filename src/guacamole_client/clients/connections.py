"""Connection and sharing profile operations."""

from guacamole_client.clients.base import TimeoutType
from guacamole_client.clients.resource import ResourceMixin, parse_list, parse_map
from guacamole_client.models.activity import HistoryEntry
from guacamole_client.models.connection import Connection, SharingProfile


class ConnectionsMixin(ResourceMixin):
    """Operations on ``/connections``."""

    def list_connections(self, timeout: TimeoutType = None) -> dict[str, Connection]:
        """Get all connections visible to the authenticated user.

        Args:
            timeout: Request timeout

        Returns:
            Dict[str, Connection]: Connections keyed by identifier

        Raises:
            OperationError: If listing connections fails
        """
        with self._operation("list connections"):
            data, _ = self.get(self.data_path("connections"), timeout=timeout)
            return parse_map(Connection, data)

    def create_connection(self, connection: Connection, timeout: TimeoutType = None) -> Connection:
        """Create a connection.

        Args:
            connection: Connection to create, including its parameters
            timeout: Request timeout

        Returns:
            Connection: Created connection with its server-assigned identifier

        Raises:
            OperationError: If connection creation fails
        """
        with self._operation("create connection", connection.name):
            data, _ = self.post(self.data_path("connections"), data=connection, timeout=timeout)
            created = Connection.model_validate(data)
            self.logger.info("Created connection %s with ID %s", created.name, created.identifier)
            return created

    def get_connection(self, connection_id: str, timeout: TimeoutType = None) -> Connection:
        """Get a connection by identifier.

        The returned connection never carries protocol parameters, use
        get_connection_parameters for those.

        Args:
            connection_id: Connection ID
            timeout: Request timeout

        Returns:
            Connection: The connection

        Raises:
            OperationError: If the connection cannot be fetched
        """
        with self._operation("get connection", connection_id):
            data, _ = self.get(self.data_path("connections", connection_id), timeout=timeout)
            return Connection.model_validate(data)

    def get_connection_parameters(self, connection_id: str, timeout: TimeoutType = None) -> dict[str, str]:
        """Get the protocol parameters (hostname, port, ...) of a connection."""
        with self._operation("get connection parameters", connection_id):
            data, _ = self.get(self.data_path("connections", connection_id, "parameters"), timeout=timeout)
            return dict(data or {})

    def update_connection(self, connection_id: str, connection: Connection, timeout: TimeoutType = None) -> None:
        """Replace a connection.

        The identifier inside ``connection`` is ignored, ``connection_id``
        selects the connection to replace.

        Args:
            connection_id: Connection ID
            connection: New connection definition
            timeout: Request timeout

        Raises:
            OperationError: If the update fails
        """
        with self._operation("update connection", connection_id):
            self.put(self.data_path("connections", connection_id), data=connection, timeout=timeout)
            self.logger.info("Updated connection %s", connection_id)

    def delete_connection(self, connection_id: str, timeout: TimeoutType = None) -> None:
        """Delete a connection.

        Args:
            connection_id: Connection ID
            timeout: Request timeout

        Raises:
            OperationError: If connection deletion fails
        """
        with self._operation("delete connection", connection_id):
            self.delete(self.data_path("connections", connection_id), timeout=timeout)
            self.logger.info("Deleted connection %s", connection_id)

    def get_connection_history(self, connection_id: str, timeout: TimeoutType = None) -> list[HistoryEntry]:
        """Get the usage history of one connection."""
        with self._operation("get connection history", connection_id):
            data, _ = self.get(self.data_path("connections", connection_id, "history"), timeout=timeout)
            return parse_list(HistoryEntry, data)


class SharingProfilesMixin(ResourceMixin):
    """Operations on ``/sharingProfiles``."""

    def list_sharing_profiles(self, timeout: TimeoutType = None) -> dict[str, SharingProfile]:
        with self._operation("list sharing profiles"):
            data, _ = self.get(self.data_path("sharingProfiles"), timeout=timeout)
            return parse_map(SharingProfile, data)

    def create_sharing_profile(self, profile: SharingProfile, timeout: TimeoutType = None) -> SharingProfile:
        """Create a sharing profile and return it with its server-assigned identifier."""
        with self._operation("create sharing profile", profile.name):
            data, _ = self.post(self.data_path("sharingProfiles"), data=profile, timeout=timeout)
            created = SharingProfile.model_validate(data)
            self.logger.info(
                "Created sharing profile %s for connection %s with ID %s",
                created.name,
                created.primary_connection_identifier,
                created.identifier,
            )
            return created

    def get_sharing_profile(self, profile_id: str, timeout: TimeoutType = None) -> SharingProfile:
        with self._operation("get sharing profile", profile_id):
            data, _ = self.get(self.data_path("sharingProfiles", profile_id), timeout=timeout)
            return SharingProfile.model_validate(data)

    def get_sharing_profile_parameters(self, profile_id: str, timeout: TimeoutType = None) -> dict[str, str]:
        """Get the connection parameters a sharing profile overrides."""
        with self._operation("get sharing profile parameters", profile_id):
            data, _ = self.get(self.data_path("sharingProfiles", profile_id, "parameters"), timeout=timeout)
            return dict(data or {})

    def update_sharing_profile(self, profile_id: str, profile: SharingProfile, timeout: TimeoutType = None) -> None:
        """Replace a sharing profile. ``profile_id`` wins over the identifier in ``profile``."""
        with self._operation("update sharing profile", profile_id):
            self.put(self.data_path("sharingProfiles", profile_id), data=profile, timeout=timeout)
            self.logger.info("Updated sharing profile %s", profile_id)

    def delete_sharing_profile(self, profile_id: str, timeout: TimeoutType = None) -> None:
        with self._operation("delete sharing profile", profile_id):
            self.delete(self.data_path("sharingProfiles", profile_id), timeout=timeout)
            self.logger.info("Deleted sharing profile %s", profile_id)

"""Active connection, history and self operations."""

from guacamole_client.clients.base import TimeoutType
from guacamole_client.clients.resource import ResourceMixin, parse_list, parse_map
from guacamole_client.models.activity import ActiveConnection, HistoryEntry
from guacamole_client.models.user import CurrentUser, Permissions


HISTORY_ORDER_ASCENDING = "startDate"
HISTORY_ORDER_DESCENDING = "-startDate"


class ActiveConnectionsMixin(ResourceMixin):
    """Operations on ``/activeConnections``. There is no create or update."""

    def list_active_connections(self, timeout: TimeoutType = None) -> dict[str, ActiveConnection]:
        """Get all connections currently in use, keyed by active connection identifier."""
        with self._operation("list active connections"):
            data, _ = self.get(self.data_path("activeConnections"), timeout=timeout)
            return parse_map(ActiveConnection, data)

    def kill_active_connection(self, active_connection_id: str, timeout: TimeoutType = None) -> None:
        """Forcibly terminate an active connection.

        Args:
            active_connection_id: Identifier from list_active_connections,
                not the connection identifier
            timeout: Request timeout

        Raises:
            OperationError: If the connection cannot be terminated
        """
        with self._operation("kill active connection", active_connection_id):
            self.delete(self.data_path("activeConnections", active_connection_id), timeout=timeout)
            self.logger.info("Killed active connection %s", active_connection_id)


class HistoryMixin(ResourceMixin):
    """Read-only access to ``/history``."""

    def list_connection_history(self, order: str | None = None, timeout: TimeoutType = None) -> list[HistoryEntry]:
        """Get the global connection history.

        Args:
            order: HISTORY_ORDER_ASCENDING or HISTORY_ORDER_DESCENDING, or
                None for the server default
            timeout: Request timeout

        Returns:
            List[HistoryEntry]: History records
        """
        params = {"order": order} if order else None
        with self._operation("list connection history"):
            data, _ = self.get(self.data_path("history", "connections"), params=params, timeout=timeout)
            return parse_list(HistoryEntry, data)


class SelfMixin(ResourceMixin):
    """Read-only access to the authenticated identity (``/self``)."""

    def get_self(self, timeout: TimeoutType = None) -> CurrentUser:
        with self._operation("get self"):
            data, _ = self.get(self.data_path("self"), timeout=timeout)
            return CurrentUser.model_validate(data)

    def get_self_permissions(self, timeout: TimeoutType = None) -> Permissions:
        with self._operation("get self permissions"):
            data, _ = self.get(self.data_path("self", "permissions"), timeout=timeout)
            return Permissions.model_validate(data)

    def get_self_effective_permissions(self, timeout: TimeoutType = None) -> Permissions:
        with self._operation("get self effective permissions"):
            data, _ = self.get(self.data_path("self", "effectivePermissions"), timeout=timeout)
            return Permissions.model_validate(data)

"""Connection and connection group models."""

from typing import Final, Literal, Optional

from pydantic import Field

from guacamole_client.models.base import GuacamoleModel, NullableStringMap


CONNECTION_GROUP_TYPE_ORGANIZATIONAL: Final = "ORGANIZATIONAL"
CONNECTION_GROUP_TYPE_BALANCING: Final = "BALANCING"

ConnectionGroupType = Literal[CONNECTION_GROUP_TYPE_ORGANIZATIONAL, CONNECTION_GROUP_TYPE_BALANCING]

# Parent of all top-level connections and groups.
ROOT_CONNECTION_GROUP = "ROOT"


class Connection(GuacamoleModel):
    """A remote desktop connection.

    ``parameters`` holds the protocol settings (hostname, port, credentials).
    It is only sent on create/update; the API never embeds it on read, use
    ``GuacamoleClient.get_connection_parameters`` for that.
    """

    identifier: Optional[str] = None
    name: str
    parent_identifier: Optional[str] = None
    protocol: str
    parameters: Optional[dict[str, str]] = None
    attributes: NullableStringMap = Field(default_factory=dict)
    active_connections: Optional[int] = None


class ConnectionGroup(GuacamoleModel):
    """An organizational or load-balancing group of connections.

    The child lists are only populated by the tree endpoint.
    """

    identifier: Optional[str] = None
    name: str
    parent_identifier: Optional[str] = None
    type: ConnectionGroupType = CONNECTION_GROUP_TYPE_ORGANIZATIONAL
    attributes: NullableStringMap = Field(default_factory=dict)
    active_connections: Optional[int] = None
    child_connections: Optional[list[Connection]] = None
    child_connection_groups: Optional[list["ConnectionGroup"]] = None

    def walk(self):
        """Yield this group and every nested group, depth first."""
        yield self
        for child in self.child_connection_groups or []:
            yield from child.walk()

    def all_connections(self) -> list[Connection]:
        """Return the connections of this group and all nested groups."""
        connections: list[Connection] = []
        for group in self.walk():
            connections.extend(group.child_connections or [])
        return connections


class SharingProfile(GuacamoleModel):
    """A sharing profile attached to a connection.

    Defines the parameters used when a session of the primary connection is
    shared, most commonly ``{"read-only": "true"}``.
    """

    identifier: Optional[str] = None
    name: str
    primary_connection_identifier: str
    parameters: Optional[dict[str, str]] = None
    attributes: NullableStringMap = Field(default_factory=dict)

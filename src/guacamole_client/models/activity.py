"""Models for live sessions and the connection history log."""

from typing import Optional

from guacamole_client.models.base import GuacamoleModel


class ActiveConnection(GuacamoleModel):
    """A connection that is currently in use."""

    identifier: str
    connection_identifier: Optional[str] = None
    start_date: Optional[int] = None
    remote_host: Optional[str] = None
    username: Optional[str] = None
    active: bool = True


class HistoryEntry(GuacamoleModel):
    """One record of the connection history log.

    ``end_date`` is None (or 0) while the session is still active.
    """

    identifier: Optional[str] = None
    uuid: Optional[str] = None
    username: Optional[str] = None
    remote_host: Optional[str] = None
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    active: bool = False

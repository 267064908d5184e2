"""Client modules for guacamole-client.

This package provides:
- BaseClient: The JSON request pipeline and error classification
- GuacamoleClient: The Apache Guacamole REST API client
"""

from guacamole_client.clients.activity import HISTORY_ORDER_ASCENDING, HISTORY_ORDER_DESCENDING
from guacamole_client.clients.base import BaseClient
from guacamole_client.clients.guacamole import TOKEN_HEADER, GuacamoleClient


__all__ = [
    "HISTORY_ORDER_ASCENDING",
    "HISTORY_ORDER_DESCENDING",
    "TOKEN_HEADER",
    "BaseClient",
    "GuacamoleClient",
]

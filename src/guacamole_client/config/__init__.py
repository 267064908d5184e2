"""Configuration for guacamole-client."""

from guacamole_client.config.settings import Settings, get_settings


__all__ = ["Settings", "get_settings"]

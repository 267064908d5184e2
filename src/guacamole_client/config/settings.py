from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # Guacamole settings
    URL: str = "http://localhost:8080/guacamole"
    TIMEOUT: float = 30.0
    VERIFY_SSL: bool = True

    model_config = SettingsConfigDict(env_prefix="GUACAMOLE_", env_file=None, case_sensitive=True)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Returns:
        Settings: The client settings instance
    """
    return Settings()

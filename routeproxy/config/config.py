from pydantic_settings import BaseSettings, SettingsConfigDict

from routeproxy import __version__


class Settings(BaseSettings):
    # HERE platform credential, never sent to the browser
    here_api_key: str = ""

    # API configuration
    api_version: str = __version__
    cors_origin: str = "http://localhost:5173"

    # Outbound call limits
    upstream_timeout_seconds: float = 10.0

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


class ClientSettings(BaseSettings):
    """Settings for callers of the proxy."""

    public_backend_url: str = "http://localhost:8000"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()

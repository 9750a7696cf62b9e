from .config import ClientSettings, Settings, settings
from .log_config import configure_logging

__all__ = ["ClientSettings", "Settings", "settings", "configure_logging"]

# Map service package
from .map_service import MapService
from .here_map_service import HereMapService
from .exceptions import (
    UpstreamError,
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)

__all__ = [
    "MapService",
    "HereMapService",
    "UpstreamError",
    "UpstreamStatusError",
    "UpstreamTimeoutError",
    "UpstreamUnavailableError",
]

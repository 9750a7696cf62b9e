from .request import GeoPoint, RouteRequest
from .response import ErrorResponse

__all__ = ["GeoPoint", "RouteRequest", "ErrorResponse"]

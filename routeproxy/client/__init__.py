"""Async client for the route proxy API."""
from .api import BackendRequestError, RouteProxyClient

__all__ = ["BackendRequestError", "RouteProxyClient"]

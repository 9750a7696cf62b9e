"""Errors raised when a call to the mapping provider does not yield usable JSON."""
from typing import Optional


class UpstreamError(Exception):
    """Base error carrying the status and message the proxy responds with."""

    status_code: int = 502

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class UpstreamStatusError(UpstreamError):
    """Upstream answered with a non-success status."""


class UpstreamTimeoutError(UpstreamError):
    status_code = 504

    def __init__(self, message: str = "Upstream request timed out") -> None:
        super().__init__(message)


class UpstreamUnavailableError(UpstreamError):
    """Transport failure, or a body that is not JSON."""

    def __init__(self, message: str = "Upstream service unavailable") -> None:
        super().__init__(message)

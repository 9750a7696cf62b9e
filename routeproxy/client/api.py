"""Client for the route proxy endpoints; mirrors /api/route, /api/traffic and /api/road-attributes."""
from __future__ import annotations

from typing import Any, Mapping, Optional, Union

import httpx

from routeproxy.config import ClientSettings
from routeproxy.models.request import GeoPoint

PointLike = Union[GeoPoint, Mapping[str, float]]


class BackendRequestError(RuntimeError):
    """Raised when the proxy answers with a non-success status."""

    def __init__(self, message: str, status_code: int) -> None:
        super().__init__(message)
        self.status_code = status_code


class RouteProxyClient:
    """Thin async wrapper; returns decoded JSON or raises BackendRequestError."""

    def __init__(
        self,
        *,
        base_url: Optional[str] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        self._base_url = (base_url or ClientSettings().public_backend_url).rstrip("/")
        self._client = client

    async def calculate_route(self, start: PointLike, end: PointLike) -> Any:
        payload = {"start": _point_payload(start), "end": _point_payload(end)}
        response = await self._send("POST", "/api/route", json=payload)
        return _decode(response, "Failed to calculate route")

    async def fetch_traffic(self, bbox: str) -> Any:
        response = await self._send("GET", "/api/traffic", params={"bbox": bbox})
        return _decode(response, "Failed to fetch traffic data")

    async def fetch_road_attributes(self, lat: float, lng: float) -> Any:
        response = await self._send(
            "GET", "/api/road-attributes", params={"lat": lat, "lon": lng}
        )
        return _decode(response, "Failed to fetch road attributes")

    async def _send(self, method: str, path: str, **kwargs: Any) -> httpx.Response:
        url = f"{self._base_url}{path}"
        if self._client is not None:
            return await self._client.request(method, url, **kwargs)
        async with httpx.AsyncClient() as client:
            return await client.request(method, url, **kwargs)


def _point_payload(point: PointLike) -> dict:
    if isinstance(point, GeoPoint):
        return point.model_dump()
    return {"lat": point["lat"], "lng": point["lng"]}


def _decode(response: httpx.Response, failure_message: str) -> Any:
    if not response.is_success:
        raise BackendRequestError(failure_message, response.status_code)
    return response.json()

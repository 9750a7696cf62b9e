import logging
from typing import Any, Dict, Optional

import httpx

from routeproxy.config import Settings, settings as default_settings
from routeproxy.models.request import GeoPoint
from routeproxy.services.map.exceptions import (
    UpstreamStatusError,
    UpstreamTimeoutError,
    UpstreamUnavailableError,
)
from routeproxy.services.map.map_service import MapService

logger = logging.getLogger(__name__)

ROUTE_RETURN_FIELDS = "polyline,summary,actions,instructions"

ROAD_ATTRIBUTE_LAYERS = [
    "ROAD_GEOM_FC1",
    "SPEED_LIMITS_FC1",
    "TRUCK_SPEED_LIMITS_FC1",
    "LINK_ATTRIBUTE_FC1",
    "SLOPES_FC1",
]


class HereMapService(MapService):
    """HERE platform implementation of the map service"""

    def __init__(
        self,
        config: Optional[Settings] = None,
        *,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        config = config or default_settings
        self.api_key = config.here_api_key
        self.timeout = config.upstream_timeout_seconds
        self.routes_url = "https://router.hereapi.com/v8/routes"
        self.traffic_flow_url = "https://data.traffic.hereapi.com/v7/flow"
        self.attributes_url = "https://tcs.hereapi.com/v2/col/attributes"
        self._transport = transport

        if not self.api_key:
            raise ValueError("HERE API Key is required")

    async def calculate_route(self, start: GeoPoint, end: GeoPoint) -> Any:
        """Compute a car route with HERE Routing API v8"""
        params = {
            "transportMode": "car",
            "origin": start.as_param(),
            "destination": end.as_param(),
            "return": ROUTE_RETURN_FIELDS,
            "apiKey": self.api_key,
        }
        return await self._get_json(
            self.routes_url, params, failure_message="Failed to calculate route"
        )

    async def get_traffic_flow(self, bbox: str) -> Any:
        """Fetch flow data from HERE Traffic API v7 with shape referencing"""
        params = {
            "in": f"bbox:{bbox}",
            "locationReferencing": "shape",
            "apiKey": self.api_key,
        }
        return await self._get_json(
            self.traffic_flow_url, params, failure_message="Failed to fetch traffic data"
        )

    async def get_road_attributes(self, lat: str, lon: str) -> Any:
        """Look up the configured attribute layers at a point (HERE Map Attributes API)"""
        # The attributes API spells the key parameter in lowercase
        params = {
            "layer_ids": ",".join(ROAD_ATTRIBUTE_LAYERS),
            "coordinates": f"{lat},{lon}",
            "apikey": self.api_key,
        }
        return await self._get_json(
            self.attributes_url, params, failure_message="Failed to fetch road attributes"
        )

    async def _get_json(
        self, url: str, params: Dict[str, str], *, failure_message: str
    ) -> Any:
        """Issue one GET and return the decoded JSON body.

        Raises:
            UpstreamStatusError: non-success status; 4xx/5xx are forwarded,
                anything else becomes 502. The body is not read.
            UpstreamTimeoutError: no response within the configured timeout.
            UpstreamUnavailableError: transport failure or a non-JSON body.
        """
        logger.info("Requesting %s", url)
        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout
            ) as client:
                response = await client.get(url, params=params)
        except httpx.TimeoutException as exc:
            logger.error("Timed out after %ss waiting for %s", self.timeout, url)
            raise UpstreamTimeoutError() from exc
        except httpx.HTTPError as exc:
            logger.error("Request to %s failed: %s", url, type(exc).__name__)
            raise UpstreamUnavailableError() from exc

        if not response.is_success:
            logger.warning("%s responded with status %s", url, response.status_code)
            status_code = response.status_code if response.status_code >= 400 else 502
            raise UpstreamStatusError(failure_message, status_code=status_code)

        try:
            return response.json()
        except ValueError as exc:
            logger.error("%s returned a body that is not valid JSON", url)
            raise UpstreamUnavailableError() from exc

from abc import ABC, abstractmethod
from typing import Any

from routeproxy.models.request import GeoPoint


class MapService(ABC):
    """Map service abstract interface"""

    @abstractmethod
    async def calculate_route(self, start: GeoPoint, end: GeoPoint) -> Any:
        """Get a car route between two points

        Args:
            start: Origin point
            end: Destination point
        """
        pass

    @abstractmethod
    async def get_traffic_flow(self, bbox: str) -> Any:
        """Get real-time traffic flow inside a bounding box

        Args:
            bbox: "west,south,east,north", forwarded as given
        """
        pass

    @abstractmethod
    async def get_road_attributes(self, lat: str, lon: str) -> Any:
        """Get road attributes at a point; coordinates are forwarded as raw strings"""
        pass

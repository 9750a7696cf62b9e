from decimal import Decimal
from typing import Any, Optional
from pydantic import BaseModel, model_validator


def format_coordinate(value: float) -> str:
    """Plain decimal text for a coordinate, never exponent notation."""
    return format(Decimal(repr(value)), "f")


class GeoPoint(BaseModel):
    lat: float
    lng: float

    def as_param(self) -> str:
        """Format as the `lat,lng` pair HERE expects."""
        return f"{format_coordinate(self.lat)},{format_coordinate(self.lng)}"


class RouteRequest(BaseModel):
    # Presence is checked by the route handler so a missing point
    # gets the fixed 400 message rather than a schema error.
    start: Optional[GeoPoint] = None
    end: Optional[GeoPoint] = None

    @model_validator(mode="before")
    @classmethod
    def drop_points_when_one_is_missing(cls, data: Any) -> Any:
        # A missing point wins over a malformed one
        if isinstance(data, dict) and (data.get("start") is None or data.get("end") is None):
            return {"start": None, "end": None}
        return data

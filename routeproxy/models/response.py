"""
Response models for the proxy API.
Upstream payloads are passed through untouched and have no model here.
"""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned for every non-success response"""
    error: str


class HealthResponse(BaseModel):
    status: str = "healthy"
    version: str

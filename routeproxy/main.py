import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from routeproxy.config import settings, configure_logging
from routeproxy.models.request import RouteRequest
from routeproxy.models.response import ErrorResponse, HealthResponse
from routeproxy.services.map import HereMapService, MapService, UpstreamError

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # Built once per process; fails fast when HERE_API_KEY is unset
    app.state.map_service = HereMapService(settings)
    logger.info("Route proxy ready, accepting browser origin %s", settings.cors_origin)
    yield


app = FastAPI(
    title="Route Proxy API",
    description="Keeps the HERE API key on the server for routing, traffic and road data",
    version=settings.api_version,
    lifespan=lifespan,
)


class ApiCORSMiddleware(CORSMiddleware):
    """CORS policy applied to /api/* only; other paths pass through untouched"""

    async def __call__(self, scope, receive, send) -> None:
        if scope["type"] == "http" and not scope["path"].startswith("/api/"):
            await self.app(scope, receive, send)
            return
        await super().__call__(scope, receive, send)


# Only the frontend origin may call the API from a browser
app.add_middleware(
    ApiCORSMiddleware,
    allow_origins=[settings.cors_origin],
    allow_methods=["POST", "GET", "OPTIONS"],
    allow_headers=["Content-Type"],
)


def get_map_service(request: Request) -> MapService:
    return request.app.state.map_service


def error_response(message: str, status_code: int) -> JSONResponse:
    return JSONResponse(
        status_code=status_code, content=ErrorResponse(error=message).model_dump()
    )


@app.exception_handler(UpstreamError)
async def upstream_error_handler(request: Request, exc: UpstreamError) -> JSONResponse:
    return error_response(exc.message, exc.status_code)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejected %s %s: invalid parameters", request.method, request.url.path)
    return error_response("Invalid request parameters", 400)


@app.post("/api/route")
async def calculate_route(
    payload: Optional[RouteRequest] = None,
    map_service: MapService = Depends(get_map_service),
):
    """Car route between two points, upstream body passed through"""
    if payload is None or payload.start is None or payload.end is None:
        logger.info("Route request rejected: missing start or end")
        return error_response("Start and end points are required", 400)

    data = await map_service.calculate_route(payload.start, payload.end)
    return JSONResponse(content=data)


@app.get("/api/traffic")
async def get_traffic(
    bbox: Optional[str] = None,
    map_service: MapService = Depends(get_map_service),
):
    """Real-time traffic flow for ?bbox=west,south,east,north"""
    if not bbox:
        logger.info("Traffic request rejected: missing bbox")
        return error_response("Bounding box (bbox) is required", 400)

    data = await map_service.get_traffic_flow(bbox)
    return JSONResponse(content=data)


@app.get("/api/road-attributes")
async def get_road_attributes(
    lat: Optional[str] = None,
    lon: Optional[str] = None,
    map_service: MapService = Depends(get_map_service),
):
    """Road profile (geometry, speed limits, slopes) at ?lat=&lon="""
    if not lat or not lon:
        logger.info("Road attributes request rejected: missing lat or lon")
        return error_response("Latitude and Longitude are required", 400)

    data = await map_service.get_road_attributes(lat, lon)
    return JSONResponse(content=data)


@app.get("/health", response_model=HealthResponse)
async def health_check():
    """Health check"""
    return HealthResponse(version=settings.api_version)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=settings.host, port=settings.port)

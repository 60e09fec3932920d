"""
FastAPI routes for light-aware route variants.

Handlers that reach the directions provider are plain ``def`` functions so
the blocking HTTP call runs in FastAPI's threadpool.
"""

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import JSONResponse

from light_aware_routing.data import GeoPoint, RouteCandidate
from light_aware_routing.providers import DirectionsError
from api.schemas.routing import (
    CandidateRequest,
    ErrorResponse,
    HealthResponse,
    RoutesResponse,
    RouteVariantModel,
    VariantsRequest,
    VariantsResponse
)
from api.services.routing_service import LightRoutingService, NoRoutesFoundError

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api/routes", tags=["routes"])


def get_routing_service(request: Request) -> LightRoutingService:
    """Routing service created at application startup."""
    return request.app.state.routing_service


def _to_candidate(item: CandidateRequest) -> RouteCandidate:
    return RouteCandidate(
        path=[GeoPoint(p.lat, p.lng) for p in item.path],
        distance_km=item.distance_km,
        duration_minutes=item.duration_minutes,
        intersections=([GeoPoint(p.lat, p.lng) for p in item.intersections]
                       if item.intersections is not None else None),
        max_speed=item.max_speed,
        distance_text=item.distance_text,
        duration_text=item.duration_text,
    )


def _error(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    body = {"error": error}
    if details is not None:
        body["details"] = details
    return JSONResponse(status_code=status_code, content=body)


@router.get(
    "",
    response_model=RoutesResponse,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
    summary="Fastest, Balanced and Most-Lit Routes"
)
def get_routes(start: Optional[str] = None, end: Optional[str] = None,
               service: LightRoutingService = Depends(get_routing_service)):
    """
    Fetch walking routes between two places and label the fastest, balanced
    and most well-lit of them.

    Args:
        start: Origin (address or "lat,lng")
        end: Destination (address or "lat,lng")

    Returns:
        RoutesResponse with exactly three variants
    """
    if not start or not end:
        return _error(status.HTTP_400_BAD_REQUEST, "Missing query params: start, end")

    try:
        variants = service.get_route_variants(start, end)
    except NoRoutesFoundError:
        return _error(status.HTTP_404_NOT_FOUND, "No routes found")
    except (DirectionsError, ValueError) as e:
        logger.error(f"Error in /api/routes: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to compute routes", str(e))

    return RoutesResponse(
        start=start,
        end=end,
        routes=[RouteVariantModel(**v.to_dict()) for v in variants]
    )


@router.get("/geojson", summary="Route Variants as GeoJSON")
def get_routes_geojson(start: Optional[str] = None, end: Optional[str] = None,
                       service: LightRoutingService = Depends(get_routing_service)):
    """Same as ``GET /api/routes`` but returns a GeoJSON FeatureCollection."""
    if not start or not end:
        return _error(status.HTTP_400_BAD_REQUEST, "Missing query params: start, end")

    try:
        variants = service.get_route_variants(start, end)
    except NoRoutesFoundError:
        return _error(status.HTTP_404_NOT_FOUND, "No routes found")
    except (DirectionsError, ValueError) as e:
        logger.error(f"Error in /api/routes/geojson: {e}")
        return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Failed to compute routes", str(e))

    return service.variants_to_geojson(variants)


@router.post("/variants", response_model=VariantsResponse, summary="Score Supplied Candidates")
def select_variants(request: VariantsRequest,
                    service: LightRoutingService = Depends(get_routing_service)):
    """
    Score client-supplied candidate routes and pick the three variants,
    without calling the directions provider.
    """
    candidates = [_to_candidate(item) for item in request.candidates]
    try:
        variants = service.select_variants(candidates)
    except ValueError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return VariantsResponse(routes=[RouteVariantModel(**v.to_dict()) for v in variants])


@router.get("/health", response_model=HealthResponse, summary="Health Check")
def health_check(service: LightRoutingService = Depends(get_routing_service)):
    """
    Check the health status of the routing service.

    Returns:
        HealthResponse: Service health information
    """
    return service.get_health_status()

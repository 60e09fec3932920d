"""
Pydantic schemas for the light-aware routing API.
"""

from typing import List, Optional

from pydantic import BaseModel, Field, validator


class GeoPointModel(BaseModel):
    """A waypoint in decimal degrees."""
    lat: float = Field(..., ge=-90, le=90, description="Latitude")
    lng: float = Field(..., ge=-180, le=180, description="Longitude")


class RouteVariantModel(BaseModel):
    """One labeled route choice."""
    id: str = Field(..., description="Variant id: 'fastest', 'balanced' or 'most-lit'")
    label: str = Field(..., description="Display label")
    distance_km: Optional[float] = Field(default=None, description="Route length in kilometres")
    duration_minutes: float = Field(..., description="Walking time in minutes")
    distance_text: Optional[str] = Field(default=None, description="Provider distance text")
    duration_text: Optional[str] = Field(default=None, description="Provider duration text")
    light_score: float = Field(..., description="Light score from 0 (dark) to 10 (well lit)")
    max_speed: Optional[float] = Field(default=None, description="Highest speed limit along the route")
    path: List[GeoPointModel] = Field(default_factory=list, description="Route waypoints")
    intersections: Optional[List[GeoPointModel]] = Field(default=None, description="Turn points")


class RoutesResponse(BaseModel):
    """Response model for route variant calculation."""
    start: str = Field(..., description="Origin as requested")
    end: str = Field(..., description="Destination as requested")
    routes: List[RouteVariantModel] = Field(..., description="Fastest, balanced and most-lit variants")


class VariantsResponse(BaseModel):
    """Response model for variants picked from client-supplied candidates."""
    routes: List[RouteVariantModel] = Field(..., description="Fastest, balanced and most-lit variants")


class CandidateRequest(BaseModel):
    """A route candidate supplied directly by the client."""
    path: List[GeoPointModel] = Field(default_factory=list, description="Route waypoints")
    distance_km: Optional[float] = Field(default=None, ge=0, description="Route length in kilometres")
    duration_minutes: float = Field(..., ge=0, description="Walking time in minutes")
    intersections: Optional[List[GeoPointModel]] = Field(default=None, description="Turn points")
    max_speed: Optional[float] = Field(default=None, ge=0, description="Highest speed limit along the route")
    distance_text: Optional[str] = None
    duration_text: Optional[str] = None


class VariantsRequest(BaseModel):
    """Request model for selecting variants from client-supplied candidates."""
    candidates: List[CandidateRequest] = Field(..., description="Candidate routes to score")

    @validator('candidates')
    def validate_not_empty(cls, v):
        """At least one candidate is needed to pick variants."""
        if not v:
            raise ValueError('At least one candidate is required')
        return v


class HealthResponse(BaseModel):
    """Health check response."""
    status: str = Field(..., description="Service status")
    version: str = Field(..., description="API version")
    streetlights_loaded: bool = Field(..., description="Whether streetlight data is loaded")
    streetlight_count: int = Field(..., description="Number of streetlights in the index")
    scoring_method: str = Field(..., description="Active light scoring method")
    directions_configured: bool = Field(..., description="Whether a directions API key is set")


class ErrorResponse(BaseModel):
    """Error response model."""
    error: str = Field(..., description="Error message")
    details: Optional[str] = Field(None, description="Additional error details")

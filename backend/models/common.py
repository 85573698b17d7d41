"""
Common/Base models used across multiple domains
"""
from typing import Annotated, List

from pydantic import AfterValidator, BaseModel, Field

# Finite degrees; numeric strings are rejected
Coordinate = Annotated[float, Field(strict=True, allow_inf_nan=False)]


def check_lat_lng(value: List[float]) -> List[float]:
    lat, lng = value
    if not -90.0 <= lat <= 90.0:
        raise ValueError(f"latitude must be within [-90, 90], got {lat}")
    if not -180.0 <= lng <= 180.0:
        raise ValueError(f"longitude must be within [-180, 180], got {lng}")
    return value


# [lat, lng] in degrees
LatLng = Annotated[List[Coordinate], Field(min_length=2, max_length=2), AfterValidator(check_lat_lng)]


class HealthResponse(BaseModel):
    """Health check response"""
    status: str
    timestamp: str


class ApiInfoResponse(BaseModel):
    """API information response"""
    message: str
    version: str
    status: str

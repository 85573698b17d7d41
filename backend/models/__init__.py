"""
Centralized model imports for easy access across the application
"""

# Common models
from .common import (
    LatLng,
    HealthResponse,
    ApiInfoResponse
)

# Map generation models
from .genmap import (
    WarningAreaCircle,
    WarningAreaArc,
    TyphoonTrack,
    GenMapRequest,
    GenMapResponse
)

# Error models
from .errors import (
    ErrorDetail,
    ErrorResponse
)

# Configuration models
from .config import (
    StorageConfig,
    MapRenderConfig,
    AppSettings
)

__all__ = [
    # Common
    "LatLng",
    "HealthResponse",
    "ApiInfoResponse",

    # Map generation
    "WarningAreaCircle",
    "WarningAreaArc",
    "TyphoonTrack",
    "GenMapRequest",
    "GenMapResponse",

    # Errors
    "ErrorDetail",
    "ErrorResponse",

    # Configuration
    "StorageConfig",
    "MapRenderConfig",
    "AppSettings",
]

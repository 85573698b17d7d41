"""
Genmap router - handles map generation endpoints
"""
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from models import GenMapRequest, GenMapResponse
from services.genmap_service import GenMapService
from services.map_renderer import MapRenderService
from services.storage_service import R2StorageService
from core.config import load_settings
from core.exceptions import GenMapError
from core.utils import get_logger

logger = get_logger("genmap_router")
router = APIRouter()


@lru_cache
def get_genmap_service() -> GenMapService:
    """Build the map generation service from environment settings"""
    settings = load_settings()
    if not settings.storage.public_base_url:
        logger.warning("R2 public base URL not found in environment variables")
    return GenMapService(
        renderer=MapRenderService(settings.map_render),
        storage=R2StorageService(settings.storage),
        public_base_url=settings.storage.public_base_url
    )


async def read_genmap_request(request: Request) -> GenMapRequest:
    """
    Parse the request body as JSON whatever its Content-Type.

    Clients such as a bare fetch() send JSON as text/plain, which FastAPI
    would not decode for a body parameter.
    """
    raw_body = await request.body()
    try:
        return GenMapRequest.model_validate_json(raw_body)
    except ValidationError as e:
        errors = [
            {**err, "loc": ("body", *err.get("loc", ()))}
            for err in e.errors(include_url=False)
        ]
        raise RequestValidationError(errors, body=raw_body)


@router.post("/genmap", response_model=GenMapResponse)
def generate_map(
    request: GenMapRequest = Depends(read_genmap_request),
    genmap_service: GenMapService = Depends(get_genmap_service)
):
    """
    Render a map of a typhoon position and publish it.

    Returns the public URL of the uploaded image.
    """
    logger.info(
        f"genmap request: typhoon={request.typhoon_number} "
        f"validtime={request.validtime.isoformat()} center={request.center}"
    )
    try:
        url = genmap_service.generate(request)
    except GenMapError as e:
        logger.error(f"Map generation failed: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail=str(e))
    except Exception as e:
        logger.error(f"Unexpected error generating map: {e}", exc_info=True)
        raise HTTPException(status_code=500, detail="Error generating map image")

    return GenMapResponse(url=url)

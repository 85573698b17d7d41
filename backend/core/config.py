"""
Application configuration and constants
"""
import os
from dotenv import load_dotenv

from models.config import AppSettings, MapRenderConfig, StorageConfig

load_dotenv()

# Map rendering defaults
class MapDefaults:
    WIDTH = 600
    HEIGHT = 450
    ZOOM = 6
    CENTER_MARKER_COLOR = "red"
    CENTER_MARKER_WIDTH = 16
    CIRCLE_SEGMENTS = 64
    TILE_URL_TEMPLATE = "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png"

# Encoded image formats and their content types
IMAGE_CONTENT_TYPES = {
    "webp": "image/webp",
    "png": "image/png",
}

# Outbound upload bound, in seconds
UPLOAD_TIMEOUT_SECONDS = 30

# API configuration
API_CONFIG = {
    "title": "Typhoon Map API",
    "version": "1.0.0",
    "description": "Renders typhoon position maps and publishes them to an R2 bucket"
}

# Server configuration
SERVER_CONFIG = {
    "host": os.getenv("HOST", "0.0.0.0"),
    "port": int(os.getenv("PORT", "8080")),
}


def r2_endpoint_url(account_id: str) -> str:
    """Cloudflare R2 S3-compatible endpoint for an account"""
    return f"https://{account_id}.r2.cloudflarestorage.com"


def load_settings() -> AppSettings:
    """Build application settings from the environment"""
    account_id = os.getenv("CF_ACCOUNT_ID", "")
    endpoint_url = os.getenv("R2_ENDPOINT_URL") or (
        r2_endpoint_url(account_id) if account_id else None
    )

    storage = StorageConfig(
        endpoint_url=endpoint_url,
        bucket_name=os.getenv("R2_BUCKET_NAME", ""),
        public_base_url=os.getenv("R2_BUCKET_PUBLIC_BASE_URL", ""),
        upload_timeout_seconds=UPLOAD_TIMEOUT_SECONDS,
    )
    map_render = MapRenderConfig(
        width=MapDefaults.WIDTH,
        height=MapDefaults.HEIGHT,
        zoom=MapDefaults.ZOOM,
        tile_url_template=os.getenv("MAP_TILE_URL_TEMPLATE", MapDefaults.TILE_URL_TEMPLATE),
        image_format=os.getenv("MAP_IMAGE_FORMAT", "webp").lower(),
    )
    return AppSettings(storage=storage, map_render=map_render)

"""
Map generation service - renders, encodes and publishes typhoon maps
"""
from core.utils import get_logger
from models import GenMapRequest
from services.map_renderer import MapRenderService
from services.storage_service import R2StorageService

logger = get_logger("genmap_service")


def map_image_name(request: GenMapRequest, ext: str) -> str:
    """Object key for a request: <typhoon number>/<YYYYMMDDHHMM>.<ext>"""
    return f"{request.typhoon_number}/{request.validtime.strftime('%Y%m%d%H%M')}.{ext}"


def public_url(base_url: str, key: str) -> str:
    """Join the bucket's public base URL and an object key"""
    return f"{base_url.rstrip('/')}/{key}"


class GenMapService:
    """Service tying together rendering, encoding and upload"""

    def __init__(
        self,
        renderer: MapRenderService,
        storage: R2StorageService,
        public_base_url: str
    ):
        self.renderer = renderer
        self.storage = storage
        self.public_base_url = public_base_url

    def generate(self, request: GenMapRequest) -> str:
        """
        Render the map for a request, upload it and return its public URL.

        Raises:
            MapRenderError, ImageEncodeError, StorageUploadError
        """
        logger.info("Generating map image...")
        image = self.renderer.render(request)

        data, content_type = self.renderer.encode(image)

        logger.info("Uploading map image to R2 bucket...")
        key = map_image_name(request, self.renderer.extension)
        self.storage.upload_file(key, data, content_type)

        url = public_url(self.public_base_url, key)
        logger.info(f"Uploading map image succeeded (URL: {url})")
        return url

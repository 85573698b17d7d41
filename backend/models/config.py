"""
Configuration and settings models
"""
from pydantic import BaseModel, Field
from typing import Optional


class StorageConfig(BaseModel):
    """R2 bucket configuration"""
    endpoint_url: Optional[str] = None
    bucket_name: str = ""
    public_base_url: str = ""
    upload_timeout_seconds: int = Field(default=30, ge=1)

    @property
    def is_complete(self) -> bool:
        """Whether everything needed to upload and publish is set"""
        return bool(self.endpoint_url and self.bucket_name and self.public_base_url)


class MapRenderConfig(BaseModel):
    """Static map rendering settings"""
    width: int = Field(default=600, ge=1)
    height: int = Field(default=450, ge=1)
    zoom: int = Field(default=6, ge=0, le=19)
    tile_url_template: str = "https://a.tile.openstreetmap.org/{z}/{x}/{y}.png"
    image_format: str = Field(default="webp", pattern="^(webp|png)$")


class AppSettings(BaseModel):
    """Complete application settings"""
    storage: StorageConfig = StorageConfig()
    map_render: MapRenderConfig = MapRenderConfig()

"""
Shared fixtures for the map generation tests
"""
from unittest.mock import Mock

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from app import app
from routers.genmap import get_genmap_service
from services.genmap_service import GenMapService
from services.map_renderer import MapRenderService
from services.storage_service import R2StorageService
from models import MapRenderConfig

PUBLIC_BASE_URL = "https://maps.example.com"


@pytest.fixture
def valid_payload() -> dict:
    return {
        "typhoonNumber": "2410",
        "validtime": "2024-08-29T09:00:00+09:00",
        "center": [31.5, 130.2],
        "track": {
            "preTyphoon": [[20.1, 140.0], [22.3, 138.5]],
            "typhoon": [[25.0, 136.0], [28.4, 133.1], [31.5, 130.2]],
        },
        "stormWarningArea": {"center": [31.5, 130.2], "radius": 150000},
        "galeWarningArea": {"center": [31.6, 130.0], "radius": 500000},
    }


@pytest.fixture
def fake_image() -> Image.Image:
    return Image.new("RGB", (600, 450), "white")


@pytest.fixture
def mock_renderer(fake_image) -> MapRenderService:
    """Real encoder, stubbed tile rendering"""
    renderer = MapRenderService(MapRenderConfig(image_format="png"))
    renderer.render = Mock(return_value=fake_image)
    return renderer


@pytest.fixture
def mock_storage() -> Mock:
    return Mock(spec=R2StorageService)


@pytest.fixture
def genmap_service(mock_renderer, mock_storage) -> GenMapService:
    return GenMapService(mock_renderer, mock_storage, PUBLIC_BASE_URL)


@pytest.fixture
def client_factory():
    """Build a TestClient whose /genmap uses the given service"""
    def factory(service) -> TestClient:
        app.dependency_overrides[get_genmap_service] = lambda: service
        return TestClient(app)

    yield factory
    app.dependency_overrides.clear()

"""
Tests for the map render service
"""
from unittest.mock import patch

import pytest
import requests
from PIL import Image

from core.exceptions import ImageEncodeError, MapRenderError
from models import GenMapRequest, MapRenderConfig
from services.map_renderer import (
    GALE_AREA_STYLE,
    STORM_AREA_STYLE,
    MapRenderService,
    to_lon_lat,
)


@pytest.fixture
def request_model(valid_payload) -> GenMapRequest:
    return GenMapRequest.model_validate(valid_payload)


@pytest.fixture
def minimal_request() -> GenMapRequest:
    return GenMapRequest.model_validate({
        "typhoonNumber": "2405",
        "validtime": "2024-07-01T12:00:00Z",
        "center": [18.0, 128.0],
    })


class TestBuildMap:

    def test_minimal_request_draws_only_center(self, minimal_request):
        static_map = MapRenderService().build_map(minimal_request)
        assert static_map.polygons == []
        assert static_map.lines == []
        assert len(static_map.markers) == 1
        marker = static_map.markers[0]
        assert marker.coord == (128.0, 18.0)
        assert marker.color == "red"
        assert marker.width == 16

    def test_canvas_size_follows_config(self, minimal_request):
        service = MapRenderService(MapRenderConfig(width=300, height=200))
        static_map = service.build_map(minimal_request)
        assert static_map.width == 300
        assert static_map.height == 200

    def test_warning_areas_gale_below_storm(self, request_model):
        static_map = MapRenderService().build_map(request_model)
        assert len(static_map.polygons) == 2
        gale, storm = static_map.polygons
        assert gale.fill_color == GALE_AREA_STYLE[0]
        assert storm.fill_color == STORM_AREA_STYLE[0]
        assert gale.coords[0] == gale.coords[-1]

    def test_track_lines_join(self, request_model):
        static_map = MapRenderService().build_map(request_model)
        assert len(static_map.lines) == 2
        pre_line, typhoon_line = static_map.lines
        # pre-typhoon line ends where the typhoon line starts
        assert pre_line.coords[-1] == typhoon_line.coords[0] == (136.0, 25.0)
        # three track points plus the center
        assert len(static_map.markers) == 4

    def test_short_track_draws_no_lines(self):
        request = GenMapRequest.model_validate({
            "typhoonNumber": "2405",
            "validtime": "2024-07-01T12:00:00Z",
            "center": [18.0, 128.0],
            "track": {"preTyphoon": [], "typhoon": [[18.0, 128.0]]},
        })
        static_map = MapRenderService().build_map(request)
        assert static_map.lines == []
        assert len(static_map.markers) == 2


class TestRender:

    def test_render_centers_on_request(self, minimal_request):
        fake_image = Image.new("RGB", (600, 450))
        with patch("services.map_renderer.StaticMap.render", return_value=fake_image) as mock_render:
            image = MapRenderService().render(minimal_request)

        assert image is fake_image
        mock_render.assert_called_once_with(zoom=6, center=(128.0, 18.0))

    @pytest.mark.parametrize("error", [
        RuntimeError("could not download 4 tiles"),
        requests.ConnectionError("connection refused"),
    ])
    def test_render_failure_raises_map_render_error(self, minimal_request, error):
        with patch("services.map_renderer.StaticMap.render", side_effect=error):
            with pytest.raises(MapRenderError, match="failed to generate map image"):
                MapRenderService().render(minimal_request)


class TestEncode:

    def test_encode_webp(self, fake_image):
        data, content_type = MapRenderService().encode(fake_image)
        assert content_type == "image/webp"
        assert data[:4] == b"RIFF"
        assert data[8:12] == b"WEBP"

    def test_encode_png(self, fake_image):
        service = MapRenderService(MapRenderConfig(image_format="png"))
        data, content_type = service.encode(fake_image)
        assert content_type == "image/png"
        assert data.startswith(b"\x89PNG")

    def test_encode_unsupported_format(self, fake_image):
        config = MapRenderConfig.model_construct(image_format="gif")
        with pytest.raises(ImageEncodeError, match="unsupported image format"):
            MapRenderService(config).encode(fake_image)

    def test_encoder_failure_raises_image_encode_error(self, fake_image):
        with patch.object(Image.Image, "save", side_effect=OSError("encoder error -2")):
            with pytest.raises(ImageEncodeError, match="failed to encode image"):
                MapRenderService().encode(fake_image)


def test_to_lon_lat():
    assert to_lon_lat([35.0, 139.0]) == (139.0, 35.0)


def test_arc_warning_area_is_skipped(valid_payload):
    valid_payload["stormWarningArea"] = {"arc": [[31.5, 130.2], 150000, [0, 180]]}
    request = GenMapRequest.model_validate(valid_payload)

    static_map = MapRenderService().build_map(request)

    # only the gale circle is drawn
    assert len(static_map.polygons) == 1
    assert static_map.polygons[0].fill_color == GALE_AREA_STYLE[0]


def test_drawing_value_error_raises_map_render_error(valid_payload):
    request = GenMapRequest.model_validate(valid_payload)
    with patch("services.map_renderer.StaticMap.render", side_effect=ValueError("cannot convert float NaN to integer")):
        with pytest.raises(MapRenderError):
            MapRenderService().render(request)

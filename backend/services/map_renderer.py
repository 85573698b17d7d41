"""
Map render service - draws typhoon position maps with staticmap
"""
import io
from typing import List, Optional, Tuple

import requests
from PIL import Image
from staticmap import CircleMarker, Line, Polygon, StaticMap

from core.config import IMAGE_CONTENT_TYPES, MapDefaults
from core.exceptions import ImageEncodeError, MapRenderError
from core.geo import circle_coordinates
from core.utils import get_logger
from models import GenMapRequest, MapRenderConfig, TyphoonTrack, WarningAreaCircle
from models.genmap import WarningArea

logger = get_logger("map_renderer")

# Warning area styles: (fill, outline)
GALE_AREA_STYLE = ("#FFD70066", "#E6B800")
STORM_AREA_STYLE = ("#FF000066", "#CC0000")

PRE_TYPHOON_LINE_COLOR = "#808080"
TYPHOON_LINE_COLOR = "#1A1A1A"
TRACK_LINE_WIDTH = 3
TRACK_POINT_WIDTH = 6

USER_AGENT = "typhoon-genmap/1.0"


def to_lon_lat(lat_lng: List[float]) -> Tuple[float, float]:
    """Convert a [lat, lng] pair to the (lon, lat) order staticmap uses"""
    return lat_lng[1], lat_lng[0]


class MapRenderService:
    """Service for rendering and encoding typhoon position maps"""

    def __init__(self, config: Optional[MapRenderConfig] = None):
        self.config = config or MapRenderConfig()

    def _new_map(self) -> StaticMap:
        return StaticMap(
            self.config.width,
            self.config.height,
            url_template=self.config.tile_url_template,
            headers={"User-Agent": USER_AGENT},
        )

    def _add_warning_area(self, static_map: StaticMap, area: WarningArea, style: Tuple[str, str]) -> None:
        if not isinstance(area, WarningAreaCircle):
            logger.info(f"Skipping non-circular warning area: {area}")
            return
        lat, lon = area.center
        ring = circle_coordinates(lat, lon, area.radius, segments=MapDefaults.CIRCLE_SEGMENTS)
        fill_color, outline_color = style
        static_map.add_polygon(Polygon(ring, fill_color, outline_color, simplify=False))

    def _add_track(self, static_map: StaticMap, track: TyphoonTrack) -> None:
        # The pre-typhoon line runs up to the first typhoon position so the
        # two segments join.
        pre_points = [to_lon_lat(p) for p in track.pre_typhoon]
        typhoon_points = [to_lon_lat(p) for p in track.typhoon]
        if typhoon_points:
            pre_points.append(typhoon_points[0])

        if len(pre_points) >= 2:
            static_map.add_line(Line(pre_points, PRE_TYPHOON_LINE_COLOR, TRACK_LINE_WIDTH))
        if len(typhoon_points) >= 2:
            static_map.add_line(Line(typhoon_points, TYPHOON_LINE_COLOR, TRACK_LINE_WIDTH))
        for point in typhoon_points:
            static_map.add_marker(CircleMarker(point, TYPHOON_LINE_COLOR, TRACK_POINT_WIDTH))

    def build_map(self, request: GenMapRequest) -> StaticMap:
        """Compose all map features for a request without rendering tiles"""
        static_map = self._new_map()

        # Gale area first so the storm area is drawn over it
        if request.gale_warning_area:
            self._add_warning_area(static_map, request.gale_warning_area, GALE_AREA_STYLE)
        if request.storm_warning_area:
            self._add_warning_area(static_map, request.storm_warning_area, STORM_AREA_STYLE)
        if request.track:
            self._add_track(static_map, request.track)

        static_map.add_marker(CircleMarker(
            to_lon_lat(request.center),
            MapDefaults.CENTER_MARKER_COLOR,
            MapDefaults.CENTER_MARKER_WIDTH
        ))
        return static_map

    def render(self, request: GenMapRequest) -> Image.Image:
        """Render the map centered on the request's position"""
        static_map = self.build_map(request)
        try:
            return static_map.render(zoom=self.config.zoom, center=to_lon_lat(request.center))
        except (RuntimeError, OSError, ValueError, requests.RequestException) as e:
            raise MapRenderError(f"failed to generate map image: {e}") from e

    def encode(self, image: Image.Image) -> Tuple[bytes, str]:
        """
        Encode a rendered image into the configured format.

        Returns:
            The encoded bytes and their content type.
        """
        image_format = self.config.image_format
        content_type = IMAGE_CONTENT_TYPES.get(image_format)
        if content_type is None:
            raise ImageEncodeError(f"unsupported image format: {image_format}")

        buf = io.BytesIO()
        try:
            image.save(buf, format=image_format.upper())
        except (OSError, ValueError, KeyError) as e:
            raise ImageEncodeError(f"failed to encode image: {e}") from e
        return buf.getvalue(), content_type

    @property
    def extension(self) -> str:
        return self.config.image_format

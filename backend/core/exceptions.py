"""
Exceptions raised by the map generation pipeline
"""


class GenMapError(Exception):
    """Base class for failures while producing a map image"""


class MapRenderError(GenMapError):
    """The map could not be rendered (tile download or drawing failed)"""


class ImageEncodeError(GenMapError):
    """The rendered image could not be encoded"""


class StorageUploadError(GenMapError):
    """The encoded image could not be uploaded to the bucket"""

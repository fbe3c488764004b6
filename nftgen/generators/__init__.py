"""Image generation building blocks."""

from .compositor import Compositor
from .layers import SUPPORTED_EXTENSIONS, get_images_for_layer
from .metadata import build_metadata, image_url
from .selector import MissingLayerError, create_random_combination

__all__ = [
    "Compositor",
    "MissingLayerError",
    "SUPPORTED_EXTENSIONS",
    "build_metadata",
    "create_random_combination",
    "get_images_for_layer",
    "image_url",
]

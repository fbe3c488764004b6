"""Resolve the candidate images of a layer."""

import logging
import os

from ..models.layer import LayerConfig, LayerAttribute

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = (".png",)


def get_images_for_layer(layer: LayerConfig) -> list[LayerAttribute]:
    """List every supported image in the layer's directory.

    Rescans the directory on each call so assets can be swapped without a
    restart. A missing directory yields an empty list.
    """
    if not os.path.isdir(layer.source_directory):
        logger.warning(f"Folder does not exist: {layer.source_directory}")
        return []

    images = []
    for filename in sorted(os.listdir(layer.source_directory)):
        if not filename.lower().endswith(SUPPORTED_EXTENSIONS):
            continue
        images.append(LayerAttribute(
            name=layer.name,
            trait=os.path.splitext(filename)[0],
            path=os.path.join(layer.source_directory, filename),
        ))
    return images

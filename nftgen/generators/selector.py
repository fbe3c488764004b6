"""Random per-layer trait selection."""

import random
from typing import Any, Protocol, Sequence

from .layers import get_images_for_layer
from ..models.config import GenerationConfig
from ..models.layer import LayerAttribute


class MissingLayerError(ValueError):
    """A required layer has no images to choose from."""

    def __init__(self, layer_name: str):
        self.layer_name = layer_name
        super().__init__(f'Layer "{layer_name}" is required but has no images')


class ChoiceSource(Protocol):
    """Anything that can pick one element of a sequence (e.g. random.Random)."""

    def choice(self, seq: Sequence[Any]) -> Any: ...


def create_random_combination(
    config: GenerationConfig,
    rng: ChoiceSource | None = None,
) -> list[LayerAttribute]:
    """Pick one image per layer, in layer order.

    Optional layers without images are left out; required ones raise
    MissingLayerError.
    """
    rng = rng or random.Random()
    combination = []

    for layer in config.layers:
        images = get_images_for_layer(layer)
        if not images:
            if layer.required:
                raise MissingLayerError(layer.name)
            continue
        combination.append(rng.choice(images))

    return combination

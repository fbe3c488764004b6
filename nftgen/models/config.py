"""Generation configuration."""

import os
from dataclasses import dataclass, field, replace

from .layer import LayerConfig
from ..config import OUTPUT_DIR, LAYERS_DIR


@dataclass
class GenerationConfig:
    """Everything needed to produce one image/metadata pair."""
    collection_name: str
    description: str
    width: int
    height: int
    output_directory: str
    layers: list[LayerConfig] = field(default_factory=list)  # Draw order, bottom first
    s3_endpoint: str | None = None       # Both set -> metadata image is an absolute URL
    s3_bucket_name: str | None = None

    def with_overrides(self, **changes) -> "GenerationConfig":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    @property
    def has_remote_storage(self) -> bool:
        return bool(self.s3_endpoint and self.s3_bucket_name)


def default_config() -> GenerationConfig:
    """Dog collection with a background and a subject layer."""
    return GenerationConfig(
        collection_name="Dog NFT Collection",
        description="A collection of unique dog NFTs with timestamps",
        width=1000,
        height=1000,
        output_directory=OUTPUT_DIR,
        layers=[
            LayerConfig("Background", os.path.join(LAYERS_DIR, "backgrounds"), required=True),
            LayerConfig("Subject", os.path.join(LAYERS_DIR, "subjects"), required=True),
        ],
    )

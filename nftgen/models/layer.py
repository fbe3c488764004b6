"""Layer definitions for the image compositor."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LayerConfig:
    """A named visual category backed by a directory of candidate assets."""
    name: str                    # Trait type in metadata (e.g., "Background")
    source_directory: str        # Directory holding the layer's PNG files
    required: bool = True        # Generation fails if a required layer has no images


@dataclass(frozen=True)
class LayerAttribute:
    """The asset chosen for one layer."""
    name: str                    # Layer name
    trait: str                   # File name without extension (e.g., "blue")
    path: str                    # Resolved file path

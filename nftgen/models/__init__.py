"""Data models."""

from .config import GenerationConfig, default_config
from .layer import LayerAttribute, LayerConfig
from .metadata import Attribute, NFTMetadata
from .result import GeneratedNFT, GenerationResult
from .transfer import Transfer

__all__ = [
    "Attribute",
    "GeneratedNFT",
    "GenerationConfig",
    "GenerationResult",
    "LayerAttribute",
    "LayerConfig",
    "NFTMetadata",
    "Transfer",
    "default_config",
]

"""Build the metadata record for a generated token."""

from ..models.config import GenerationConfig
from ..models.layer import LayerAttribute
from ..models.metadata import Attribute, NFTMetadata


def image_url(token_id: int, config: GenerationConfig) -> str:
    """Absolute storage URL when remote storage is configured, else the bare filename."""
    if config.has_remote_storage:
        return f"https://{config.s3_endpoint}/{config.s3_bucket_name}/images/{token_id}.png"
    return f"{token_id}.png"


def build_metadata(
    token_id: int,
    attributes: list[LayerAttribute],
    config: GenerationConfig,
    timestamp: str,
) -> NFTMetadata:
    return NFTMetadata(
        name=f"{config.collection_name} #{token_id}",
        description=config.description,
        image=image_url(token_id, config),
        timestamp=timestamp,
        attributes=tuple(
            Attribute(trait_type=attr.name, value=attr.trait) for attr in attributes
        ),
    )

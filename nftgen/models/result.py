"""Results returned by generation calls."""

from dataclasses import dataclass, asdict
from typing import Any

from .metadata import NFTMetadata


@dataclass(frozen=True)
class GeneratedNFT:
    """Files written by a single generation call."""
    image_path: str
    metadata_path: str
    metadata: NFTMetadata


@dataclass
class GenerationResult:
    """Outcome of a generate-and-upload request."""
    success: bool
    message: str
    token_id: int | None = None
    image_url: str | None = None             # Local public path
    storage_status: str | None = None        # "success", "failed" or "skipped"
    error_details: str | None = None
    folder_name: str | None = None
    storage_image_url: str | None = None
    storage_metadata_url: str | None = None
    from_blockchain: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {k: v for k, v in asdict(self).items() if v is not None}

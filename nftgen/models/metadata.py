"""NFT metadata model."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class Attribute:
    """A single ERC-721 metadata attribute."""
    trait_type: str
    value: str


@dataclass(frozen=True)
class NFTMetadata:
    """Metadata sidecar written next to each generated image."""
    name: str
    description: str
    image: str                   # Bare filename (local) or absolute storage URL
    timestamp: str               # ISO-8601, same string drawn on the image
    attributes: tuple[Attribute, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "image": self.image,
            "attributes": [
                {"trait_type": a.trait_type, "value": a.value}
                for a in self.attributes
            ],
            "timestamp": self.timestamp,
        }

    @staticmethod
    def from_dict(data: dict[str, Any]) -> "NFTMetadata":
        return NFTMetadata(
            name=data["name"],
            description=data.get("description", ""),
            image=data.get("image", ""),
            timestamp=data.get("timestamp", ""),
            attributes=tuple(
                Attribute(trait_type=a["trait_type"], value=str(a["value"]))
                for a in data.get("attributes", [])
            ),
        )

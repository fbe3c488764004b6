"""Business logic services."""

from .collection import CollectionService
from .numbering import get_last_nft_number

__all__ = ["CollectionService", "get_last_nft_number"]

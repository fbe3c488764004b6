from .engine import NFTEngine, generate_nft

__all__ = ["NFTEngine", "generate_nft"]

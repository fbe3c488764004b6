"""Layered NFT image generator with object-storage upload."""

"""External service clients."""

from .contract import ContractClient, ContractError
from .indexer import IndexerClient, IndexerError
from .storage import StorageClient, StorageConfig, get_storage_config, validate_storage_config

__all__ = [
    "ContractClient",
    "ContractError",
    "IndexerClient",
    "IndexerError",
    "StorageClient",
    "StorageConfig",
    "get_storage_config",
    "validate_storage_config",
]

"""Collection service - numbering, generation and upload of NFTs."""

import json
import logging
import os
import traceback

from ..clients.contract import ContractClient, ContractError
from ..clients.storage import (
    StorageClient,
    StorageConfig,
    get_storage_config,
    validate_storage_config,
)
from ..config import OUTPUT_DIR, COLLECTIONS_DIR
from ..engine import NFTEngine
from ..models.config import GenerationConfig, default_config
from ..models.result import GeneratedNFT, GenerationResult
from ..utils import to_slug, from_slug
from .numbering import get_last_nft_number

logger = logging.getLogger(__name__)

STATUS_MESSAGES = {
    "success": "and uploaded to storage",
    "failed": "(storage upload failed, but saved locally)",
    "skipped": "(storage upload skipped, saved locally only)",
}


class CollectionService:
    """Generate NFTs for the default output folder or for named collections."""

    def __init__(
        self,
        engine: NFTEngine | None = None,
        contract: ContractClient | None = None,
        storage_config: StorageConfig | None = None,
        storage_factory=StorageClient,
        base_config: GenerationConfig | None = None,
        output_dir: str = OUTPUT_DIR,
        collections_dir: str = COLLECTIONS_DIR,
    ):
        self.engine = engine or NFTEngine()
        self.contract = contract
        self.storage_config = storage_config or get_storage_config()
        self.storage_factory = storage_factory
        self.base_config = base_config or default_config()
        self.output_dir = output_dir
        self.collections_dir = collections_dir

    @property
    def storage_enabled(self) -> bool:
        return validate_storage_config(self.storage_config)

    def generate_and_upload(self) -> GenerationResult:
        """Generate the next token (numbered from the chain's total supply) and upload it."""
        try:
            storage_enabled = self.storage_enabled
            logger.info(f"Storage configuration valid: {storage_enabled}")

            try:
                token_id = self._next_token_id_from_chain()
            except ContractError as e:
                logger.error(f"Failed to fetch total supply: {e}")
                return GenerationResult(
                    success=False,
                    message="Failed to get token ID from blockchain",
                    error_details=str(e),
                    from_blockchain=False,
                )

            config = self.base_config.with_overrides(output_directory=self.output_dir)
            if storage_enabled:
                config = config.with_overrides(
                    s3_endpoint=self.storage_config.endpoint,
                    s3_bucket_name=self.storage_config.bucket_name,
                )

            generated = self._generate(token_id, config)
            status, details, urls = self._upload(generated, storage_enabled)

            return GenerationResult(
                success=True,
                message=f"NFT #{token_id} generated {STATUS_MESSAGES[status]}!",
                token_id=token_id,
                image_url=f"/output/images/{token_id}.png",
                storage_status=status,
                error_details=details,
                storage_image_url=urls[0] if urls else None,
                storage_metadata_url=urls[1] if urls else None,
                from_blockchain=True,
            )
        except Exception as e:
            logger.error(f"Error generating NFT: {e}")
            return GenerationResult(
                success=False,
                message=f"Error generating NFT: {e}",
                error_details=traceback.format_exc(),
            )

    def create_new_collection(self, collection_name: str) -> GenerationResult:
        """Create `<collections_dir>/<slug>` and generate token #1 in it."""
        folder_name = to_slug(collection_name)
        if not folder_name:
            return GenerationResult(
                success=False,
                message="Invalid collection name. Please provide a valid name.",
                error_details="Collection name resulted in an empty folder name after sanitization.",
            )

        try:
            base_dir = os.path.join(self.collections_dir, folder_name)
            os.makedirs(os.path.join(base_dir, "images"), exist_ok=True)
            os.makedirs(os.path.join(base_dir, "metadata"), exist_ok=True)
            logger.info(f"Created new collection directory: {base_dir}")

            config = self.base_config.with_overrides(
                collection_name=collection_name,
                description=f"{collection_name} - A unique NFT collection",
                output_directory=base_dir,
            )

            token_id = 1
            generated = self._generate(token_id, config)
            status, details, _ = self._upload(
                generated, self.storage_enabled, prefix=f"collections/{folder_name}"
            )

            return GenerationResult(
                success=True,
                message=(
                    f'New collection "{collection_name}" created with NFT #{token_id} '
                    f"{STATUS_MESSAGES[status]}!"
                ),
                token_id=token_id,
                image_url=f"/collections/{folder_name}/images/{token_id}.png",
                storage_status=status,
                error_details=details,
                folder_name=folder_name,
            )
        except Exception as e:
            logger.error(f"Error creating new collection: {e}")
            return GenerationResult(
                success=False,
                message=f"Error creating new collection: {e}",
                error_details=traceback.format_exc(),
            )

    def generate_for_collection(self, folder_name: str) -> GenerationResult:
        """Generate the next token of an existing collection, numbered from its local files."""
        base_dir = os.path.join(self.collections_dir, folder_name)
        if not os.path.isdir(base_dir):
            return GenerationResult(
                success=False,
                message=f'Collection "{folder_name}" does not exist.',
                error_details=f"Directory not found: {base_dir}",
            )

        try:
            token_id = get_last_nft_number(base_dir) + 1
            storage_enabled = self.storage_enabled
            prefix = f"collections/{folder_name}"

            config = self.base_config.with_overrides(
                collection_name=from_slug(folder_name),
                description=f"Part of the {folder_name.replace('-', ' ')} collection",
                output_directory=base_dir,
            )
            if storage_enabled:
                config = config.with_overrides(
                    s3_endpoint=self.storage_config.endpoint,
                    s3_bucket_name=f"{self.storage_config.bucket_name}/{prefix}",
                )

            generated = self._generate(token_id, config)
            status, details, _ = self._upload(generated, storage_enabled, prefix=prefix)

            return GenerationResult(
                success=True,
                message=(
                    f'NFT #{token_id} for collection "{folder_name}" generated '
                    f"{STATUS_MESSAGES[status]}!"
                ),
                token_id=token_id,
                image_url=f"/collections/{folder_name}/images/{token_id}.png",
                storage_status=status,
                error_details=details,
                folder_name=folder_name,
            )
        except Exception as e:
            logger.error(f"Error generating NFT for collection: {e}")
            return GenerationResult(
                success=False,
                message=f"Error generating NFT: {e}",
                error_details=traceback.format_exc(),
            )

    def _next_token_id_from_chain(self) -> int:
        """The contract pre-increments on mint, so total supply is the highest id."""
        if not self.contract:
            raise ContractError("No contract client configured")
        logger.info("Fetching total supply from blockchain...")
        token_id = self.contract.total_supply() + 1
        logger.info(f"Using next token ID from blockchain API: {token_id}")
        return token_id

    def _generate(self, token_id: int, config: GenerationConfig) -> GeneratedNFT:
        generated = self.engine.generate(token_id, config)
        logger.info(f"New NFT metadata:\n{json.dumps(generated.metadata.to_dict(), indent=2)}")
        return generated

    def _upload(
        self, generated: GeneratedNFT, storage_enabled: bool, prefix: str = ""
    ) -> tuple[str, str | None, tuple[str, str] | None]:
        """Upload if storage is configured. Returns (status, error_details, urls)."""
        if not storage_enabled:
            return "skipped", None, None

        try:
            client = self.storage_factory(self.storage_config)
            urls = client.upload_nft(generated.image_path, generated.metadata_path, prefix=prefix)
        except Exception as e:
            logger.error(f"Error during storage upload: {e}")
            return "failed", str(e), None

        if not urls:
            return "failed", "Storage upload failed. Check server logs for details.", None
        return "success", None, urls

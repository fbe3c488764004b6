"""S3-compatible object storage client (MinIO)."""

import json
import logging
import os
from dataclasses import dataclass

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from ..config import (
    S3_ENDPOINT,
    S3_API_PORT,
    S3_ACCESS_KEY,
    S3_SECRET_KEY,
    S3_BUCKET_NAME,
)

logger = logging.getLogger(__name__)

NOT_FOUND_CODES = ("NoSuchKey", "NoSuchBucket", "404", "NotFound")

CONTENT_TYPES = {
    ".png": "image/png",
    ".json": "application/json",
}


@dataclass
class StorageConfig:
    """Connection settings for the object store."""
    endpoint: str
    port: int
    use_ssl: bool
    access_key: str
    secret_key: str
    bucket_name: str
    enabled: bool = True


def get_storage_config() -> StorageConfig:
    """Build storage settings from the environment. SSL is used only on port 443."""
    port = int(S3_API_PORT) if S3_API_PORT.strip().isdigit() else 9000
    return StorageConfig(
        endpoint=S3_ENDPOINT,
        port=port,
        use_ssl=port == 443,
        access_key=S3_ACCESS_KEY,
        secret_key=S3_SECRET_KEY,
        bucket_name=S3_BUCKET_NAME or "nft-collection",
    )


def validate_storage_config(config: StorageConfig) -> bool:
    if not config.endpoint:
        logger.error("Missing S3_ENDPOINT environment variable")
        return False
    if not config.access_key:
        logger.error("Missing S3_ACCESS_KEY environment variable")
        return False
    if not config.secret_key:
        logger.error("Missing S3_SECRET_KEY environment variable")
        return False
    if config.port <= 0:
        logger.error("Invalid S3_API_PORT - must be a positive number")
        return False
    return True


class StorageClient:
    """Client for uploading and fetching NFT files in a bucket."""

    def __init__(self, config: StorageConfig, s3=None):
        self.config = config
        self.endpoint = config.endpoint.rstrip("/")
        self.bucket = config.bucket_name
        self._s3 = s3 or self._create_client()

    def _create_client(self):
        scheme = "https" if self.config.use_ssl else "http"
        return boto3.client(
            "s3",
            endpoint_url=f"{scheme}://{self.endpoint}:{self.config.port}",
            aws_access_key_id=self.config.access_key,
            aws_secret_access_key=self.config.secret_key,
            region_name="us-east-1",
        )

    def public_url(self, key: str) -> str:
        return f"https://{self.endpoint}/{self.bucket}/{key}"

    def test_connection(self) -> bool:
        """Check the endpoint and credentials by listing buckets."""
        try:
            self._s3.list_buckets()
            logger.info("Successfully connected to object storage")
            return True
        except (BotoCoreError, ClientError) as e:
            logger.error(f"Error connecting to object storage at {self.endpoint}:{self.config.port}: {e}")
            return False

    def ensure_bucket(self) -> None:
        """Create the bucket if it doesn't exist yet."""
        try:
            self._s3.head_bucket(Bucket=self.bucket)
        except ClientError as e:
            if _error_code(e) not in NOT_FOUND_CODES:
                raise
            self._s3.create_bucket(Bucket=self.bucket)
            logger.info(f"Created bucket: {self.bucket}")

    def upload_file(self, file_path: str, key: str) -> str:
        """
        Upload a local file.

        Args:
            file_path: Local file to upload
            key: Object key inside the bucket

        Returns:
            Public URL of the uploaded object
        """
        content_type = CONTENT_TYPES.get(
            os.path.splitext(file_path)[1].lower(), "application/octet-stream"
        )
        self.ensure_bucket()
        self._s3.upload_file(
            file_path, self.bucket, key, ExtraArgs={"ContentType": content_type}
        )
        logger.info(f"Uploaded {file_path} to {self.bucket}/{key}")
        return self.public_url(key)

    def upload_nft(
        self, image_path: str, metadata_path: str, prefix: str = ""
    ) -> tuple[str, str] | None:
        """Upload an image/metadata pair under `<prefix>/images` and `<prefix>/metadata`.

        A relative `image` field in the metadata file is rewritten to the
        uploaded image's absolute URL before the metadata is sent.

        Returns:
            (image_url, metadata_url), or None if the upload failed
        """
        if not self.test_connection():
            logger.warning("Object storage upload skipped. NFT was saved locally only.")
            return None

        base = f"{prefix.strip('/')}/" if prefix else ""
        image_key = f"{base}images/{os.path.basename(image_path)}"
        metadata_key = f"{base}metadata/{os.path.basename(metadata_path)}"

        try:
            image_url = self.upload_file(image_path, image_key)
            self._absolutize_image(metadata_path, image_url)
            metadata_url = self.upload_file(metadata_path, metadata_key)
        except (BotoCoreError, ClientError, OSError) as e:
            logger.error(f"Error uploading files to object storage: {e}")
            return None

        logger.info(f"NFT image available at: {image_url}")
        logger.info(f"NFT metadata available at: {metadata_url}")
        return image_url, metadata_url

    def _absolutize_image(self, metadata_path: str, image_url: str) -> None:
        with open(metadata_path, encoding="utf-8") as f:
            try:
                metadata = json.load(f)
            except json.JSONDecodeError as e:
                logger.warning(f"Could not update metadata with absolute URL: {e}")
                return

        image = metadata.get("image")
        if image and not image.startswith("http"):
            metadata["image"] = image_url
            with open(metadata_path, "w", encoding="utf-8") as f:
                json.dump(metadata, f, indent=2)
            logger.info("Updated metadata with absolute image URL")

    def get_object(self, key: str) -> bytes | None:
        """Fetch an object's bytes, or None if the key doesn't exist."""
        try:
            response = self._s3.get_object(Bucket=self.bucket, Key=key)
        except ClientError as e:
            if _error_code(e) in NOT_FOUND_CODES:
                return None
            raise
        return response["Body"].read()

    def find_object(self, keys: list[str]) -> tuple[str, bytes] | None:
        """Return (key, bytes) for the first key present in the bucket."""
        for key in keys:
            data = self.get_object(key)
            if data is not None:
                logger.info(f"Found object at: {self.bucket}/{key}")
                return key, data
        return None


def _error_code(error: ClientError) -> str | None:
    return error.response.get("Error", {}).get("Code")

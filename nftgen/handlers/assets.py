"""AWS Lambda handlers serving stored NFT metadata and images by token id."""

import base64
import json
import logging

from ..clients.storage import StorageClient, get_storage_config, validate_storage_config
from ._common import response

logger = logging.getLogger(__name__)

NO_CACHE = {"Cache-Control": "no-cache"}


def metadata_keys(token_id: str) -> list[str]:
    return [
        f"metadata/{token_id}.json",
        f"{token_id}.json",
        f"collections/metadata/{token_id}.json",
    ]


def image_keys(token_id: str) -> list[str]:
    return [
        f"images/{token_id}.png",
        f"{token_id}.png",
        f"collections/images/{token_id}.png",
    ]


def _token_id(event: dict) -> str:
    return str((event.get("pathParameters") or {}).get("tokenId") or "").strip()


def _storage_client(storage_factory) -> StorageClient | None:
    config = get_storage_config()
    if not validate_storage_config(config):
        return None
    return storage_factory(config)


def metadata_handler(event, context, storage_factory=StorageClient):
    """GET /api/nft-metadata/{tokenId} - metadata with `image` pointed at the image route."""
    token_id = _token_id(event)
    if not token_id:
        return response(404, {"error": "Token ID is required"})
    if not token_id.isdigit():
        return response(400, {"error": "Token ID must be a number"})

    try:
        client = _storage_client(storage_factory)
        if client is None:
            return response(500, {"error": "Database connection failed"})

        found = client.find_object(metadata_keys(token_id))
        if found is None:
            logger.info(f"No metadata found for NFT #{token_id}")
            return response(404, {"error": "NFT metadata not found"})

        metadata = json.loads(found[1])
        if metadata.get("image"):
            metadata["image"] = f"/api/nft-image/{token_id}"
        return response(200, metadata, headers=NO_CACHE)

    except Exception as e:
        logger.error(f"Error in NFT metadata handler: {e}")
        return response(500, {"error": "Server error"})


def image_handler(event, context, storage_factory=StorageClient):
    """GET /api/nft-image/{tokenId} - raw PNG, base64-encoded for API Gateway."""
    token_id = _token_id(event)
    if not token_id:
        return response(404, {"error": "Token ID is required"})
    if not token_id.isdigit():
        return response(400, {"error": "Token ID must be a number"})

    try:
        client = _storage_client(storage_factory)
        if client is None:
            return response(500, {"error": "Database connection failed"})

        found = client.find_object(image_keys(token_id))
        if found is None:
            logger.info(f"No image found for NFT #{token_id}")
            return response(404, {"error": "NFT image not found"})

        return {
            "statusCode": 200,
            "headers": {"Content-Type": "image/png", **NO_CACHE},
            "body": base64.b64encode(found[1]).decode("ascii"),
            "isBase64Encoded": True,
        }

    except Exception as e:
        logger.error(f"Error in NFT image handler: {e}")
        return response(500, {"error": "Server error"})

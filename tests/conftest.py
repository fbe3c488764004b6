"""
Shared fixtures for all tests.

Layer directories are built from tiny solid-color PNGs so the compositor
has real images to decode.
"""
import os
from datetime import datetime, timezone

import pytest
from PIL import Image

from nftgen.clients.storage import StorageConfig
from nftgen.models import GenerationConfig, LayerConfig


FIXED_TIME = datetime(2024, 5, 1, 12, 0, 0, 123000, tzinfo=timezone.utc)
FIXED_TIMESTAMP = "2024-05-01T12:00:00.123Z"


def make_png(path, color=(255, 0, 0, 255), size=(8, 8)):
    """Write a solid-color RGBA PNG."""
    os.makedirs(os.path.dirname(path), exist_ok=True)
    Image.new("RGBA", size, color).save(path, format="PNG")
    return str(path)


class FixedChoice:
    """Choice source returning the elements at a fixed sequence of indices."""

    def __init__(self, indices):
        self.indices = list(indices)
        self.calls = 0

    def choice(self, seq):
        index = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        return seq[index]


@pytest.fixture
def layer_dirs(tmp_path):
    """Background with blue.png, Subject with dog.png."""
    backgrounds = tmp_path / "layers" / "backgrounds"
    subjects = tmp_path / "layers" / "subjects"
    make_png(str(backgrounds / "blue.png"), color=(0, 0, 255, 255))
    make_png(str(subjects / "dog.png"), color=(255, 0, 0, 255))
    return backgrounds, subjects


@pytest.fixture
def make_config(tmp_path, layer_dirs):
    """Factory for a small GenerationConfig writing under tmp_path/output."""
    backgrounds, subjects = layer_dirs

    def _make(**overrides):
        values = dict(
            collection_name="Test Dogs",
            description="Dogs for testing",
            width=64,
            height=64,
            output_directory=str(tmp_path / "output"),
            layers=[
                LayerConfig("Background", str(backgrounds), required=True),
                LayerConfig("Subject", str(subjects), required=True),
            ],
        )
        values.update(overrides)
        return GenerationConfig(**values)

    return _make


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_TIME


@pytest.fixture
def storage_config():
    return StorageConfig(
        endpoint="minio.example.com",
        port=443,
        use_ssl=True,
        access_key="access",
        secret_key="secret",
        bucket_name="nft-collection",
    )


@pytest.fixture
def empty_storage_config():
    return StorageConfig(
        endpoint="",
        port=9000,
        use_ssl=False,
        access_key="",
        secret_key="",
        bucket_name="nft-collection",
    )

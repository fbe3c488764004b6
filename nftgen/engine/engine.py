"""NFT generation engine."""

import json
import logging
import os
from datetime import datetime
from typing import Callable

from ..generators.compositor import Compositor
from ..generators.metadata import build_metadata
from ..generators.selector import ChoiceSource, create_random_combination
from ..models.config import GenerationConfig
from ..models.result import GeneratedNFT
from ..utils import utc_now

logger = logging.getLogger(__name__)


class NFTEngine:
    """Config-driven generator for one image/metadata pair per token id."""

    def __init__(
        self,
        rng: ChoiceSource | None = None,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.rng = rng
        self.clock = clock

    def generate(self, token_id: int, config: GenerationConfig) -> GeneratedNFT:
        """Generate and write `images/<id>.png` and `metadata/<id>.json`.

        Trait selection happens before anything touches the disk, so a
        missing required layer leaves the output directory untouched. A
        failed metadata write after a successful image write is not rolled
        back.
        """
        logger.info(f"Generating NFT #{token_id}...")

        # 1. Pick traits (raises MissingLayerError)
        attributes = create_random_combination(config, self.rng)

        # 2. Draw
        compositor = Compositor(config.width, config.height, clock=self.clock)
        image_bytes, timestamp = compositor.compose(attributes)

        # 3. Write image
        images_dir = os.path.join(config.output_directory, "images")
        metadata_dir = os.path.join(config.output_directory, "metadata")
        os.makedirs(images_dir, exist_ok=True)
        os.makedirs(metadata_dir, exist_ok=True)

        image_path = os.path.join(images_dir, f"{token_id}.png")
        with open(image_path, "wb") as f:
            f.write(image_bytes)

        # 4. Write metadata
        metadata = build_metadata(token_id, attributes, config, timestamp)
        metadata_path = os.path.join(metadata_dir, f"{token_id}.json")
        with open(metadata_path, "w", encoding="utf-8") as f:
            json.dump(metadata.to_dict(), f, indent=2)

        logger.info(f"Completed NFT #{token_id}")
        return GeneratedNFT(
            image_path=image_path,
            metadata_path=metadata_path,
            metadata=metadata,
        )


def generate_nft(
    token_id: int,
    config: GenerationConfig,
    rng: ChoiceSource | None = None,
) -> GeneratedNFT:
    """Shortcut for a one-off generation with ambient randomness."""
    return NFTEngine(rng=rng).generate(token_id, config)

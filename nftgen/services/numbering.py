"""Local token numbering."""

import logging
import os

logger = logging.getLogger(__name__)


def get_last_nft_number(output_dir: str) -> int:
    """Highest token id among `<output_dir>/images/<id>.png`, or 0 if there are none."""
    images_dir = os.path.join(output_dir, "images")
    os.makedirs(images_dir, exist_ok=True)

    numbers = []
    for filename in os.listdir(images_dir):
        stem, ext = os.path.splitext(filename)
        if ext == ".png" and stem.isdigit():
            numbers.append(int(stem))

    return max(numbers, default=0)

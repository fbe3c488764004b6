"""Draw selected layers onto a canvas and stamp the generation time."""

import logging
from datetime import datetime
from io import BytesIO
from typing import Callable

from PIL import Image, ImageDraw, ImageFont

from ..models.layer import LayerAttribute
from ..utils import iso_timestamp, utc_now

logger = logging.getLogger(__name__)

BACKGROUND_COLOR = "white"
TIMESTAMP_FONT_SIZE = 30
TIMESTAMP_BASELINE_Y = 50
TIMESTAMP_STROKE_WIDTH = 2
FONT_CANDIDATES = ("arial.ttf", "Arial.ttf", "DejaVuSans.ttf")


class Compositor:
    """Stacks layer images on a fixed-size canvas."""

    def __init__(
        self,
        width: int,
        height: int,
        background: str = BACKGROUND_COLOR,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.width = width
        self.height = height
        self.background = background
        self.clock = clock

    def compose(self, attributes: list[LayerAttribute]) -> tuple[bytes, str]:
        """Template method: fill -> draw layers -> timestamp -> encode.

        Returns:
            (PNG bytes, timestamp string drawn on the image)
        """
        canvas = Image.new("RGBA", (self.width, self.height), self.background)

        for attribute in attributes:
            layer = self._load_layer(attribute)
            if layer is not None:
                canvas.alpha_composite(layer)

        timestamp = self._draw_timestamp(canvas)

        output = BytesIO()
        canvas.save(output, format="PNG")
        return output.getvalue(), timestamp

    def _load_layer(self, attribute: LayerAttribute) -> Image.Image | None:
        """Load an image stretched to the canvas, or None if it can't be decoded."""
        try:
            with Image.open(attribute.path) as img:
                return img.convert("RGBA").resize((self.width, self.height))
        except (OSError, ValueError, Image.DecompressionBombError) as e:
            logger.error(f"Error loading image {attribute.path}: {e}")
            return None

    def _draw_timestamp(self, canvas: Image.Image) -> str:
        """Draw the current time centered near the top, outlined for contrast."""
        timestamp = iso_timestamp(self.clock())
        draw = ImageDraw.Draw(canvas)
        font = _load_font(TIMESTAMP_FONT_SIZE)

        left, _, right, bottom = draw.textbbox(
            (0, 0), timestamp, font=font, stroke_width=TIMESTAMP_STROKE_WIDTH
        )
        x = (self.width - (right - left)) / 2 - left
        y = TIMESTAMP_BASELINE_Y - bottom
        draw.text(
            (x, y),
            timestamp,
            fill="white",
            font=font,
            stroke_width=TIMESTAMP_STROKE_WIDTH,
            stroke_fill="black",
        )
        return timestamp


def _load_font(size: int):
    for name in FONT_CANDIDATES:
        try:
            return ImageFont.truetype(name, size)
        except OSError:
            continue
    return ImageFont.load_default(size=size)

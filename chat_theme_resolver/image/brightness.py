import numpy as np
from PIL import Image

from ..color import LUMA_WEIGHTS
from ..contrast import is_light_brightness

SAMPLE_SIZE = 100
MIN_ALPHA = 128


def analyze_image_brightness(image_path):
    """Average perceived brightness (0-255) of a background image.

    The image is scaled down to a 100x100 sample. Pixels that are mostly
    transparent (alpha < 128) are skipped. An image with no opaque pixels
    has brightness 0.0.
    """
    img = Image.open(image_path).convert("RGBA")
    img = img.resize((SAMPLE_SIZE, SAMPLE_SIZE))
    pixels = np.asarray(img, dtype=np.float64).reshape(-1, 4)

    opaque = pixels[pixels[:, 3] >= MIN_ALPHA]
    if len(opaque) == 0:
        return 0.0

    brightness = opaque[:, :3] @ np.array(LUMA_WEIGHTS)
    return float(brightness.mean())


def is_image_light(image_path):
    """Check whether a background image is predominantly light."""
    return is_light_brightness(analyze_image_brightness(image_path))

import numpy as np
import pytest
from PIL import Image


def make_image(width, height, seed=0):
    """Random RGBA image of the given size"""
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    return Image.fromarray(pixels)


@pytest.fixture
def image_pair():
    return make_image(2, 2, seed=1), make_image(2, 2, seed=2)

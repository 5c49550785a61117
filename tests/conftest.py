import pytest

from fontbitmap.image import InputImage
from tests.helpers import PixelRows, draw


@pytest.fixture
def pixel_rows():
    return PixelRows


@pytest.fixture
def bitmap():
    def make(rows, mode="RGBA"):
        return InputImage(draw(rows, mode))
    return make

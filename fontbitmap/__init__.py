"""Convert fixed-width font bitmaps to packed byte arrays in C, Arduino or Python source."""
from fontbitmap.config import (
    BitNumbering,
    ConfigError,
    FontMetrics,
    OutputFormat,
    SourceCodeOptions,
)
from fontbitmap.convert import FixedWidthFontConverter
from fontbitmap.image import InputImage, read_image

__version__ = "0.1.0"

__all__ = [
    "BitNumbering",
    "ConfigError",
    "FixedWidthFontConverter",
    "FontMetrics",
    "InputImage",
    "OutputFormat",
    "SourceCodeOptions",
    "read_image",
]

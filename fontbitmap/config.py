from collections import namedtuple
from enum import Enum

MAX_METRIC = 255


class ConfigError(ValueError):
    """Invalid conversion settings, raised before anything is packed."""


class BitNumbering(Enum):
    MSB = "msb"
    LSB = "lsb"


class OutputFormat(Enum):
    C = "c"
    ARDUINO = "arduino"
    PYTHON_LIST = "python-list"
    PYTHON_BYTES = "python-bytes"

    @classmethod
    def from_name(cls, name):
        try:
            return cls(name.lower())
        except ValueError:
            names = ", ".join(f.value for f in cls)
            raise ConfigError(f"unknown output format '{name}' (available: {names})") from None


class FontMetrics(namedtuple("FontMetrics", ["height", "width"])):
    """Pixel size of one glyph cell."""

    __slots__ = ()

    def validate(self):
        for name, value in (("height", self.height), ("width", self.width)):
            if not isinstance(value, int) or not 1 <= value <= MAX_METRIC:
                raise ConfigError(f"font {name} must be between 1 and {MAX_METRIC}, got {value!r}")
        return self


SourceCodeOptions = namedtuple(
    "SourceCodeOptions", ["bit_numbering", "invert_bits"], defaults=(BitNumbering.LSB, False)
)

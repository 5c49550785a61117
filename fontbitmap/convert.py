import io
from datetime import datetime

from fontbitmap.bytewriter import writer_for
from fontbitmap.config import OutputFormat, SourceCodeOptions
from fontbitmap.packer import format_byte, glyph_grid, pack_glyph

ARRAY_NAME = "font"
TIMESTAMP_FORMAT = "%d/%m/%Y at %H:%M:%S"


class FixedWidthFontConverter:
    """Turns a grid of fixed-size glyphs into a source-code byte array."""

    def __init__(self, font_metrics, output_format=OutputFormat.C, options=SourceCodeOptions()):
        self.font_metrics = font_metrics.validate()
        self.output_format = output_format
        self.options = options
        self.writer = writer_for(output_format)

    def convert(self, image, out, timestamp=None):
        """Write the source for every whole glyph in `image` to `out`.

        Glyphs go top-to-bottom, left-to-right, each on its own line with a
        "Character 0xNN (N)" comment. Tokens are written as they are produced;
        a failing write raises and nothing more is written.
        Returns the number of glyphs written.
        """
        if timestamp is None:
            timestamp = datetime.now().strftime(TIMESTAMP_FORMAT)
        writer = self.writer

        out.write(writer.begin(timestamp))
        out.write(writer.begin_array(ARRAY_NAME))

        columns, rows = glyph_grid(image, self.font_metrics)
        character_count = 0
        for y in range(rows):
            for x in range(columns):
                out.write(writer.begin_array_row())
                for byte in pack_glyph(image, self.font_metrics, x, y):
                    out.write(writer.byte(format_byte(byte, self.options)))
                out.write(writer.comment(f"Character 0x{character_count:02X} ({character_count})"))
                out.write(writer.line_break())
                character_count += 1

        out.write(writer.end_array())
        out.write(writer.end())
        return character_count

    def convert_to_string(self, image, timestamp=None):
        buf = io.StringIO()
        self.convert(image, buf, timestamp)
        return buf.getvalue()

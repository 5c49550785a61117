from fontbitmap.config import BitNumbering


def glyph_grid(image, metrics):
    """Number of whole glyph cells as (columns, rows); partial cells are dropped."""
    return image.width() // metrics.width, image.height() // metrics.height


def pack_row(image, metrics, glyph_x, glyph_y, row):
    """Pack one pixel row of a glyph, 8 pixels per byte, first pixel in bit 7.

    Rows wider than 8 pixels take several bytes, left to right. Unused low
    bits of the last byte stay zero.
    """
    packed = []
    remaining_bits = metrics.width
    byte_index = 0
    y = glyph_y * metrics.height + row
    while remaining_bits > 0:
        bit_count = min(remaining_bits, 8)
        byte = 0
        for bit in range(bit_count):
            x = glyph_x * metrics.width + bit + 8 * byte_index
            if image.is_pixel_set(x, y):
                byte |= 1 << (7 - bit)
        packed.append(byte)
        byte_index += 1
        remaining_bits -= bit_count
    return packed


def pack_glyph(image, metrics, glyph_x, glyph_y):
    for row in range(metrics.height):
        yield from pack_row(image, metrics, glyph_x, glyph_y, row)


def reverse_bits(byte):
    byte = (byte & 0xF0) >> 4 | (byte & 0x0F) << 4
    byte = (byte & 0xCC) >> 2 | (byte & 0x33) << 2
    byte = (byte & 0xAA) >> 1 | (byte & 0x55) << 1
    return byte


def invert_bits(byte):
    return ~byte & 0xFF


def format_byte(byte, options):
    # reorder first, then invert
    if options.bit_numbering is BitNumbering.MSB:
        byte = reverse_bits(byte)
    if options.invert_bits:
        byte = invert_bits(byte)
    return byte

from PIL import Image


class PixelRows:
    """Pixel source built from strings of '1'/'0'."""

    def __init__(self, rows):
        self.rows = rows

    def width(self):
        return len(self.rows[0]) if self.rows else 0

    def height(self):
        return len(self.rows)

    def is_pixel_set(self, x, y):
        if x >= self.width() or y >= self.height():
            return False
        return self.rows[y][x] == "1"


def draw(rows, mode="RGBA"):
    """Black-on-white Pillow image from strings of '1'/'0'."""
    im = Image.new("RGBA", (len(rows[0]), len(rows)), (255, 255, 255, 255))
    for y, row in enumerate(rows):
        for x, pixel in enumerate(row):
            if pixel == "1":
                im.putpixel((x, y), (0, 0, 0, 255))
    if mode == "1":
        im = im.convert("L")
    return im.convert(mode)

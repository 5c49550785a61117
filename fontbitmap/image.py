from PIL import Image

# dark-on-light: opaque pixels with any channel below this are set
THRESHOLD = 0x32


class InputImage:
    """Boolean pixel view over a Pillow image.

    Any mode Pillow can convert to RGBA is accepted (1, L, LA, P, RGB, RGBA...).
    A pixel is set when it is fully opaque and at least one colour channel
    is darker than THRESHOLD.
    """

    def __init__(self, image):
        self.image = image.convert("RGBA")
        self.pixels = self.image.load()

    def width(self):
        return self.image.width

    def height(self):
        return self.image.height

    def is_pixel_set(self, x, y):
        if x < 0 or y < 0 or x >= self.image.width or y >= self.image.height:
            return False
        r, g, b, a = self.pixels[x, y]
        return a == 0xFF and (r < THRESHOLD or g < THRESHOLD or b < THRESHOLD)


def read_image(path):
    # decoding errors from Pillow are left to the caller
    with Image.open(path) as im:
        return InputImage(im)

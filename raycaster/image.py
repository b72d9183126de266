"""An off-screen pixel buffer with simple drawing primitives."""


class Image:
    """A width x height image stored as rows of little-endian pixels.

    Rows are padded to a multiple of 32 bits, as an X image with a bitmap pad
    of 32 would be. Pixels hold 0xRRGGBB colours, blue byte first.
    """

    def __init__(self, width, height, bpp=32):
        if width <= 0 or height <= 0:
            raise ValueError(f"image size must be positive, got {width}x{height}")
        if bpp % 8 or bpp < 24:
            raise ValueError(f"bits per pixel must be 24 or more in whole bytes, got {bpp}")
        self.width = width
        self.height = height
        self.bpp = bpp
        self.size_line = (width * bpp + 31) // 32 * 4
        self.endian = 0
        self.data = bytearray(self.size_line * height)

    @property
    def bytes_per_pixel(self):
        return self.bpp // 8

    def _offset(self, x, y):
        return y * self.size_line + x * self.bytes_per_pixel

    def _inside(self, x, y):
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self):
        """Set every pixel byte to zero."""
        count = self.width * self.height * self.bytes_per_pixel
        self.data[:count] = bytes(count)

    def put_pixel(self, x, y, color):
        """Write a colour at (x, y); points outside the image are ignored."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            return
        index = self._offset(x, y)
        self.data[index] = color & 0xFF
        self.data[index + 1] = (color >> 8) & 0xFF
        self.data[index + 2] = (color >> 16) & 0xFF

    def get_pixel(self, x, y):
        """Return the 0xRRGGBB colour at (x, y); raises IndexError outside."""
        x, y = int(x), int(y)
        if not self._inside(x, y):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        index = self._offset(x, y)
        blue, green, red = self.data[index:index + 3]
        return (red << 16) | (green << 8) | blue

    def draw_square(self, x, y, size, color):
        """Draw the outline of a size x size square with its corner at (x, y)."""
        x, y = int(x), int(y)
        for i in range(size):
            self.put_pixel(x + i, y, color)
        for i in range(size):
            self.put_pixel(x + i, y + size - 1, color)
        for j in range(size):
            self.put_pixel(x, y + j, color)
        for j in range(size):
            self.put_pixel(x + size - 1, y + j, color)

    def draw_filled_square(self, x, y, size, color):
        """Fill a size x size square with its corner at (x, y)."""
        x, y = int(x), int(y)
        for j in range(size):
            for i in range(size):
                self.put_pixel(x + i, y + j, color)
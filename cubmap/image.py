"""In-memory pixel images with the layout used by the renderer."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

_BITMAP_PAD = 32
_SUPPORTED_BPP = (8, 16, 24, 32)


@dataclass(eq=False)
class Image:
    """A pixel buffer whose rows are padded to 32 bits.

    ``byte_order`` is 0 for little-endian pixels and 1 for big-endian ones.
    """

    width: int
    height: int
    bits_per_pixel: int = 32
    byte_order: int = 0
    data: bytearray = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"image size must be positive, got {self.width}x{self.height}"
            )
        if self.bits_per_pixel not in _SUPPORTED_BPP:
            raise ValueError(f"unsupported bits per pixel: {self.bits_per_pixel}")
        if self.byte_order not in (0, 1):
            raise ValueError(f"byte order must be 0 or 1, got {self.byte_order}")
        self.data = bytearray(self.size_line * self.height)

    @property
    def bytes_per_pixel(self) -> int:
        return self.bits_per_pixel // 8

    @property
    def size_line(self) -> int:
        """Number of bytes in one row of the buffer."""
        bits = self.width * self.bits_per_pixel
        return (bits + _BITMAP_PAD - 1) // _BITMAP_PAD * (_BITMAP_PAD // 8)

    @property
    def _order(self) -> str:
        return "big" if self.byte_order else "little"

    def _offset(self, x: int, y: int) -> int:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) outside a {self.width}x{self.height} image"
            )
        return y * self.size_line + x * self.bytes_per_pixel

    def set_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at ``(x, y)``, keeping only as many bytes as a pixel holds."""
        size = self.bytes_per_pixel
        offset = self._offset(x, y)
        value = color & ((1 << (8 * size)) - 1)
        self.data[offset : offset + size] = value.to_bytes(size, self._order)

    def get_pixel(self, x: int, y: int) -> int:
        """Return the unsigned pixel value stored at ``(x, y)``."""
        size = self.bytes_per_pixel
        offset = self._offset(x, y)
        return int.from_bytes(self.data[offset : offset + size], self._order)


def convert_color(color: int, depth: int, shifts: Sequence[int]) -> int:
    """Convert a 0xRRGGBB colour to a pixel value for a display of ``depth`` bits.

    ``shifts`` holds, for red, green and blue in turn, the position of the
    channel in the pixel and its number of bits. Displays of 24 bits or
    more take the colour unchanged.
    """
    if depth >= 24:
        return color
    if len(shifts) != 6:
        raise ValueError(f"expected 6 shift values, got {len(shifts)}")
    red_shift, red_bits, green_shift, green_bits, blue_shift, blue_bits = shifts
    if not all(0 <= bits <= 16 for bits in (red_bits, green_bits, blue_bits)):
        raise ValueError("channel widths must lie between 0 and 16 bits")
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - red_bits)) << red_shift)
        + ((green >> (16 - green_bits)) << green_shift)
        + ((blue >> (16 - blue_bits)) << blue_shift)
    )
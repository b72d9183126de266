"""Colour conversion for pixel formats described by channel bit masks."""

from typing import NamedTuple


class ChannelShifts(NamedTuple):
    """Position and width of each colour channel inside a pixel value."""

    red_shift: int
    red_bits: int
    green_shift: int
    green_bits: int
    blue_shift: int
    blue_bits: int


def _mask_layout(mask):
    if mask <= 0:
        raise ValueError(f"channel mask must be a positive bit field, got {mask!r}")
    shift = (mask & -mask).bit_length() - 1
    mask >>= shift
    bits = 0
    while mask & 1:
        mask >>= 1
        bits += 1
    return shift, bits


def channel_shifts(red_mask, green_mask, blue_mask):
    """Return the shift and bit count of each channel mask.

    Each mask is read from its lowest set bit upwards: the shift is the number
    of zero bits below it, the width the run of one bits that follows.
    Raises ValueError for a mask with no bits set.
    """
    red = _mask_layout(red_mask)
    green = _mask_layout(green_mask)
    blue = _mask_layout(blue_mask)
    return ChannelShifts(*red, *green, *blue)


def get_good_color(color, depth, shifts):
    """Convert a 0xRRGGBB colour to a pixel value for the given visual.

    Visuals of 24 bits or more take the colour as it is; shallower ones get
    each 8-bit channel scaled down to its width and moved to its position.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    return (
        ((red >> (16 - shifts[1])) << shifts[0])
        + ((green >> (16 - shifts[3])) << shifts[2])
        + ((blue >> (16 - shifts[5])) << shifts[4])
    )
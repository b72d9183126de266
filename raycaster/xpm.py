"""Reading XPM pixmaps into images.

The reader understands XPM 3 text: a header of width, height, colour count
and characters per pixel, one line per colour, then one line per pixel row.
Only the colour ("c") visual of each colour entry is used. Transparent
pixels ("None") become 0xFF000000.
"""

import re

from .colors import lookup_color
from .image import Image

TRANSPARENT = 0xFF000000
"""Pixel value written for a transparent ("None") colour."""

_WORD_SPLIT = re.compile(r"[ \t]+")
_HEX_PREFIX = re.compile(r"\s*([+-]?)(?:0[xX])?([0-9a-fA-F]*)")
_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")
_NAME_BUFFER = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def split_words(text):
    """Split text into words separated by runs of spaces and tabs."""
    return [word for word in _WORD_SPLIT.split(text) if word]


def _find_unquoted(text, token, start=0):
    """Index of the first token outside double quotes, or -1."""
    quoted = False
    last = len(text) - len(token)
    pos = start
    while pos <= last:
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(token, pos):
            return pos
        pos += 1
    return -1


def _blank(text, begin, end):
    return text[:begin] + " " * (end - begin) + text[end:]


def strip_comments(text):
    """Replace C comments outside quoted strings with spaces.

    Block comments are removed first, then line comments together with the
    newline that ends them. The result has the same length as the input.
    """
    begin = _find_unquoted(text, "/*")
    while begin != -1:
        close = text.find("*/", begin + 2)
        end = len(text) if close == -1 else close + 2
        text = _blank(text, begin, end)
        begin = _find_unquoted(text, "/*", begin)
    begin = _find_unquoted(text, "//")
    while begin != -1:
        newline = text.find("\n", begin + 2)
        end = len(text) if newline == -1 else newline + 1
        text = _blank(text, begin, end)
        begin = _find_unquoted(text, "//", begin)
    return text


def extract_strings(text):
    """Return the contents of successive double-quoted strings in text.

    A final quote without a partner is ignored.
    """
    strings = []
    pos = 0
    while True:
        opening = text.find('"', pos)
        if opening == -1:
            break
        closing = text.find('"', opening + 1)
        if closing == -1:
            break
        strings.append(text[opening + 1:closing])
        pos = closing + 1
    return strings


def _parse_hex(text):
    match = _HEX_PREFIX.match(text)
    sign, digits = match.groups()
    if not digits:
        return 0
    value = int(digits, 16)
    return -value if sign == "-" else value


def color_from_text(name, end=None):
    """Return the colour a colour-spec word names.

    "#RRGGBB" is read as hexadecimal. Otherwise the name, joined to the word
    that follows it when there is one, is looked up in the colour database
    ignoring case; "None" gives -1 and an unknown name gives 0.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_BUFFER]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _atoi(word):
    match = _INT_PREFIX.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines, what):
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line):
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values, got {line!r}")
    values = [_atoi(word) for word in words[:4]]
    if any(value <= 0 for value in values):
        raise XpmError(f"XPM header values must be positive, got {line!r}")
    return values


def _read_colors(lines, count, cpp):
    colors = {}
    last_wins = cpp <= 2
    for _ in range(count):
        line = _next_line(lines, "colour table is complete")
        key = line[:cpp]
        words = split_words(line[cpp:])
        try:
            at = words.index("c") + 1
            name = words[at]
        except (ValueError, IndexError):
            raise XpmError(f"XPM colour line has no colour visual: {line!r}") from None
        following = words[at + 1] if at + 1 < len(words) else None
        value = color_from_text(name, following)
        if last_wins:
            colors[key] = value
        else:
            colors.setdefault(key, value)
    return colors


def parse_xpm(lines):
    """Build an Image from the strings of an XPM, header first.

    Raises XpmError when the header, a colour line or a pixel row is missing
    or malformed.
    """
    lines = iter(lines)
    width, height, count, cpp = _read_header(_next_line(lines, "header"))
    colors = _read_colors(lines, count, cpp)
    image = Image(width, height)
    opp = image.bytes_per_pixel
    for y in range(height):
        row = _next_line(lines, f"pixel row {y}")
        if len(row) < width * cpp:
            raise XpmError(f"XPM pixel row {y} is shorter than {width} pixels")
        base = y * image.size_line
        for x in range(width):
            color = colors.get(row[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            start = base + x * opp
            image.data[start:start + opp] = (color & 0xFFFFFFFF).to_bytes(4, "little")[:opp]
    return image


def read_xpm_file(path):
    """Read an XPM file and return its Image.

    OSError from opening the file propagates; bad contents raise XpmError.
    """
    with open(path, encoding="latin-1") as handle:
        text = handle.read()
    return parse_xpm(extract_strings(strip_comments(text)))


def xpm_to_image(xpm_data):
    """Build an Image from XPM strings already held in memory."""
    return parse_xpm(xpm_data)
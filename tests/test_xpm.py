import pytest

from raycaster.xpm import (
    XpmError,
    color_from_text,
    extract_strings,
    parse_xpm,
    read_xpm_file,
    split_words,
    strip_comments,
    xpm_to_image,
)

SAMPLE = [
    "3 2 3 1",
    "  c None",
    ". c #FF0000",
    "X c blue",
    " .X",
    "X. ",
]

SAMPLE_FILE = """/* XPM */
static char *test[] = {
/* columns rows colors chars-per-pixel */
"3 2 3 1",
"  c None",
". c #FF0000",
"X c blue",
// pixels
" .X",
"X. ",
};
"""


def _alpha(image, x, y):
    return image.data[y * image.size_line + x * image.bytes_per_pixel + 3]


def test_split_words_on_spaces_and_tabs():
    assert split_words("  a \tb  c\t") == ["a", "b", "c"]


def test_split_words_empty():
    assert split_words(" \t ") == []


def test_split_words_keeps_newlines_inside_words():
    assert split_words("a\nb c") == ["a\nb", "c"]


def test_strip_block_comment_preserves_length():
    text = "a/* x */b"
    result = strip_comments(text)
    assert len(result) == len(text)
    assert result.replace(" ", "") == "ab"


def test_strip_comment_inside_quotes_kept():
    text = '"/* keep */" /* drop */'
    result = strip_comments(text)
    assert result.startswith('"/* keep */"')
    assert "drop" not in result


def test_strip_line_comment_includes_newline():
    result = strip_comments("x // y\nz")
    assert result == "x" + " " * 6 + "z"


def test_extract_strings():
    assert extract_strings('{"ab", "cd", "e') == ["ab", "cd"]


def test_color_from_hex():
    assert color_from_text("#FF0000") == 0xFF0000


def test_color_from_name_ignores_case():
    assert color_from_text("RED") == color_from_text("red") == 0xFF0000


def test_color_from_two_words():
    assert color_from_text("dark", "red") == color_from_text("darkred")


def test_color_none_and_unknown():
    assert color_from_text("None") == -1
    assert color_from_text("no-such-colour") == 0


def test_parse_xpm_pixels():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (3, 2)
    assert image.get_pixel(1, 0) == 0xFF0000
    assert image.get_pixel(2, 0) == color_from_text("blue")
    assert image.get_pixel(0, 1) == color_from_text("blue")
    assert image.get_pixel(1, 1) == 0xFF0000


def test_transparent_pixel_sets_alpha():
    image = parse_xpm(SAMPLE)
    assert image.get_pixel(0, 0) == 0
    assert _alpha(image, 0, 0) == 0xFF
    assert _alpha(image, 1, 0) == 0


def test_xpm_to_image_matches_parse():
    assert xpm_to_image(SAMPLE).data == parse_xpm(SAMPLE).data


def test_read_file_round_trip(tmp_path):
    path = tmp_path / "sample.xpm"
    path.write_text(SAMPLE_FILE, encoding="latin-1")
    assert read_xpm_file(path).data == parse_xpm(SAMPLE).data


def test_two_chars_per_pixel():
    image = parse_xpm(["2 1 2 2", "aa c red", "bb c #00FF00", "bbaa"])
    assert image.get_pixel(0, 0) == 0x00FF00
    assert image.get_pixel(1, 0) == 0xFF0000


def test_header_with_zero_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["0 2 1 1", ". c red", ".", "."])


def test_short_header_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["3 2 1"])


def test_colour_line_without_visual_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["1 1 1 1", ". m red", "."])


def test_missing_rows_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["1 2 1 1", ". c red", "."])


def test_short_row_rejected():
    with pytest.raises(XpmError):
        parse_xpm(["3 1 1 1", ". c red", ".."])


def test_missing_file(tmp_path):
    with pytest.raises(OSError):
        read_xpm_file(tmp_path / "absent.xpm")
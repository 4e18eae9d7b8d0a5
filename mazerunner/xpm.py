"""Reading XPM images: tokenising, comment removal, colour tables and pixels."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike

from mazerunner.colors import color_from_text

TRANSPARENT = 0xFF000000
"""Pixel value stored for the XPM colour ``None``."""

_DIRECT_TABLE_MAX_CPP = 2
_WORD_SEPARATORS = re.compile(r"[ \t]+")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image; ``pixels`` holds one tuple of RGB ints per row."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]

    def to_bytes(self, bytes_per_pixel: int = 4, big_endian: bool = False) -> bytes:
        """Pack all pixels row by row into a contiguous byte string."""
        return b"".join(
            pack_pixel(color, bytes_per_pixel, big_endian)
            for row in self.pixels
            for color in row
        )


def split_words(text: str) -> list[str]:
    """Split ``text`` into words separated by spaces and tabs."""
    return [word for word in _WORD_SEPARATORS.split(text) if word]


def _find_outside_quotes(text: str, pattern: str) -> int:
    inside = False
    for pos, char in enumerate(text):
        if char == '"':
            inside = not inside
        if not inside and text.startswith(pattern, pos):
            return pos
    return -1


def _blank_comments(text: str, opener: str, closer: str) -> str:
    while (start := _find_outside_quotes(text, opener)) != -1:
        end = text.find(closer, start + len(opener))
        stop = len(text) if end == -1 else end + len(closer)
        text = text[:start] + " " * (stop - start) + text[stop:]
    return text


def strip_comments(text: str) -> str:
    """Replace C-style comments outside quoted strings with spaces.

    Block comments are blanked first, then line comments together with their
    terminating newline. The length of the text is preserved.
    """
    text = _blank_comments(text, "/*", "*/")
    return _blank_comments(text, "//", "\n")


def quoted_strings(text: str) -> Iterator[str]:
    """Yield, in order, the contents of each pair of double quotes in ``text``."""
    pos = 0
    while (open_quote := text.find('"', pos)) != -1:
        close_quote = text.find('"', open_quote + 1)
        if close_quote == -1:
            return
        yield text[open_quote + 1:close_quote]
        pos = close_quote + 1


def pack_pixel(color: int, bytes_per_pixel: int, big_endian: bool) -> bytes:
    """Encode the low ``bytes_per_pixel`` bytes of ``color`` in the given order."""
    if bytes_per_pixel <= 0:
        raise ValueError("bytes_per_pixel must be positive")
    value = color & ((1 << (8 * bytes_per_pixel)) - 1)
    return value.to_bytes(bytes_per_pixel, "big" if big_endian else "little")


def _atoi(word: str) -> int:
    match = _LEADING_INT.match(word)
    return int(match.group(1)) if match else 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    return values


def _parse_color_line(line: str, cpp: int) -> int:
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return color_from_text(words[index], end)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Build an image from XPM strings: header, colour lines, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(source, "colour table end")
        color = _parse_color_line(line, cpp)
        key = line[:cpp]
        if cpp <= _DIRECT_TABLE_MAX_CPP:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    rows = []
    for _ in range(height):
        line = _next_line(source, "last pixel row")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row shorter than {width * cpp} characters: {line!r}")
        row = []
        for start in range(0, width * cpp, cpp):
            color = palette.get(line[start:start + cpp], 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Parse the text of an XPM file."""
    return parse_xpm_lines(quoted_strings(strip_comments(text)))


def read_xpm_file(path: str | PathLike[str]) -> XpmImage:
    """Read and parse an XPM file from disk."""
    try:
        with open(path, encoding="latin-1") as handle:
            text = handle.read()
    except OSError as exc:
        raise XpmError(f"cannot read XPM file {path}: {exc}") from exc
    return parse_xpm_text(text)
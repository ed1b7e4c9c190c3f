"""String, bit and colour helpers used throughout the monitor."""

from __future__ import annotations

import re

from trafficmon.variant import Variant

_UINT32_MASK = 0xFFFFFFFF
_UINT64_MASK = 0xFFFFFFFFFFFFFFFF

_FONT_STYLE_WEIGHTS = {
    "Light": 300,
    "Semilight": 350,
    "Semibold": 600,
    "Bold": 700,
    "Black": 900,
}
_FONT_FACE_MAX_CHARS = 31

_JSON_VALUE_START = re.compile(r'[^" ]')
_JSON_VALUE_END = re.compile(r'[",\]}\r\n]')


def _is_blank(ch: str) -> bool:
    return 0 <= ord(ch) <= 32


def string_normalize(text: str) -> str:
    """Strip spaces and control characters (code points 0..32) from both ends."""
    start = 0
    end = len(text)
    while start < end and _is_blank(text[start]):
        start += 1
    while end > start and _is_blank(text[end - 1]):
        end -= 1
    return text[start:end]


def string_split(text: str, separator: str, skip_empty: bool = True, trim: bool = True) -> list[str]:
    """Split text on a separator character or string, optionally trimming and dropping empties."""
    if not separator:
        raise ValueError("separator must not be empty")
    parts = text.split(separator)
    if trim:
        parts = [string_normalize(part) for part in parts]
    if skip_empty:
        parts = [part for part in parts if part]
    return parts


def string_transform(text: str, upper: bool) -> str:
    """Change the case of ASCII letters only."""
    if upper:
        return "".join(chr(ord(ch) - 32) if "a" <= ch <= "z" else ch for ch in text)
    return "".join(chr(ord(ch) + 32) if "A" <= ch <= "Z" else ch for ch in text)


def string_similar_degree(src: str, match: str) -> float:
    """Similarity in [0, 1] from the Levenshtein distance; 0 if either string is empty."""
    if not src or not match:
        return 0.0
    previous = list(range(len(match) + 1))
    for i, src_ch in enumerate(src, start=1):
        current = [i]
        for j, match_ch in enumerate(match, start=1):
            cost = 0 if src_ch == match_ch else 1
            current.append(min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + cost))
        previous = current
    return 1 - previous[-1] / max(len(src), len(match))


def int_to_string(n: int, thousand_separation: bool = False, is_unsigned: bool = False) -> str:
    """Format an integer, optionally as unsigned 64-bit and with commas every three characters."""
    text = str(n & _UINT64_MASK if is_unsigned else n)
    if not thousand_separation:
        return text
    reversed_text = text[::-1]
    chunks = [reversed_text[i:i + 3] for i in range(0, len(reversed_text), 3)]
    return ",".join(chunks)[::-1]


def string_format(format_str: str, *args) -> str:
    """Replace <%1%>, <%2%>, ... with the rendered arguments."""
    result = format_str
    for index, arg in enumerate(args, start=1):
        variant = arg if isinstance(arg, Variant) else Variant(arg)
        result = result.replace(f"<%{index}%>", variant.to_string())
    return result


def get_json_value_simple(json_str: str, name: str) -> str:
    """Pull the raw text of a named value out of a flat JSON string, or '' if absent."""
    index = json_str.find(f'"{name}"')
    if index == -1:
        return ""
    index = json_str.find(":", index + 1)
    if index == -1:
        return ""
    start = _JSON_VALUE_START.search(json_str, index + 1)
    if start is None:
        return ""
    end = _JSON_VALUE_END.search(json_str, start.start())
    return json_str[start.start():end.start() if end else len(json_str)]


def count_one_bits(value: int) -> int:
    """Number of set bits in a 32-bit unsigned value."""
    return bin(value & _UINT32_MASK).count("1")


def set_number_bit(num: int, bit: int, value: bool) -> int:
    """Return num with the given bit set or cleared, as a 32-bit unsigned value."""
    if value:
        num |= 1 << bit
    else:
        num &= ~(1 << bit)
    return num & _UINT32_MASK


def get_number_bit(num: int, bit: int) -> bool:
    """Whether the given bit of num is set."""
    return (num & (1 << bit)) != 0


def _rgb(color: int) -> tuple[int, int, int]:
    return color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF


def is_color_similar(color1: int, color2: int) -> bool:
    """True if every RGB channel of two COLORREF values differs by less than 24."""
    return all(abs(a - b) < 24 for a, b in zip(_rgb(color1), _rgb(color2)))


def transparent_color_convert(color: int) -> int:
    """Nudge the blue channel by one when red equals blue; zero is left alone."""
    if color == 0:
        return color
    r, g, b = _rgb(color)
    if r != b:
        return color
    b = b - 1 if b >= 255 else b + 1
    return r | (g << 8) | (b << 16)


def normalize_font_name(name: str) -> tuple[str, int | None]:
    """Split a trailing weight word off a font face name.

    Returns the face name and the weight it implies, or None when the name
    carries no recognised weight word.
    """
    if not name:
        return name, None
    trimmed = name[:-1] if name.endswith(" ") else name
    index = trimmed.rfind(" ")
    if index == -1:
        return name, None
    weight = _FONT_STYLE_WEIGHTS.get(trimmed[index + 1:])
    if weight is not None:
        trimmed = trimmed[:index]
    return trimmed[:_FONT_FACE_MAX_CHARS], weight
import math
import re

# Perceptual luma weights (Rec. 601), not linear-light luminance
LUMA_WEIGHTS = (0.299, 0.587, 0.114)

NEUTRAL_LUMINANCE = 0.5
DEFAULT_BYTE = 128

_HEX_BYTE_RE = re.compile(r"[0-9a-fA-F]{2}")
_HEX_COLOR_RE = re.compile(
    r"#?([0-9a-fA-F]{3}|[0-9a-fA-F]{4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})"
)
_RGB_SEPARATOR_RE = re.compile(r"[,\s]+")
# Plain decimal numbers only; float() would also take "1_0", "inf" and "nan"
_NUMBER_RE = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?")


def luma(r, g, b):
    """Weighted luma of channels already normalized to 0.0-1.0."""
    wr, wg, wb = LUMA_WEIGHTS
    return wr * r + wg * g + wb * b


def _parse_float(token):
    """Parse a number token, returning None for garbage and non-finite values."""
    if not _NUMBER_RE.fullmatch(token):
        return None
    value = float(token)
    if not math.isfinite(value):
        return None
    return value


def _hex_byte(pair):
    if _HEX_BYTE_RE.fullmatch(pair):
        return int(pair, 16)
    return DEFAULT_BYTE


def hex_to_rgb(hex_color):
    """Split a #rgb / #rrggbb / #rrggbbaa string into an (r, g, b) byte tuple.

    Alpha is dropped. Pairs that are not valid hex default to 128.
    Returns None when the digit count is not 3, 6 or 8.
    """
    digits = hex_color.strip()
    if digits.startswith("#"):
        digits = digits[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    elif len(digits) in (6, 8):
        digits = digits[:6]
    else:
        return None
    return tuple(_hex_byte(digits[i : i + 2]) for i in (0, 2, 4))


def normalize_hex_color(value):
    """Return an upper-case '#...' hex string, or None if value is not hex."""
    if value is None:
        return None
    trimmed = value.strip()
    if not trimmed or not _HEX_COLOR_RE.fullmatch(trimmed):
        return None
    if not trimmed.startswith("#"):
        trimmed = "#" + trimmed
    return trimmed.upper()


def _hex_luminance(css):
    rgb = hex_to_rgb(css)
    if rgb is None:
        return NEUTRAL_LUMINANCE
    return luma(*(c / 255 for c in rgb))


def _rgb_luminance(css):
    inner = css
    for prefix in ("rgba(", "rgb("):
        if inner.startswith(prefix):
            inner = inner[len(prefix) :]
            break
    inner = inner.rstrip(")")

    channels = []
    for token in _RGB_SEPARATOR_RE.split(inner):
        value = _parse_float(token)
        if value is not None:
            channels.append(value)

    # Alpha and anything after it is ignored
    if len(channels) < 3:
        return NEUTRAL_LUMINANCE
    r, g, b = channels[:3]
    return luma(r / 255, g / 255, b / 255)


def _oklch_luminance(css):
    inner = css[len("oklch(") :].rstrip(")")
    tokens = inner.split()
    first = tokens[0] if tokens else ""

    if first.endswith("%"):
        percent = _parse_float(first[:-1])
        lightness = (50.0 if percent is None else percent) / 100
    else:
        lightness = _parse_float(first)
        if lightness is None:
            lightness = NEUTRAL_LUMINANCE

    return max(0.0, min(1.0, lightness))


def parse_luminance(css):
    """Approximate the luminance (0.0-1.0) of a CSS color string.

    Understands hex (#rgb, #rrggbb, #rrggbbaa), rgb()/rgba() and oklch().
    For oklch the lightness component is used directly. Never raises:
    anything unrecognized comes back as the neutral 0.5.
    """
    trimmed = css.strip()

    if trimmed.startswith("#"):
        return _hex_luminance(trimmed)
    if trimmed.startswith("rgb"):
        return _rgb_luminance(trimmed)
    if trimmed.startswith("oklch("):
        return _oklch_luminance(trimmed)

    return NEUTRAL_LUMINANCE

import json
import math

from ..contrast import TEXT_MODES, is_light_brightness
from ..theme import AppearanceSettings, ResolvedColors, compose_theme

SETTINGS_FIELDS = {
    "user_bubble_color": "userBubbleColor",
    "assistant_bubble_color": "assistantBubbleColor",
    "bubble_opacity": "bubbleOpacity",
    "text_mode": "textMode",
    "user_bubble_color_hex": "userBubbleColorHex",
    "assistant_bubble_color_hex": "assistantBubbleColorHex",
}

THEME_FIELDS = {
    "assistant_bg": "assistantBg",
    "assistant_border": "assistantBorder",
    "assistant_text": "assistantText",
    "user_bg": "userBg",
    "user_border": "userBorder",
    "user_text": "userText",
    "header_overlay": "headerOverlay",
    "footer_overlay": "footerOverlay",
    "content_overlay": "contentOverlay",
}


class ThemeRequestError(ValueError):
    """A theme request could not be decoded into settings and colors."""


def _require_object(value, path):
    if not isinstance(value, dict):
        raise ThemeRequestError(f"{path}: expected an object")
    return value


def _require_field(obj, key, path):
    if key not in obj:
        raise ThemeRequestError(f"{path}.{key}: missing field")
    return obj[key]


def _require_str(obj, key, path):
    value = _require_field(obj, key, path)
    if not isinstance(value, str):
        raise ThemeRequestError(f"{path}.{key}: expected a string")
    return value


def _optional_str(obj, key, path):
    value = obj.get(key)
    if value is not None and not isinstance(value, str):
        raise ThemeRequestError(f"{path}.{key}: expected a string or null")
    return value


def _as_number(value, path):
    # bool is an int subclass but never a valid number here
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ThemeRequestError(f"{path}: expected a number")
    try:
        number = float(value)
    except OverflowError:
        raise ThemeRequestError(f"{path}: number out of range") from None
    if not math.isfinite(number):
        raise ThemeRequestError(f"{path}: expected a finite number")
    return value


def decode_settings(data, path="settings"):
    """Build AppearanceSettings from a camelCase object."""
    data = _require_object(data, path)
    text_mode = _require_str(data, "textMode", path)
    if text_mode not in TEXT_MODES:
        raise ThemeRequestError(
            f"{path}.textMode: expected one of {', '.join(TEXT_MODES)}, got {text_mode!r}"
        )
    return AppearanceSettings(
        user_bubble_color=_require_str(data, "userBubbleColor", path),
        assistant_bubble_color=_require_str(data, "assistantBubbleColor", path),
        bubble_opacity=_as_number(
            _require_field(data, "bubbleOpacity", path), f"{path}.bubbleOpacity"
        ),
        text_mode=text_mode,
        user_bubble_color_hex=_optional_str(data, "userBubbleColorHex", path),
        assistant_bubble_color_hex=_optional_str(data, "assistantBubbleColorHex", path),
    )


def decode_resolved(data, path="resolved"):
    """Build ResolvedColors from a camelCase object."""
    data = _require_object(data, path)
    return ResolvedColors(
        user_color_css=_require_str(data, "userColorCss", path),
        assistant_color_css=_require_str(data, "assistantColorCss", path),
    )


def decode_brightness(value, path="bgBrightness"):
    """None stays None (no background image), anything else must be a number."""
    if value is None:
        return None
    return float(_as_number(value, path))


def decode_request(payload):
    """Decode a theme request.

    Args:
        payload: dict with "settings", "resolved" and optional "bgBrightness"

    Returns:
        tuple: (AppearanceSettings, bg_brightness or None, ResolvedColors)

    Raises:
        ThemeRequestError: if the payload does not have the expected shape
    """
    payload = _require_object(payload, "request")
    settings = decode_settings(_require_field(payload, "settings", "request"))
    bg_brightness = decode_brightness(payload.get("bgBrightness"))
    resolved = decode_resolved(_require_field(payload, "resolved", "request"))
    return settings, bg_brightness, resolved


def settings_to_dict(settings):
    return {camel: getattr(settings, name) for name, camel in SETTINGS_FIELDS.items()}


def theme_to_dict(theme):
    """Convert ThemeColors into the camelCase object the UI consumes."""
    return {camel: getattr(theme, name) for name, camel in THEME_FIELDS.items()}


def compute_chat_theme(payload):
    """Decode a request, compose the theme and encode it back to a dict."""
    settings, bg_brightness, resolved = decode_request(payload)
    return theme_to_dict(compose_theme(settings, bg_brightness, resolved))


def load_request(json_path):
    """Read a theme request JSON file. The payload is not decoded here."""
    with open(json_path) as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise ThemeRequestError(f"{json_path}: invalid JSON ({exc.msg})") from exc


def export_json(theme, filepath, settings=None, bg_brightness=None):
    """Export a theme as JSON with metadata.

    Args:
        theme: The ThemeColors to write
        filepath: Output file path
        settings: Optional AppearanceSettings the theme was computed from
        bg_brightness: Optional background brightness the theme was computed for
    """
    data = theme_to_dict(theme)

    if settings is not None:
        data["_settings"] = settings_to_dict(settings)

    data["_bgBrightness"] = (
        round(bg_brightness, 1) if bg_brightness is not None else None
    )
    data["_isLightBackground"] = (
        is_light_brightness(bg_brightness) if bg_brightness is not None else None
    )

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)

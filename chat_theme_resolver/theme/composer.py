import math

from ..color import normalize_hex_color, parse_luminance
from ..contrast import TEXT_INHERIT, TEXT_LIGHT, is_light_brightness, resolve_text_color
from .models import DEFAULT_SETTINGS, NEUTRAL_TOKEN, ThemeColors

# Non-neutral borders ignore the configured bubble opacity
BORDER_OPACITY = 50

# Neutral assistant bubble without a background image: faint foreground tint
NEUTRAL_BG = "bg-fg/5"
NEUTRAL_BORDER = "border-fg/10"

# Neutral assistant bubble over a background image
NEUTRAL_LIGHT_BG_BORDER = "border-black/40"
NEUTRAL_DARK_BG_BORDER = "border-gray-400/40"
NEUTRAL_LIGHT_BG_LUMINANCE = 0.0  # black
NEUTRAL_DARK_BG_LUMINANCE = 0.35  # gray-600

# Dark backgrounds get a less opaque gray bubble so the image still shows
DARK_BG_OPACITY_FACTOR = 0.85

LIGHT_OVERLAYS = {
    "header_overlay": "bg-white/45 backdrop-blur-md",
    "footer_overlay": "bg-white/50 backdrop-blur-md",
    "content_overlay": "rgba(255, 255, 255, 0.20)",
}

DARK_OVERLAYS = {
    "header_overlay": "bg-[#050505]/40 backdrop-blur-md",
    "footer_overlay": "bg-[#050505]/45 backdrop-blur-md",
    "content_overlay": "rgba(5, 5, 5, 0.15)",
}

NO_OVERLAYS = {
    "header_overlay": "",
    "footer_overlay": "",
    "content_overlay": "",
}

# Stand-ins for resolved colors when computing fallback themes
LIGHT_BACKGROUND_BRIGHTNESS = 200
DARK_BACKGROUND_BRIGHTNESS = 50


def round_percent(value):
    """Round a percentage half away from zero. Non-finite values pass through."""
    if not math.isfinite(value):
        return value
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _bubble_bg(token, opacity_pct):
    return f"bg-{token}/{opacity_pct}"


def _bubble_border(token):
    return f"border-{token}/{BORDER_OPACITY}"


def bubble_css(token_css, custom_hex):
    """CSS color a bubble renders with: a valid custom hex wins over the token."""
    return normalize_hex_color(custom_hex) or token_css


def bubble_color_class(token, custom_hex):
    """Color part of a bubble class, e.g. "accent" or "[#FF0000]"."""
    custom = normalize_hex_color(custom_hex)
    if custom is not None:
        return f"[{custom}]"
    return token


def is_neutral_assistant(settings):
    """A custom assistant hex turns the "neutral" token into a regular color."""
    return (
        settings.assistant_bubble_color == NEUTRAL_TOKEN
        and normalize_hex_color(settings.assistant_bubble_color_hex) is None
    )


def _assistant_text(settings, bg_brightness, assistant_lum, opacity_01):
    if not is_neutral_assistant(settings):
        return resolve_text_color(
            bg_brightness, assistant_lum, opacity_01, settings.text_mode
        )

    if bg_brightness is None:
        # Near-transparent bubble, text inherits the app foreground
        return TEXT_INHERIT

    # The resolved CSS for "neutral" is the foreground color, which is not what
    # the bubble renders as once a background image is active.
    if is_light_brightness(bg_brightness):
        bubble_lum = NEUTRAL_LIGHT_BG_LUMINANCE
    else:
        bubble_lum = NEUTRAL_DARK_BG_LUMINANCE
    return resolve_text_color(bg_brightness, bubble_lum, opacity_01, settings.text_mode)


def _neutral_assistant_surface(bg_brightness, opacity_pct):
    """Background and border classes for a neutral assistant bubble."""
    if bg_brightness is None:
        return NEUTRAL_BG, NEUTRAL_BORDER
    if is_light_brightness(bg_brightness):
        return f"bg-black/{opacity_pct}", NEUTRAL_LIGHT_BG_BORDER
    reduced = round_percent(opacity_pct * DARK_BG_OPACITY_FACTOR)
    return f"bg-gray-600/{reduced}", NEUTRAL_DARK_BG_BORDER


def _overlays(bg_brightness):
    if bg_brightness is None:
        return NO_OVERLAYS
    if is_light_brightness(bg_brightness):
        return LIGHT_OVERLAYS
    return DARK_OVERLAYS


def compose_theme(settings, bg_brightness, resolved):
    """Compute the full chat theme.

    Args:
        settings: AppearanceSettings
        bg_brightness: None if no background image, otherwise 0.0-255.0
        resolved: ResolvedColors with the CSS colors of both bubble tokens

    Returns:
        ThemeColors
    """
    opacity = settings.bubble_opacity
    opacity_01 = opacity / 100
    opacity_pct = round_percent(opacity)

    user_lum = parse_luminance(
        bubble_css(resolved.user_color_css, settings.user_bubble_color_hex)
    )
    assistant_lum = parse_luminance(
        bubble_css(resolved.assistant_color_css, settings.assistant_bubble_color_hex)
    )

    user_text = resolve_text_color(
        bg_brightness, user_lum, opacity_01, settings.text_mode
    )
    assistant_text = _assistant_text(settings, bg_brightness, assistant_lum, opacity_01)

    user_token = bubble_color_class(
        settings.user_bubble_color, settings.user_bubble_color_hex
    )
    assistant_token = bubble_color_class(
        settings.assistant_bubble_color, settings.assistant_bubble_color_hex
    )

    if is_neutral_assistant(settings):
        assistant_bg, assistant_border = _neutral_assistant_surface(
            bg_brightness, opacity_pct
        )
    else:
        assistant_bg = _bubble_bg(assistant_token, opacity_pct)
        assistant_border = _bubble_border(assistant_token)

    return ThemeColors(
        assistant_bg=assistant_bg,
        assistant_border=assistant_border,
        assistant_text=assistant_text,
        user_bg=_bubble_bg(user_token, opacity_pct),
        user_border=_bubble_border(user_token),
        user_text=user_text,
        **_overlays(bg_brightness),
    )


def default_theme():
    """Theme to render with before the real one has been computed."""
    return ThemeColors(
        assistant_bg=NEUTRAL_BG,
        assistant_border=NEUTRAL_BORDER,
        assistant_text=TEXT_INHERIT,
        user_bg=_bubble_bg(
            DEFAULT_SETTINGS.user_bubble_color, DEFAULT_SETTINGS.bubble_opacity
        ),
        user_border=_bubble_border(DEFAULT_SETTINGS.user_bubble_color),
        user_text=TEXT_LIGHT,
        **NO_OVERLAYS,
    )


def theme_for_background(is_light, resolved):
    """Compose the default settings over a light or dark stand-in background."""
    if is_light:
        brightness = LIGHT_BACKGROUND_BRIGHTNESS
    else:
        brightness = DARK_BACKGROUND_BRIGHTNESS
    return compose_theme(DEFAULT_SETTINGS, brightness, resolved)

TEXT_MODES = ("auto", "light", "dark")

# Text color classes
TEXT_FORCED_LIGHT = "text-white"
TEXT_LIGHT = "text-white/95"
TEXT_DARK = "text-gray-900"
TEXT_INHERIT = "text-fg"

# Above this the surface reads as light. Deliberately below 0.5: bubble
# palettes skew mid-to-dark, so ties go to light text.
DARK_TEXT_THRESHOLD = 0.45

# Background images with average brightness above this (0-255) read as light
LIGHT_BRIGHTNESS_THRESHOLD = 127.5


def effective_luminance(bg_brightness, bubble_luminance, bubble_opacity_01):
    """Luminance of a bubble as seen on screen.

    Without a background image the bubble sits on the app surface and its own
    luminance is used. With one, the bubble is alpha-blended over the sampled
    image brightness (0-255).
    """
    if bg_brightness is None:
        return bubble_luminance
    bg_lum = bg_brightness / 255
    return bubble_opacity_01 * bubble_luminance + (1 - bubble_opacity_01) * bg_lum


def resolve_text_color(bg_brightness, bubble_luminance, bubble_opacity_01, text_mode):
    """Pick the text color class for a bubble.

    Args:
        bg_brightness: None if no background image, otherwise 0.0-255.0
        bubble_luminance: Bubble color luminance (0.0-1.0)
        bubble_opacity_01: Bubble opacity (0.0-1.0)
        text_mode: "light" or "dark" force a color; anything else is auto

    Returns:
        str: Text color class
    """
    if text_mode == "light":
        return TEXT_FORCED_LIGHT
    if text_mode == "dark":
        return TEXT_DARK

    lum = effective_luminance(bg_brightness, bubble_luminance, bubble_opacity_01)
    if lum > DARK_TEXT_THRESHOLD:
        return TEXT_DARK
    return TEXT_LIGHT


def is_light_brightness(brightness):
    """True if a sampled background brightness (0-255) reads as light."""
    return brightness > LIGHT_BRIGHTNESS_THRESHOLD

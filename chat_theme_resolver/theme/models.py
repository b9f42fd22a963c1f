from collections import namedtuple

NEUTRAL_TOKEN = "neutral"

# The *_hex fields are optional custom colors that replace the token
AppearanceSettings = namedtuple(
    "AppearanceSettings",
    [
        "user_bubble_color",
        "assistant_bubble_color",
        "bubble_opacity",
        "text_mode",
        "user_bubble_color_hex",
        "assistant_bubble_color_hex",
    ],
    defaults=(None, None),
)

ResolvedColors = namedtuple("ResolvedColors", ["user_color_css", "assistant_color_css"])

ThemeColors = namedtuple(
    "ThemeColors",
    [
        "assistant_bg",
        "assistant_border",
        "assistant_text",
        "user_bg",
        "user_border",
        "user_text",
        "header_overlay",
        "footer_overlay",
        "content_overlay",
    ],
)

DEFAULT_SETTINGS = AppearanceSettings(
    user_bubble_color="accent",
    assistant_bubble_color=NEUTRAL_TOKEN,
    bubble_opacity=35,
    text_mode="auto",
)

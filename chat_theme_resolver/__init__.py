from .color import parse_luminance
from .contrast import resolve_text_color
from .theme import (
    AppearanceSettings,
    ResolvedColors,
    ThemeColors,
    compose_theme,
    default_theme,
    theme_for_background,
)

__all__ = [
    "parse_luminance",
    "resolve_text_color",
    "compose_theme",
    "default_theme",
    "theme_for_background",
    "AppearanceSettings",
    "ResolvedColors",
    "ThemeColors",
]

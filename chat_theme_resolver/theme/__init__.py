from .composer import compose_theme, default_theme, theme_for_background
from .models import (
    DEFAULT_SETTINGS,
    NEUTRAL_TOKEN,
    AppearanceSettings,
    ResolvedColors,
    ThemeColors,
)

__all__ = [
    "compose_theme",
    "default_theme",
    "theme_for_background",
    "DEFAULT_SETTINGS",
    "NEUTRAL_TOKEN",
    "AppearanceSettings",
    "ResolvedColors",
    "ThemeColors",
]

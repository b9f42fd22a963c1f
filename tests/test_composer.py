"""Tests for chat theme composition."""

import math

import pytest
from chat_theme_resolver.theme import (
    DEFAULT_SETTINGS,
    AppearanceSettings,
    ResolvedColors,
    ThemeColors,
    compose_theme,
    default_theme,
    theme_for_background,
)
from chat_theme_resolver.theme.composer import round_percent


def make_settings(user="blue", assistant="neutral", opacity=40, text_mode="auto"):
    return AppearanceSettings(
        user_bubble_color=user,
        assistant_bubble_color=assistant,
        bubble_opacity=opacity,
        text_mode=text_mode,
    )


# A dark blue user bubble and the light foreground color behind "neutral"
RESOLVED = ResolvedColors(user_color_css="#1d4ed8", assistant_color_css="#f5f5f5")


class TestNoBackground:
    """Themes without a background image."""

    def test_overlays_empty(self):
        theme = compose_theme(make_settings(), None, RESOLVED)
        assert theme.header_overlay == ""
        assert theme.footer_overlay == ""
        assert theme.content_overlay == ""

    @pytest.mark.parametrize("opacity", [0, 40, 100])
    def test_neutral_assistant_fixed_fill(self, opacity):
        """Neutral bubble ignores the configured opacity."""
        theme = compose_theme(make_settings(opacity=opacity), None, RESOLVED)
        assert theme.assistant_bg == "bg-fg/5"
        assert theme.assistant_border == "border-fg/10"
        assert theme.assistant_text == "text-fg"

    def test_user_bubble(self):
        theme = compose_theme(make_settings(), None, RESOLVED)
        assert theme.user_bg == "bg-blue/40"
        assert theme.user_border == "border-blue/50"
        assert theme.user_text == "text-white/95"

    def test_non_neutral_assistant(self):
        settings = make_settings(assistant="secondary", opacity=70)
        resolved = RESOLVED._replace(assistant_color_css="oklch(0.9 0.05 120)")
        theme = compose_theme(settings, None, resolved)
        assert theme.assistant_bg == "bg-secondary/70"
        assert theme.assistant_border == "border-secondary/50"
        assert theme.assistant_text == "text-gray-900"

    def test_opacity_rounded(self):
        theme = compose_theme(make_settings(opacity=42.6), None, RESOLVED)
        assert theme.user_bg == "bg-blue/43"

    def test_neutral_text_ignores_text_mode(self):
        """Without a background the neutral bubble always inherits the foreground."""
        theme = compose_theme(make_settings(text_mode="dark"), None, RESOLVED)
        assert theme.assistant_text == "text-fg"
        assert theme.user_text == "text-gray-900"


class TestBackgroundActive:
    """Themes over a background image."""

    def test_dark_background_neutral_reduced_opacity(self):
        theme = compose_theme(make_settings(opacity=40), 50, RESOLVED)
        assert theme.assistant_bg == "bg-gray-600/34"
        assert theme.assistant_border == "border-gray-400/40"

    def test_light_background_neutral_black(self):
        theme = compose_theme(make_settings(opacity=40), 200, RESOLVED)
        assert theme.assistant_bg == "bg-black/40"
        assert theme.assistant_border == "border-black/40"

    def test_neutral_text_uses_rendered_color(self):
        """Text contrast follows the black/gray bubble, not the resolved fg color."""
        # Light background: 0.4 * 0.0 + 0.6 * (200 / 255) = 0.47 -> dark text
        theme = compose_theme(make_settings(opacity=40), 200, RESOLVED)
        assert theme.assistant_text == "text-gray-900"
        # Black bubble at 80%: 0.2 * (200 / 255) = 0.16 -> light text
        theme = compose_theme(make_settings(opacity=80), 200, RESOLVED)
        assert theme.assistant_text == "text-white/95"
        # Dark background: 0.4 * 0.35 + 0.6 * (50 / 255) = 0.26 -> light text
        theme = compose_theme(make_settings(opacity=40), 50, RESOLVED)
        assert theme.assistant_text == "text-white/95"

    def test_user_bubble_unchanged(self):
        plain = compose_theme(make_settings(), None, RESOLVED)
        themed = compose_theme(make_settings(), 200, RESOLVED)
        assert themed.user_bg == plain.user_bg
        assert themed.user_border == plain.user_border

    def test_non_neutral_assistant_unchanged(self):
        settings = make_settings(assistant="info")
        theme = compose_theme(settings, 50, RESOLVED)
        assert theme.assistant_bg == "bg-info/40"
        assert theme.assistant_border == "border-info/50"

    def test_light_overlays(self):
        theme = compose_theme(make_settings(), 200, RESOLVED)
        assert theme.header_overlay == "bg-white/45 backdrop-blur-md"
        assert theme.footer_overlay == "bg-white/50 backdrop-blur-md"
        assert theme.content_overlay == "rgba(255, 255, 255, 0.20)"

    def test_dark_overlays(self):
        theme = compose_theme(make_settings(), 50, RESOLVED)
        assert theme.header_overlay == "bg-[#050505]/40 backdrop-blur-md"
        assert theme.footer_overlay == "bg-[#050505]/45 backdrop-blur-md"
        assert theme.content_overlay == "rgba(5, 5, 5, 0.15)"

    def test_overlays_independent_of_bubbles(self):
        a = compose_theme(make_settings(opacity=10, text_mode="light"), 50, RESOLVED)
        b = compose_theme(make_settings(user="red", opacity=90), 50, RESOLVED)
        assert a[6:] == b[6:]

    def test_brightness_threshold_is_dark(self):
        """Exactly 127.5 counts as a dark background."""
        theme = compose_theme(make_settings(), 127.5, RESOLVED)
        assert theme.assistant_bg.startswith("bg-gray-600/")

    def test_forced_mode_over_background(self):
        theme = compose_theme(make_settings(text_mode="light"), 250, RESOLVED)
        assert theme.user_text == "text-white"
        assert theme.assistant_text == "text-white"


class TestDeterminism:
    def test_identical_inputs_identical_output(self):
        settings = make_settings(opacity=55)
        first = compose_theme(settings, 90, RESOLVED)
        second = compose_theme(settings, 90, RESOLVED)
        assert first == second
        assert first is not second

    def test_returns_theme_colors(self):
        theme = compose_theme(make_settings(), None, RESOLVED)
        assert isinstance(theme, ThemeColors)
        assert all(isinstance(value, str) for value in theme)


class TestRoundPercent:
    def test_half_rounds_up(self):
        assert round_percent(2.5) == 3
        assert round_percent(34.5) == 35

    def test_integers_pass(self):
        assert round_percent(40) == 40
        assert round_percent(40 * 0.85) == 34

    def test_non_finite_passes_through(self):
        assert math.isnan(round_percent(float("nan")))

    def test_nan_opacity_does_not_raise(self):
        theme = compose_theme(make_settings(opacity=float("nan")), 50, RESOLVED)
        assert theme.user_bg == "bg-blue/nan"


class TestFallbackThemes:
    def test_default_theme(self):
        theme = default_theme()
        assert theme.user_bg == "bg-accent/35"
        assert theme.user_border == "border-accent/50"
        assert theme.user_text == "text-white/95"
        assert theme.assistant_bg == "bg-fg/5"
        assert theme.assistant_text == "text-fg"
        assert theme.header_overlay == ""

    def test_default_theme_matches_dark_accent(self):
        resolved = ResolvedColors(user_color_css="#312e81", assistant_color_css="#fafafa")
        assert compose_theme(DEFAULT_SETTINGS, None, resolved) == default_theme()

    def test_theme_for_light_background(self):
        theme = theme_for_background(True, RESOLVED)
        assert theme == compose_theme(DEFAULT_SETTINGS, 200, RESOLVED)
        assert theme.assistant_bg == "bg-black/35"

    def test_theme_for_dark_background(self):
        theme = theme_for_background(False, RESOLVED)
        assert theme.assistant_bg == "bg-gray-600/30"


class TestCustomHexColors:
    """A custom hex color replaces the token color."""

    def test_user_hex_wins_over_resolved_token(self):
        settings = make_settings(opacity=40)._replace(user_bubble_color_hex="fde047")
        theme = compose_theme(settings, None, RESOLVED)
        assert theme.user_bg == "bg-[#FDE047]/40"
        assert theme.user_border == "border-[#FDE047]/50"
        # Luminance comes from the yellow, not the resolved dark blue
        assert theme.user_text == "text-gray-900"

    def test_assistant_hex_disables_neutral(self):
        settings = make_settings()._replace(assistant_bubble_color_hex="#ff0000")
        theme = compose_theme(settings, None, RESOLVED)
        assert theme.assistant_bg == "bg-[#FF0000]/40"
        assert theme.assistant_border == "border-[#FF0000]/50"
        assert theme.assistant_text == "text-white/95"

    def test_assistant_hex_over_background(self):
        settings = make_settings()._replace(assistant_bubble_color_hex="#ff0000")
        theme = compose_theme(settings, 50, RESOLVED)
        assert theme.assistant_bg == "bg-[#FF0000]/40"
        assert theme.assistant_border == "border-[#FF0000]/50"
        # 0.4 * 0.299 + 0.6 * (50 / 255) = 0.24
        assert theme.assistant_text == "text-white/95"

    def test_invalid_hex_ignored(self):
        settings = make_settings()._replace(
            user_bubble_color_hex="blue", assistant_bubble_color_hex="#12345"
        )
        theme = compose_theme(settings, None, RESOLVED)
        assert theme.user_bg == "bg-blue/40"
        assert theme.assistant_bg == "bg-fg/5"
        assert theme.assistant_text == "text-fg"

    def test_hex_fields_default_to_none(self):
        settings = make_settings()
        assert settings.user_bubble_color_hex is None
        assert settings.assistant_bubble_color_hex is None

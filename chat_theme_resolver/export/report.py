from ..color import parse_luminance
from ..contrast import DARK_TEXT_THRESHOLD, effective_luminance, is_light_brightness
from ..theme.composer import bubble_color_class, bubble_css, is_neutral_assistant
from .json_export import THEME_FIELDS


def _background_label(bg_brightness):
    if bg_brightness is None:
        return "none"
    tone = "LIGHT" if is_light_brightness(bg_brightness) else "DARK"
    return f"{bg_brightness:.1f}/255 ({tone})"


def generate_theme_report(settings, bg_brightness, resolved, theme):
    """Generate a contrast report explaining how the theme was chosen."""
    opacity_01 = settings.bubble_opacity / 100

    report = []
    report.append("=" * 70)
    report.append("CHAT THEME REPORT")
    report.append("=" * 70)
    report.append(f"Text mode:   {settings.text_mode}")
    report.append(f"Opacity:     {settings.bubble_opacity}%")
    report.append(f"Background:  {_background_label(bg_brightness)}")
    report.append(f"Threshold:   dark text above {DARK_TEXT_THRESHOLD:.2f}")

    bubbles = [
        (
            "USER",
            bubble_color_class(settings.user_bubble_color, settings.user_bubble_color_hex),
            bubble_css(resolved.user_color_css, settings.user_bubble_color_hex),
            theme.user_text,
            False,
        ),
        (
            "ASSISTANT",
            bubble_color_class(
                settings.assistant_bubble_color, settings.assistant_bubble_color_hex
            ),
            bubble_css(resolved.assistant_color_css, settings.assistant_bubble_color_hex),
            theme.assistant_text,
            is_neutral_assistant(settings),
        ),
    ]

    for label, token, css, text, neutral in bubbles:
        lum = parse_luminance(css)
        report.append(f"\n{label} BUBBLE ({token})")
        report.append("-" * 50)
        report.append(f"  css        {css or '(empty)'}")
        report.append(f"  luminance  {lum:.3f}")
        if neutral:
            report.append("  effective  (neutral bubble, see text class)")
        else:
            eff = effective_luminance(bg_brightness, lum, opacity_01)
            report.append(f"  effective  {eff:.3f}")
        report.append(f"  text       {text}")

    report.append("\n" + "=" * 70)
    return "\n".join(report)


def print_theme(theme):
    """Print theme classes"""
    print("\n" + "=" * 60)
    print("CHAT THEME")
    print("=" * 60)

    for name, camel in THEME_FIELDS.items():
        value = getattr(theme, name)
        print(f"  {camel:16} {value or '(none)'}")

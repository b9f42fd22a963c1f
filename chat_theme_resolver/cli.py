import argparse
import math
import os
import sys

from .color import normalize_hex_color
from .contrast import TEXT_MODES, is_light_brightness
from .export import (
    ThemeRequestError,
    decode_request,
    export_json,
    generate_theme_report,
    load_request,
    print_theme,
)
from .image import analyze_image_brightness
from .theme import DEFAULT_SETTINGS, ResolvedColors, compose_theme
from .tokens import load_tokens_from_json, resolve_token_css


def build_parser():
    parser = argparse.ArgumentParser(
        description="Compute chat bubble and overlay classes from appearance settings"
    )
    parser.add_argument(
        "--from-request",
        metavar="JSON",
        help="Load settings, resolved colors and brightness from a request JSON file",
    )
    parser.add_argument("--user-color", metavar="TOKEN", help="User bubble color token")
    parser.add_argument(
        "--assistant-color",
        metavar="TOKEN",
        help="Assistant bubble color token ('neutral' for the default bubble)",
    )
    parser.add_argument(
        "--opacity",
        type=float,
        default=None,
        help="Bubble opacity in percent (0-100)",
    )
    parser.add_argument(
        "--text-mode",
        choices=TEXT_MODES,
        default=None,
        help="Force light or dark text, or pick automatically",
    )
    parser.add_argument("--user-css", metavar="COLOR", help="Resolved CSS color of the user bubble")
    parser.add_argument(
        "--assistant-css", metavar="COLOR", help="Resolved CSS color of the assistant bubble"
    )
    parser.add_argument(
        "--user-hex",
        metavar="HEX",
        help="Custom user bubble color, used instead of the token color",
    )
    parser.add_argument(
        "--assistant-hex",
        metavar="HEX",
        help="Custom assistant bubble color; also disables the neutral bubble style",
    )
    parser.add_argument(
        "--tokens",
        metavar="JSON",
        help="Design-token table used to resolve colors not given with --*-css",
    )
    parser.add_argument(
        "--background",
        metavar="IMAGE",
        help="Background image to sample brightness from",
    )
    parser.add_argument(
        "--brightness",
        type=float,
        default=None,
        help="Background brightness (0-255) instead of sampling an image",
    )
    parser.add_argument("--output", "-o", metavar="FILE", help="Write the theme JSON here")
    parser.add_argument("--report", metavar="FILE", help="Write the contrast report here")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    # Validate arguments
    if args.background and args.brightness is not None:
        parser.error("Cannot use both --background and --brightness")
    for flag, value in (("--opacity", args.opacity), ("--brightness", args.brightness)):
        if value is not None and not math.isfinite(value):
            parser.error(f"{flag} must be a finite number")
    for flag, value in (("--user-hex", args.user_hex), ("--assistant-hex", args.assistant_hex)):
        if value is not None and normalize_hex_color(value) is None:
            parser.error(f"{flag} must be a hex color like #3B82F6")

    try:
        settings, bg_brightness, resolved = _load_inputs(args)
    except ThemeRequestError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    theme = compose_theme(settings, bg_brightness, resolved)
    report = generate_theme_report(settings, bg_brightness, resolved, theme)

    print_theme(theme)
    print("\n" + report)

    exported = []
    if args.output:
        _ensure_parent_dir(args.output)
        export_json(theme, args.output, settings=settings, bg_brightness=bg_brightness)
        exported.append(args.output)
    if args.report:
        _ensure_parent_dir(args.report)
        with open(args.report, "w") as f:
            f.write(report)
        exported.append(args.report)

    if exported:
        print("\n" + "=" * 60)
        print("Exported:")
        for path in exported:
            print(f"  - {path}")
        print("=" * 60)


def _load_inputs(args):
    """Combine request file, token table and flags. Flags win over the request."""
    if args.from_request:
        print(f"Loading request: {args.from_request}")
        settings, bg_brightness, resolved = decode_request(load_request(args.from_request))
    else:
        settings, bg_brightness = DEFAULT_SETTINGS, None
        resolved = ResolvedColors(user_color_css="", assistant_color_css="")

    overrides = {
        "user_bubble_color": args.user_color,
        "assistant_bubble_color": args.assistant_color,
        "bubble_opacity": args.opacity,
        "text_mode": args.text_mode,
        "user_bubble_color_hex": args.user_hex,
        "assistant_bubble_color_hex": args.assistant_hex,
    }
    settings = settings._replace(**{k: v for k, v in overrides.items() if v is not None})

    tokens = load_tokens_from_json(args.tokens) if args.tokens else None
    resolved = ResolvedColors(
        user_color_css=_pick_css(
            args.user_css, settings.user_bubble_color, tokens, resolved.user_color_css
        ),
        assistant_color_css=_pick_css(
            args.assistant_css,
            settings.assistant_bubble_color,
            tokens,
            resolved.assistant_color_css,
        ),
    )

    # Brightness: --brightness > --background > request
    if args.brightness is not None:
        bg_brightness = args.brightness
    elif args.background:
        print(f"Analyzing background: {args.background}")
        bg_brightness = analyze_image_brightness(args.background)
        tone = "light" if is_light_brightness(bg_brightness) else "dark"
        print(f"Average brightness: {bg_brightness:.1f} ({tone})")

    return settings, bg_brightness, resolved


def _pick_css(explicit, token, tokens, fallback):
    if explicit is not None:
        return normalize_hex_color(explicit) or explicit
    if tokens is not None:
        return resolve_token_css(token, tokens)
    return fallback


def _ensure_parent_dir(path):
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
"""
Generate chat themes for every request file, with and without backgrounds.
Consolidates themes into out/themes/ folder.
"""

import argparse
import subprocess
from pathlib import Path


def main():
    parser = argparse.ArgumentParser(
        description="Generate chat themes for all request JSON files"
    )
    parser.add_argument(
        "--tokens",
        metavar="JSON",
        default=None,
        help="Design-token table passed to every run",
    )
    args = parser.parse_args()

    root = Path(__file__).parent
    requests_dir = root / "requests"
    backgrounds_dir = root / "backgrounds"
    themes_dir = root / "out" / "themes"

    themes_dir.mkdir(parents=True, exist_ok=True)

    # Supported image extensions
    image_extensions = {".png", ".jpg", ".jpeg", ".webp"}

    requests = []
    if requests_dir.exists():
        requests = [f for f in requests_dir.iterdir() if f.suffix.lower() == ".json"]

    backgrounds = []
    if backgrounds_dir.exists():
        backgrounds = [
            f for f in backgrounds_dir.iterdir() if f.suffix.lower() in image_extensions
        ]

    if not requests:
        print(f"No requests in {requests_dir}")
        return

    print(
        f"Found {len(requests)} requests and {len(backgrounds)} backgrounds to process\n"
    )

    failures = 0
    for request_path in sorted(requests):
        name = request_path.stem

        # None = the request's own background setting
        for background in [None, *sorted(backgrounds)]:
            theme_name = name if background is None else f"{name}-{background.stem}"

            print(f"{'=' * 60}")
            print(f"Generating theme: {theme_name}")
            print(f"{'=' * 60}")

            cmd = [
                "uv",
                "run",
                "chat-theme",
                "--from-request",
                str(request_path),
                "-o",
                str(themes_dir / f"{theme_name}.json"),
                "--report",
                str(themes_dir / f"{theme_name}-report.txt"),
            ]
            if background is not None:
                cmd.extend(["--background", str(background)])
            if args.tokens is not None:
                cmd.extend(["--tokens", args.tokens])

            result = subprocess.run(cmd, cwd=root)

            if result.returncode != 0:
                print(f"Error generating {theme_name}")
                failures += 1
                continue
            print()

    print(f"{'=' * 60}")
    print("Done! All themes consolidated in:")
    print(f"  {themes_dir}")
    if failures:
        print(f"  ({failures} failed)")
    print(f"{'=' * 60}")


if __name__ == "__main__":
    main()

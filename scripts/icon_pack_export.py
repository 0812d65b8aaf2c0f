#!/usr/bin/env python3
"""Export styled icons as a PNG icon pack (zip archive with pack.json)."""

import argparse
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from icon_pack.cache import FileStore, ResourceCache
from icon_pack.errors import IconExportError, InvalidIconIdError, StyleConfigError
from icon_pack.export import export_icon_pack, generate_pack_json, save_to_directory
from icon_pack.provider import DEFAULT_TIMEOUT, ICONIFY_API, IconifyProvider, IconSource
from icon_pack.style import BACKGROUND_SHAPES, EFFECTS, StyleConfig, parse_style_file


def print_progress(current: int, total: int) -> None:
    """Print export progress on a single line."""
    print(f"\rExporting {current}/{total}...", end="", file=sys.stderr, flush=True)
    if current == total:
        print(file=sys.stderr)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code:
        - 0: Success
        - 1: I/O error
        - 2: Style or argument error
        - 3: Export failed
    """
    parser = argparse.ArgumentParser(
        description="Export styled icons as a PNG icon pack.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Export two Lucide icons with the default style
  %(prog)s lucide:home lucide:settings --name "My Pack"

  # Use a YAML style file and a larger output size
  %(prog)s lucide:home mdi:github --style style.yaml --size 256

  # Print the manifest without rendering anything
  %(prog)s lucide:home lucide:settings --preview
""",
    )
    parser.add_argument("icons", nargs="+", help="Icon identifiers (collection:name)")
    parser.add_argument("--name", "-n", default="", help="Pack name")
    parser.add_argument("--style", "-s", type=Path, help="YAML style file")
    parser.add_argument("--size", type=int, help="Output size in pixels")
    parser.add_argument("--padding", type=float, help="Padding in percent")
    parser.add_argument("--stroke-width", type=float, help="Stroke width for stroke icons")
    parser.add_argument("--foreground", help="Foreground color")
    parser.add_argument("--background", help="Background color")
    parser.add_argument("--shape", choices=BACKGROUND_SHAPES, help="Background shape")
    parser.add_argument("--effect", choices=EFFECTS, help="Icon effect")
    parser.add_argument(
        "--output-dir", "-o", type=Path, default=Path("."), help="Directory for the archive"
    )
    parser.add_argument("--cache-dir", type=Path, help="Directory for cached icon data")
    parser.add_argument("--api-url", default=ICONIFY_API, help="Icon API base URL")
    parser.add_argument(
        "--timeout", type=float, default=DEFAULT_TIMEOUT, help="Request timeout in seconds"
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Print the pack manifest without exporting",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.preview:
        try:
            print(generate_pack_json(args.name, args.icons))
        except InvalidIconIdError as e:
            print(f"Error: {e}", file=sys.stderr)
            return 2
        return 0

    if args.style is not None and not args.style.exists():
        print(f"Error: Style file not found: {args.style}", file=sys.stderr)
        return 1

    # Parse style
    try:
        style = parse_style_file(args.style) if args.style else StyleConfig()
        style = style.with_overrides(
            icon_size=args.size,
            padding=args.padding,
            stroke_width=args.stroke_width,
            foreground_color=args.foreground,
            background_color=args.background,
            background_shape=args.shape,
            effect=args.effect,
        )
    except StyleConfigError as e:
        print(f"Error: Invalid style: {e}", file=sys.stderr)
        return 2
    except Exception as e:
        print(f"Error: Failed to parse style file: {e}", file=sys.stderr)
        return 2

    cache = ResourceCache(FileStore(args.cache_dir)) if args.cache_dir else ResourceCache()
    source = IconSource(IconifyProvider(base_url=args.api_url, timeout=args.timeout), cache)

    try:
        result = export_icon_pack(
            args.name,
            args.icons,
            style,
            source,
            deliver=save_to_directory(args.output_dir),
            on_progress=print_progress,
        )
    except IconExportError as e:
        print(f"\nError: {e}", file=sys.stderr)
        if e.__cause__ is not None:
            print(f"  Cause: {e.__cause__}", file=sys.stderr)
        return 3
    except OSError as e:
        print(f"Error: Failed to write archive: {e}", file=sys.stderr)
        return 1

    print(f"Exported {len(result.icons)} icons to: {args.output_dir / result.file_name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

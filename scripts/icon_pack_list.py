#!/usr/bin/env python3
"""List icon libraries, icon names of a library, or curated icons."""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from icon_pack.cache import FileStore, ResourceCache
from icon_pack.errors import NetworkFetchError
from icon_pack.libraries import LIBRARIES, curated_icons_by_category, get_library
from icon_pack.provider import ICONIFY_API, IconifyProvider, IconSource


def format_libraries() -> str:
    """Format the library registry as a text table.

    Returns:
        Formatted table string.
    """
    rows: list[tuple[str, str, str, str]] = [("Library", "Prefix", "Style", "Icons")]
    rows.append(("-" * 20, "-" * 16, "-" * 6, "-" * 8))
    for library in LIBRARIES.values():
        rows.append((library.id, library.prefix, library.convention, library.icon_count))

    widths = [max(len(row[i]) for row in rows) for i in range(4)]
    return "\n".join(
        f"{r[0]:<{widths[0]}}  {r[1]:<{widths[1]}}  {r[2]:<{widths[2]}}  {r[3]:>{widths[3]}}"
        for r in rows
    )


def format_curated() -> str:
    """Format curated icons grouped by category."""
    lines = []
    for category, icons in curated_icons_by_category().items():
        lines.append(f"{category}:")
        for icon in icons:
            lines.append(f"  {icon.id:<24} {icon.label}")
    return "\n".join(lines)


def main() -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success, 1 for network error, 2 for unknown library).
    """
    parser = argparse.ArgumentParser(
        description="List icon libraries, icon names of a library, or curated icons."
    )
    parser.add_argument("library", nargs="?", help="Library id or prefix to list icons for")
    parser.add_argument("--curated", action="store_true", help="List curated icons")
    parser.add_argument(
        "-f",
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument("--cache-dir", type=Path, help="Directory for cached icon data")
    parser.add_argument("--api-url", default=ICONIFY_API, help="Icon API base URL")
    parser.add_argument("--verbose", "-v", action="store_true", help="Verbose logging")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.curated:
        if args.format == "json":
            grouped = {
                category: [{"id": i.id, "label": i.label} for i in icons]
                for category, icons in curated_icons_by_category().items()
            }
            print(json.dumps(grouped, indent=2))
        else:
            print(format_curated())
        return 0

    if args.library is None:
        if args.format == "json":
            data = [
                {
                    "id": lib.id,
                    "name": lib.name,
                    "prefix": lib.prefix,
                    "convention": lib.convention,
                    "supports_stroke": lib.supports_stroke,
                }
                for lib in LIBRARIES.values()
            ]
            print(json.dumps(data, indent=2))
        else:
            print(format_libraries())
        return 0

    library = get_library(args.library)
    if library is None:
        print(f"Error: Unknown library: {args.library}", file=sys.stderr)
        return 2

    cache = ResourceCache(FileStore(args.cache_dir)) if args.cache_dir else ResourceCache()
    source = IconSource(IconifyProvider(base_url=args.api_url), cache)
    try:
        names = source.list_icon_names(library.prefix)
    except NetworkFetchError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if args.format == "json":
        print(json.dumps(names, indent=2))
    else:
        for name in names:
            print(f"{library.prefix}:{name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())

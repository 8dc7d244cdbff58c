#!/usr/bin/env python3
"""
lottiepack CLI - Convert between .lottie containers and Lottie JSON.

Usage:
    lottiepack to-json animation.lottie --output ./json/
    lottiepack to-lottie animation.json --output animation.lottie
    lottiepack info animation.lottie
"""

import argparse
import logging
import posixpath
import sys
from pathlib import Path

from lottiepack.assets import unique_filename
from lottiepack.diagnostics import Diagnostics


def _print_warnings(diagnostics):
    for warning in diagnostics:
        print(f"Warning: {warning}", file=sys.stderr)


def cmd_to_json(args):
    """Convert .lottie to self-contained JSON files."""
    from lottiepack.package import convert_lottie_to_json

    diagnostics = Diagnostics()
    try:
        animations = convert_lottie_to_json(args.input, diagnostics=diagnostics)

        output_dir = Path(args.output or f"{Path(args.input).stem}_json")
        output_dir.mkdir(parents=True, exist_ok=True)

        # animations/x.json and a/x.json can both resolve
        taken = set()
        for anim in animations:
            name = unique_filename(posixpath.basename(anim.original_path), taken)
            taken.add(name)
            out_path = output_dir / name
            out_path.write_text(anim.json_string, encoding="utf-8")
            print(f"Wrote {out_path} (from {anim.original_path})")

        _print_warnings(diagnostics)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_to_lottie(args):
    """Convert Lottie JSON to a .lottie container."""
    from lottiepack.package import convert_json_to_lottie

    diagnostics = Diagnostics()
    try:
        output_path = Path(args.output or f"{Path(args.input).stem}.lottie")
        data = convert_json_to_lottie(args.input, output_path=output_path, diagnostics=diagnostics)

        _print_warnings(diagnostics)
        print(f"Success: {output_path} ({len(data) / 1024:.1f} KB)")
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_info(args):
    """Show information about a .lottie file."""
    from lottiepack.package import get_lottie_info

    try:
        info = get_lottie_info(args.input)

        manifest = info["manifest"]
        if manifest:
            print(f"Manifest: v{manifest['version']} by {manifest['generator']}")
            print(f"  Animations listed: {len(manifest['animations'])}")
        else:
            print("Manifest: none")

        print(f"\nAnimations: {len(info['animations'])}")
        for path in info["animations"]:
            print(f"  - {path}")

        if info["images"]:
            print(f"\nImages: {len(info['images'])}")
            for img in info["images"]:
                if img["width"] is not None:
                    print(f"  {img['path']}: {img['width']}x{img['height']}")
                else:
                    print(f"  {img['path']}: (size unknown)")

        print(f"\nFiles: {len(info['files'])}")
        for f in info["files"]:
            size_kb = f["uncompressed_size"] / 1024
            print(f"  {f['path']}: {size_kb:.1f} KB")

        total_kb = info["total_uncompressed_size"] / 1024
        archive_kb = info["archive_size"] / 1024
        print(f"\nTotal: {total_kb:.1f} KB (compressed: {archive_kb:.1f} KB)")

        for warning in info["warnings"]:
            print(f"Warning: {warning}", file=sys.stderr)
        return 0
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="lottiepack - Convert between .lottie and Lottie JSON",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  lottiepack to-json animation.lottie --output ./json/
  lottiepack to-lottie animation.json --output animation.lottie
  lottiepack info animation.lottie
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # to-json
    json_parser = subparsers.add_parser(
        "to-json",
        help="Convert a .lottie file to self-contained JSON",
    )
    json_parser.add_argument("input", help="Input .lottie file")
    json_parser.add_argument("--output", "-o", help="Output directory (default: <name>_json)")
    json_parser.set_defaults(func=cmd_to_json)

    # to-lottie
    lottie_parser = subparsers.add_parser(
        "to-lottie",
        help="Convert Lottie JSON to a .lottie file",
    )
    lottie_parser.add_argument("input", help="Input Lottie JSON file")
    lottie_parser.add_argument("--output", "-o", help="Output .lottie file (default: <name>.lottie)")
    lottie_parser.set_defaults(func=cmd_to_lottie)

    # info
    info_parser = subparsers.add_parser(
        "info",
        help="Show information about a .lottie file",
    )
    info_parser.add_argument("input", help="Path to .lottie file")
    info_parser.set_defaults(func=cmd_info)

    args = parser.parse_args(argv)

    # Warnings are echoed by the commands themselves
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not args.command:
        parser.print_help()
        return 0

    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())

"""Command-line interface for exif-keeper.

Provides the ``exif-keeper`` entry point with two workflows:

- ``--show`` (or no target) — print the AI metadata of the source image
- *(default)*               — restore the source's metadata into the target
"""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path

from metadata_handler import (
    MetadataError,
    SUPPORTED_FORMATS,
    __version__,
    extract_file,
    get_metadata_summary,
    is_supported_format,
    restore_metadata,
)


# ── Branding ────────────────────────────────────────────────────────

_ASCII_LOGO = f"""
 ┌─┐─┐ ┬┬┌─┐  ┬┌─┌─┐┌─┐┌─┐┌─┐┬─┐
 ├┤ ┌┴┬┘│├┤───├┴┐├┤ ├┤ ├─┘├┤ ├┬┘
 └─┘┴ └─┴└    ┴ ┴└─┘└─┘┴  └─┘┴└─
    ─── exif-keeper v.{__version__} ───
"""


def _print_ascii_logo() -> None:
    """Print the startup banner, colored unless ``NO_COLOR`` is set."""
    if os.environ.get("NO_COLOR"):
        print(_ASCII_LOGO, file=sys.stdout)
        return
    green = "\033[92m"
    bold = "\033[1m"
    reset = "\033[0m"
    print(f"{bold}{green}{_ASCII_LOGO}{reset}", file=sys.stdout)


# ── Argument parser construction ────────────────────────────────────

def _build_parser() -> argparse.ArgumentParser:
    """Construct and return the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="exif-keeper",
        description="Restore AI generation metadata (prompt/parameters/EXIF) into an edited image.",
        epilog="Example: exif-keeper original.png edited.png -o restored.png",
    )

    parser.add_argument(
        "source", type=Path,
        help=f"Original image holding the metadata (formats: {', '.join(sorted(SUPPORTED_FORMATS))})",
    )
    parser.add_argument(
        "target", type=Path, nargs="?",
        help="Edited image to restore metadata into (not needed with --show)",
    )
    parser.add_argument(
        "-o", "--output", type=Path,
        help="Output file path (default: fixed_<target name> next to the target)",
    )
    parser.add_argument(
        "--show", action="store_true",
        help="Only print the AI metadata found in the source",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Print extracted metadata and enable info logging",
    )

    return parser


# ── Command handlers ────────────────────────────────────────────────

def _handle_show(args: argparse.Namespace) -> int:
    """Print the source's metadata summary."""
    try:
        metadata = extract_file(args.source)
    except (MetadataError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if metadata is None:
        print(f"'{args.source}' does not contain AI-generated image metadata.")
        return 1
    print(f"'{args.source}' contains AI-generated image metadata:")
    print(get_metadata_summary(metadata))
    return 0


def _handle_restore(args: argparse.Namespace) -> int:
    """Copy metadata from source to target image."""
    try:
        if args.verbose:
            print(f"Source: {args.source}")
            print(f"Target: {args.target}")
            print()
            print(get_metadata_summary(extract_file(args.source)))
            print()

        output_path = restore_metadata(
            source_path=args.source,
            target_path=args.target,
            output_path=args.output,
        )

        print(f"Successfully restored metadata to: {output_path}")
        return 0

    except (MetadataError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


# ── Entry point ─────────────────────────────────────────────────────

def main(argv: list[str] | None = None) -> int:
    """Parse arguments and dispatch to the appropriate command handler."""
    _print_ascii_logo()

    parser = _build_parser()

    if argv is None:
        argv = sys.argv[1:]
    if not argv:
        parser.print_help()
        return 0

    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    if not args.source.exists():
        print(f"Error: Source file '{args.source}' does not exist.", file=sys.stderr)
        return 1
    if not is_supported_format(args.source):
        print(
            f"Warning: Source file '{args.source}' may not be a supported format "
            f"({', '.join(sorted(SUPPORTED_FORMATS))}).",
            file=sys.stderr,
        )

    if args.show or args.target is None:
        return _handle_show(args)

    if not args.target.exists():
        print(f"Error: Target file '{args.target}' does not exist.", file=sys.stderr)
        return 1
    if not is_supported_format(args.target):
        print(
            f"Warning: Target file '{args.target}' may not be a supported format "
            f"({', '.join(sorted(SUPPORTED_FORMATS))}).",
            file=sys.stderr,
        )

    return _handle_restore(args)


if __name__ == "__main__":
    sys.exit(main())

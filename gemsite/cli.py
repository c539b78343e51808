#!/usr/bin/env python3
"""
gemsite CLI

Command-line interface for building an HTML site from gemtext sources.

Usage:
    gemsite <input_directory> <output_directory> [options]
    python -m gemsite ./capsule ./public

Options:
    -q, --quiet     Only report errors
    --formats       Show how each kind of file is handled
    --version       Show the version and exit
"""

import argparse
import sys

from . import __version__
from .core import CopyError, SiteGenerator

USAGE = (
    "Usage: gemsite <input_directory> <output_directory>\n"
    "Note that output directory must not exist"
)

KNOWN_FLAGS = {"-h", "--help", "-q", "--quiet", "--formats", "--version"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gemsite",
        description=(
            "Gemtext Static Site Generator\n\n"
            "Copies the input directory to the output directory and turns\n"
            "every .gmi document into an .html page."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  gemsite ./capsule ./public\n"
            "  gemsite ./capsule ./public --quiet\n"
        ),
    )

    parser.add_argument(
        "paths",
        nargs="*",
        metavar="DIR",
        help="Input directory, then output directory (must not exist)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only report errors",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show how each kind of file is handled and exit",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def _separate_paths(argv: list[str]) -> list[str]:
    """
    Put every non-flag argument after "--".

    Directory names may start with "-", so only the options this parser
    defines are left for argparse to interpret.
    """
    flags = []
    paths = []
    for i, arg in enumerate(argv):
        if arg == "--":
            paths.extend(argv[i + 1:])
            break
        if arg in KNOWN_FLAGS:
            flags.append(arg)
        else:
            paths.append(arg)
    return flags + ["--"] + paths


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    args = build_parser().parse_args(_separate_paths(list(argv)))

    if args.formats:
        _show_formats()
        return 0

    # Anything after the first two paths is ignored.
    if len(args.paths) < 2:
        print(USAGE)
        return 1

    engine = SiteGenerator(args.paths[0], args.paths[1], quiet=args.quiet)

    try:
        report = engine.build()
    except CopyError as e:
        print(f"{e}\nFailed to copy directory", file=sys.stderr)
        return 1
    except Exception:
        print("Unknown error occurred", file=sys.stderr)
        return 1

    if not args.quiet:
        print()
        print("-" * 60)
        print(f"  Done: {len(report.converted)} converted, {report.error_count} errors")
        print(f"  Output: {report.output_dir}")
        print("-" * 60)

    return 0


def _show_formats():
    """Display how each kind of file is handled."""
    formats = SiteGenerator.supported_formats()
    print("\nFile Handling:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    sys.exit(main())

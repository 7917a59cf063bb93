"""Nightowl CLI — inspect and change the stored theme preference.

Entry point registered as ``nightowl`` in ``pyproject.toml``::

    [project.scripts]
    nightowl = "nightowl.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``nightowl`` command."""
    parser = argparse.ArgumentParser(
        prog="nightowl",
        description="nightowl — dark/light theme preferences for a static blog.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- nightowl theme ---------------------------------------------------
    theme_parser = subparsers.add_parser("theme", help="Show or change the theme preference")
    theme_parser.add_argument(
        "action",
        nargs="?",
        default="show",
        choices=("show", "toggle", "dark", "light"),
        help="What to do (default: show)",
    )
    theme_parser.add_argument(
        "--store",
        default=None,
        help="Preference file (default: ~/.config/nightowl/theme.json)",
    )
    theme_parser.add_argument(
        "--scheme",
        default="auto",
        choices=("auto", "dark", "light"),
        help="Color-scheme signal to use when nothing is stored (default: detect)",
    )
    theme_parser.add_argument(
        "--key",
        default=None,
        help="Storage key (default: dark)",
    )

    args = parser.parse_args(argv)

    if args.verbose:
        import logging

        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "theme":
        from nightowl.cli._theme import run_theme

        run_theme(args)

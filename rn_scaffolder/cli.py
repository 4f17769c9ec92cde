"""Command-line entry point.

Usage::

    rn-scaffold
    rn-scaffold --root ./MyApp --storage mmkv --state zustand
    rn-scaffold --no-prompt --navigation
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Any

from rn_scaffolder import __version__
from rn_scaffolder.config import Settings, StateManagementChoice, StorageChoice, resolve_root
from rn_scaffolder.prompts import InputUnavailableError, OptionCollector
from rn_scaffolder.scaffolder import FilesystemError, ProjectScaffolder
from rn_scaffolder.utils import (
    console,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
    print_warning,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rn-scaffold",
        description="React Native Maker -- interactive project scaffolder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Questions answered by flags are not asked again.\n\n"
            "Examples:\n"
            "  rn-scaffold\n"
            "  rn-scaffold --root ./MyApp --storage mmkv --state zustand\n"
            "  rn-scaffold --no-prompt --navigation --bottom-tabs\n"
        ),
    )
    parser.add_argument(
        "--root",
        default=None,
        help="Directory to scaffold into (default: $RN_SCAFFOLD_ROOT or the current directory)",
    )
    parser.add_argument(
        "--bottom-tabs",
        dest="bottom_navigation",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Set up bottom tab navigation",
    )
    parser.add_argument(
        "--storage",
        choices=[c.value for c in StorageChoice],
        default=None,
        help="Storage helper to generate",
    )
    parser.add_argument(
        "--navigation",
        dest="navigation_setup",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Set up the root navigator and navigation-ref helpers",
    )
    parser.add_argument(
        "--state",
        dest="state_management",
        choices=[c.value for c in StateManagementChoice],
        default=None,
        help="State management example to generate",
    )
    parser.add_argument(
        "--no-prompt",
        action="store_true",
        default=None,
        help="Never prompt; unanswered questions use their defaults (no / none)",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    overrides: dict[str, Any] = {}
    if args.root is not None:
        overrides["root_path"] = resolve_root(args.root)
    if args.no_prompt:
        overrides["no_prompt"] = True
    return settings.model_copy(update=overrides) if overrides else settings


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``rn-scaffold`` and ``python -m rn_scaffolder``."""
    args = _build_parser().parse_args(argv)
    settings = _build_settings(args)
    preset = {
        "bottom_navigation": args.bottom_navigation,
        "storage": args.storage,
        "navigation_setup": args.navigation_setup,
        "state_management": args.state_management,
    }

    print_banner("React Native Maker (Project Scaffolder)")

    try:
        config = OptionCollector(no_prompt=settings.no_prompt).collect(preset)
        console.print()
        print_summary_table(config.summary(), title="Scaffold options")

        asyncio.run(ProjectScaffolder(config).generate(settings.root_path))
    except KeyboardInterrupt:
        console.print()
        print_warning("Scaffolding aborted.")
        sys.exit(130)
    except (InputUnavailableError, FilesystemError) as exc:
        print_error(f"Scaffolding failed: {exc}")
        sys.exit(1)

    print_success(f"Project structure created successfully in {settings.root_path}")


if __name__ == "__main__":
    main()

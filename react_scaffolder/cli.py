"""Command-line entry points.

Usage::

    create-react my-app
    create-vite-react my-app --yes
    react-scaffold my-app --flavor vite --output ./projects
    python -m react_scaffolder my-app --flavor classic

Exit status is 0 on success or when the operator declines to overwrite an
existing directory, and 1 on any usage error, ``ScaffoldError`` or ``OSError``.
A project name that starts with a hyphen must follow ``--``.
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import NoReturn

from .config import ScaffoldSettings
from .errors import InvalidArgument, InvalidName, ScaffoldError
from .scaffolder import ProjectScaffolder, get_profile, validate_request
from .scaffolder.models import Flavor
from .scaffolder.runner import CommandRunner
from .utils import print_error

EXIT_OK = 0
EXIT_FAILURE = 1


class UsageError(Exception):
    """Raised by the parser instead of exiting with argparse's status 2."""


class _ScaffoldParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        raise UsageError(message)


def build_parser(prog: str, fixed_flavor: Flavor | None = None) -> argparse.ArgumentParser:
    parser = _ScaffoldParser(
        prog=prog,
        description="Scaffold a React project with Tailwind CSS and a standard folder layout",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            f"  {prog} my-app\n"
            f"  {prog} my-app --yes --output ./projects\n"
            f"  {prog} -- -app          (names starting with a hyphen)\n"
        ),
    )
    # Missing name exits 1 through validate_request.
    parser.add_argument(
        "project_name",
        nargs="?",
        help="Project directory name (letters, numbers and hyphens only)",
    )
    if fixed_flavor is None:
        parser.add_argument(
            "--flavor", "-f",
            choices=[f.value for f in Flavor],
            default=Flavor.CLASSIC.value,
            help="Base template: classic (create-react-app) or vite (default: classic)",
        )
    parser.add_argument(
        "--output", "-o",
        default=None,
        help="Parent directory for the project (default: current directory)",
    )
    parser.add_argument(
        "--yes", "-y",
        action="store_true",
        help="Overwrite an existing project directory without asking",
    )
    return parser


def run_cli(
    argv: Sequence[str] | None = None,
    *,
    prog: str = "react-scaffold",
    flavor: Flavor | None = None,
    runner: CommandRunner | None = None,
    ask: Callable[[str], str] | None = None,
) -> int:
    """Parse *argv*, run the scaffolder and return the process exit status."""
    try:
        args = build_parser(prog, flavor).parse_args(argv)
    except UsageError as exc:
        print_error(f"{exc}. Usage: {prog} MyApp (use \"--\" before a name starting with \"-\")")
        return EXIT_FAILURE
    chosen = flavor or Flavor(args.flavor)
    profile = get_profile(chosen)

    try:
        request = validate_request(args.project_name, chosen)
    except InvalidArgument:
        print_error(f"Please provide a project name: {prog} MyApp")
        return EXIT_FAILURE
    except InvalidName:
        print_error("Invalid project name! Use only letters, numbers, and hyphens.")
        return EXIT_FAILURE

    settings = ScaffoldSettings.from_env(
        output_dir=Path(args.output) if args.output else None,
        assume_yes=True if args.yes else None,
    )
    scaffolder = ProjectScaffolder(settings, runner=runner, ask=ask)

    try:
        asyncio.run(scaffolder.run(request))
    except (ScaffoldError, OSError) as exc:
        print_error(f"Failed to create {profile.display_name} project: {exc}")
        return EXIT_FAILURE
    return EXIT_OK


def main() -> None:
    """Entry point for ``react-scaffold`` and ``python -m react_scaffolder``."""
    sys.exit(run_cli())


def create_react() -> None:
    """Entry point for ``create-react`` (classic flavor)."""
    sys.exit(run_cli(prog="create-react", flavor=Flavor.CLASSIC))


def create_vite_react() -> None:
    """Entry point for ``create-vite-react`` (Vite flavor)."""
    sys.exit(run_cli(prog="create-vite-react", flavor=Flavor.VITE))

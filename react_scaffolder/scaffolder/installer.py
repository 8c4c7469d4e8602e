"""Delegated base-project generation and dependency installation.

Both steps hand work to ``npx``/``npm`` and only look at exit statuses.
Nothing is retried and nothing is rolled back on failure.
"""

from __future__ import annotations

from pathlib import Path

from ..errors import ExternalCommandFailure
from ..utils import print_info, print_success
from .models import CommandSpec, FlavorProfile, PackageSet
from .runner import CommandRunner


async def run_spec(spec: CommandSpec, cwd: Path, runner: CommandRunner) -> None:
    """Run one command, raising ``ExternalCommandFailure`` on non-zero exit."""
    returncode = await runner.run(spec.command, spec.args, cwd, spec.env or None)
    if returncode != 0:
        raise ExternalCommandFailure(spec.command_line(), returncode)


def install_commands(packages: PackageSet) -> list[CommandSpec]:
    """Build one ``npm install`` invocation per non-empty dependency category."""
    commands: list[CommandSpec] = []
    if packages.runtime:
        commands.append(CommandSpec(command="npm", args=("install", *packages.runtime)))
    if packages.dev:
        commands.append(CommandSpec(command="npm", args=("install", "-D", *packages.dev)))
    return commands


async def generate_base_project(
    profile: FlavorProfile, project_root: Path, runner: CommandRunner
) -> None:
    """Run the flavor's generator commands inside *project_root*."""
    print_info(f"📦 Creating {profile.display_name} app...")
    for spec in profile.generator_commands:
        await run_spec(spec, project_root, runner)
    print_success(f"{profile.display_name} project created successfully!")


async def install_dependencies(
    profile: FlavorProfile, project_root: Path, runner: CommandRunner
) -> list[CommandSpec]:
    """Install the flavor's packages, then run its post-install setup commands.

    Returns:
        Every command that was run, in order.
    """
    print_info("🎨 Installing Tailwind CSS and UI libraries...")
    commands = install_commands(profile.packages)
    for spec in commands:
        await run_spec(spec, project_root, runner)

    if profile.post_install_commands:
        print_info("⚙️  Initializing Tailwind CSS...")
    for spec in profile.post_install_commands:
        await run_spec(spec, project_root, runner)

    print_success("All packages installed successfully!")
    return [*commands, *profile.post_install_commands]

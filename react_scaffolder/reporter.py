"""Summary reporting for a finished scaffolding run.

Pure console output; nothing here can fail the run.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .utils import console, format_duration, print_success, print_summary_table

if TYPE_CHECKING:
    from .scaffolder.models import FlavorProfile, ScaffoldResult


def next_steps(project_name: str, profile: FlavorProfile) -> list[str]:
    """Commands the operator should run next."""
    return [f"cd {project_name}", profile.start_command]


def report_summary(project_name: str, profile: FlavorProfile, result: ScaffoldResult) -> None:
    """Print the completion banner, next steps and installed capabilities."""
    print_success("Project setup completed!")
    console.print()

    print_summary_table(
        {
            "Project": project_name,
            "Flavor": profile.display_name,
            "Location": str(result.project_root),
            "Folders created": str(len(result.created_dirs)),
            "Files written": str(len(result.written_files)),
            "Files patched": str(len(result.patched_files)),
            "Packages installed": str(len(profile.packages.all_packages())),
            "Duration": format_duration(result.elapsed),
        },
        title="Scaffold Summary",
    )

    console.print("[magenta]🌈 Next steps:[/magenta]")
    for command in next_steps(project_name, profile):
        console.print(f"[cyan]  {command}[/cyan]")

    console.print()
    console.print("[yellow]📦 Installed packages:[/yellow]")
    for capability in profile.capabilities:
        console.print(f"  • {capability}", markup=False)

    if profile.farewell:
        console.print()
        console.print(f"[green]🎉 {profile.farewell} 🚀[/green]")

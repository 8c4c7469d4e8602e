"""Directory and example-file materialisation.

The resulting tree depends only on the plan and the run context, never on
what was on disk before: directories are created if missing, marker files are
added if missing and example files are always rewritten.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from .models import FlavorProfile, FolderPlan
from .templates import TemplateRenderer


def _materialize_dir(directory: Path, marker_name: str) -> bool:
    """Create *directory* and its marker file.  Returns True if the directory was new."""
    created = not directory.is_dir()
    directory.mkdir(parents=True, exist_ok=True)
    marker = directory / marker_name
    if not marker.exists():
        marker.touch()
    return created


async def create_folder_plan(
    root: Path, plan: FolderPlan, marker_name: str = ".gitkeep"
) -> list[str]:
    """Create every planned directory under *root* with an empty marker file.

    Pre-existing directories and their contents are left alone.

    Returns:
        The planned paths that did not exist before this call.
    """
    created: list[str] = []
    for rel in plan.directories:
        if await asyncio.to_thread(_materialize_dir, root / rel, marker_name):
            created.append(rel)
    return created


async def write_example_files(
    root: Path,
    profile: FlavorProfile,
    renderer: TemplateRenderer,
    context: dict[str, Any],
) -> list[str]:
    """Render the flavor's example sources into *root*, replacing existing files."""
    written: list[str] = []
    for example in profile.example_files:
        await renderer.render_to_file(example.template, root / example.target, context)
        written.append(example.target)
    return written

"""Main scaffolding orchestrator.

Drives one run through its fixed sequence of steps::

    check overwrite -> generate -> install -> materialize -> patch -> report

Every step is awaited before the next one starts.  Any ``ScaffoldError``
propagates to the caller and leaves whatever was already written on disk.
"""

from __future__ import annotations

import asyncio
import os
import time
from collections.abc import Callable
from pathlib import Path
from typing import Any

from ..config import ScaffoldSettings
from ..reporter import report_summary
from ..utils import console, ensure_dir, print_step, print_warning
from .flavors import FOLDER_PLAN, get_profile
from .guard import OverwriteDecision, check_overwrite
from .installer import generate_base_project, install_dependencies
from .materializer import create_folder_plan, write_example_files
from .models import FlavorProfile, FolderPlan, ScaffoldRequest, ScaffoldResult
from .patcher import apply_patches
from .runner import CommandRunner, SubprocessRunner
from .templates import TemplateRenderer


class ProjectScaffolder:
    """Creates a React project skeleton for a validated ``ScaffoldRequest``.

    Collaborators are injectable: *runner* executes ``npm``/``npx``,
    *ask* answers the overwrite question, and *renderer* supplies the static
    payloads.  Defaults talk to the real terminal and the packaged templates.
    """

    def __init__(
        self,
        settings: ScaffoldSettings | None = None,
        runner: CommandRunner | None = None,
        renderer: TemplateRenderer | None = None,
        ask: Callable[[str], str] | None = None,
        folder_plan: FolderPlan = FOLDER_PLAN,
    ) -> None:
        self.settings = settings or ScaffoldSettings()
        self.runner = runner or SubprocessRunner(
            {"npm": self.settings.npm_command, "npx": self.settings.npx_command}
        )
        self.renderer = renderer or TemplateRenderer()
        self.ask = ask
        self.folder_plan = folder_plan

    # -- Public API --------------------------------------------------------

    async def run(self, request: ScaffoldRequest) -> ScaffoldResult:
        """Scaffold the project described by *request*.

        Returns:
            A ``ScaffoldResult``; ``cancelled`` is set when the operator
            declined to overwrite an existing directory.

        Raises:
            ExternalCommandFailure: A generator or installer command failed.
            ManifestReadError: ``package.json`` was missing or malformed.
        """
        started = time.monotonic()
        profile = get_profile(request.flavor)
        project_root = self.settings.project_root(request.project_name).resolve()

        decision = check_overwrite(
            project_root, assume_yes=self.settings.assume_yes, ask=self.ask
        )
        if decision is OverwriteDecision.CANCEL:
            print_warning("Operation cancelled.")
            return ScaffoldResult(
                project_root=project_root, flavor=request.flavor, cancelled=True
            )

        console.print(
            f"[blue]🚀 Creating {profile.display_name} project "
            f"'{request.project_name}'...[/blue]"
        )
        await asyncio.to_thread(ensure_dir, project_root)
        # Process cwd stays at the project root for the rest of the run.
        os.chdir(project_root)

        print_step("Generate")
        await generate_base_project(profile, project_root, self.runner)

        print_step("Install")
        await install_dependencies(profile, project_root, self.runner)

        context = self.build_context(request)

        print_step("Materialize")
        created_dirs, written_files = await self.materialize(profile, project_root, context)

        print_step("Configure")
        patched_files = await self.patch(profile, project_root, context)

        result = ScaffoldResult(
            project_root=project_root,
            flavor=request.flavor,
            created_dirs=created_dirs,
            written_files=written_files,
            patched_files=patched_files,
            elapsed=time.monotonic() - started,
        )
        report_summary(request.project_name, profile, result)
        return result

    async def materialize(
        self, profile: FlavorProfile, project_root: Path, context: dict[str, Any]
    ) -> tuple[list[str], list[str]]:
        """Create the folder plan and write the example files.

        Safe to repeat against an already-scaffolded project.
        """
        created = await create_folder_plan(
            project_root, self.folder_plan, self.settings.marker_name
        )
        written = await write_example_files(project_root, profile, self.renderer, context)
        return created, written

    async def patch(
        self, profile: FlavorProfile, project_root: Path, context: dict[str, Any]
    ) -> list[str]:
        """Overwrite the flavor's config files and merge manifest scripts."""
        return await apply_patches(project_root, profile, self.renderer, context)

    # -- Context building --------------------------------------------------

    @staticmethod
    def build_context(request: ScaffoldRequest) -> dict[str, Any]:
        """Build the Jinja2 template context for *request*."""
        return {
            "project_name": request.project_name,
            "flavor": request.flavor.value,
        }

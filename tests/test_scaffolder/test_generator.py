"""Tests for the ProjectScaffolder orchestrator.

Covers:
- The full happy path for both flavors with a fake runner
- Overwrite confirmation (absent target, declined, accepted, assume_yes)
- Abort behaviour on generator, installer and manifest failures
- Idempotent re-materialisation and re-patching
"""

from __future__ import annotations

import json
import os
from pathlib import Path

import pytest

from react_scaffolder.config import ScaffoldSettings
from react_scaffolder.errors import ExternalCommandFailure, ManifestReadError
from react_scaffolder.scaffolder import ProjectScaffolder
from react_scaffolder.scaffolder.flavors import CLASSIC, FOLDER_PLAN, VITE
from react_scaffolder.scaffolder.models import Flavor, ScaffoldRequest


def _request(name: str = "my-app", flavor: Flavor = Flavor.CLASSIC) -> ScaffoldRequest:
    return ScaffoldRequest(project_name=name, flavor=flavor)


def _tree(root: Path) -> dict[str, bytes]:
    return {
        p.relative_to(root).as_posix(): p.read_bytes()
        for p in sorted(root.rglob("*"))
        if p.is_file()
    }


# ---------------------------------------------------------------------------
# Happy path
# ---------------------------------------------------------------------------


class TestRunClassic:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_full_run(self, settings: ScaffoldSettings, fake_runner, ask_no, workdir: Path):
        scaffolder = ProjectScaffolder(settings, runner=fake_runner, ask=ask_no)
        result = await scaffolder.run(_request())

        root = workdir / "my-app"
        assert result.cancelled is False
        assert result.project_root == root.resolve()
        assert ask_no.prompts == []

        # Generator and installer ran inside the project root, in order.
        assert fake_runner.command_lines[0] == "npx create-react-app . --template typescript"
        assert fake_runner.command_lines[1].startswith("npm install tailwindcss ")
        assert fake_runner.command_lines[2] == "npx tailwindcss init -p"
        assert all(call["cwd"] == root.resolve() for call in fake_runner.calls)

        for rel in FOLDER_PLAN.directories:
            assert (root / rel / ".gitkeep").is_file()

        assert (root / "src" / "hooks" / "useLocalStorage.ts").is_file()
        assert (root / "src" / "utils" / "helpers.ts").is_file()
        assert (root / ".env.example").is_file()
        assert (root / "tailwind.config.js").is_file()
        assert (root / "src" / "index.css").read_text(encoding="utf-8").startswith("@tailwind")

        scripts = json.loads((root / "package.json").read_text(encoding="utf-8"))["scripts"]
        assert scripts == {
            "start": "react-scripts start",
            "build": "react-scripts build",
            "test": "react-scripts test",
            "eject": "react-scripts eject",
            "format": "prettier --write .",
            "lint": "eslint src --ext .js,.jsx,.ts,.tsx",
            "build:prod": "npm run build",
            "dev": "npm start",
        }

        assert result.created_dirs == list(FOLDER_PLAN.directories)
        assert result.written_files == [e.target for e in CLASSIC.example_files]
        assert result.patched_files == [p.target for p in CLASSIC.config_patches]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_changes_cwd_to_project_root(self, settings, fake_runner, workdir: Path):
        await ProjectScaffolder(settings, runner=fake_runner).run(_request())
        assert Path(os.getcwd()).resolve() == (workdir / "my-app").resolve()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_summary_printed(self, settings, fake_runner, capsys: pytest.CaptureFixture[str]):
        await ProjectScaffolder(settings, runner=fake_runner).run(_request())
        out = capsys.readouterr().out
        assert "Next steps" in out
        assert "cd my-app" in out
        assert "npm start" in out


class TestRunVite:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_full_run(self, settings, fake_runner, workdir: Path):
        result = await ProjectScaffolder(settings, runner=fake_runner).run(
            _request("vite-app", Flavor.VITE)
        )
        root = workdir / "vite-app"

        assert fake_runner.command_lines[:2] == [
            "npm create vite@latest . -- --template react",
            "npm install",
        ]
        assert fake_runner.command_lines[2].startswith("npm install -D tailwindcss ")
        assert fake_runner.command_lines[3] == "npx tailwindcss init -p"

        assert "Welcome to vite-app" in (root / "src" / "App.jsx").read_text(encoding="utf-8")
        assert (root / "vite.config.js").is_file()
        assert (root / "postcss.config.js").is_file()
        assert (root / "src" / "pages" / "index.js").is_file()
        scripts = json.loads((root / "package.json").read_text(encoding="utf-8"))["scripts"]
        assert scripts["start"] == "npm run dev"
        assert result.written_files == [e.target for e in VITE.example_files]


# ---------------------------------------------------------------------------
# Overwrite confirmation
# ---------------------------------------------------------------------------


class TestOverwrite:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_declined_makes_no_changes(self, settings, fake_runner, ask_no, workdir: Path):
        existing = workdir / "app"
        existing.mkdir()
        (existing / "notes.txt").write_text("mine", encoding="utf-8")
        before = _tree(workdir)

        result = await ProjectScaffolder(settings, runner=fake_runner, ask=ask_no).run(
            _request("app")
        )

        assert result.cancelled is True
        assert len(ask_no.prompts) == 1
        assert fake_runner.calls == []
        assert _tree(workdir) == before
        assert sorted(p.name for p in existing.iterdir()) == ["notes.txt"]

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_declined_prints_cancellation(
        self, settings, fake_runner, ask_no, workdir: Path, capsys: pytest.CaptureFixture[str]
    ):
        (workdir / "app").mkdir()
        await ProjectScaffolder(settings, runner=fake_runner, ask=ask_no).run(_request("app"))
        assert "Operation cancelled." in capsys.readouterr().out

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_accepted_continues(self, settings, fake_runner, ask_yes, workdir: Path):
        (workdir / "app").mkdir()
        result = await ProjectScaffolder(settings, runner=fake_runner, ask=ask_yes).run(
            _request("app")
        )
        assert result.cancelled is False
        assert len(fake_runner.calls) == 3

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_assume_yes(self, workdir: Path, fake_runner, ask_no):
        (workdir / "app").mkdir()
        settings = ScaffoldSettings(output_dir=workdir, assume_yes=True)
        result = await ProjectScaffolder(settings, runner=fake_runner, ask=ask_no).run(
            _request("app")
        )
        assert result.cancelled is False
        assert ask_no.prompts == []


# ---------------------------------------------------------------------------
# Failures
# ---------------------------------------------------------------------------


class TestFailures:
    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_generator_failure_aborts(self, settings, runner_factory, workdir: Path):
        runner = runner_factory(fail_on="create-react-app")
        with pytest.raises(ExternalCommandFailure):
            await ProjectScaffolder(settings, runner=runner).run(_request())

        assert len(runner.calls) == 1
        # Partial state stays on disk.
        assert (workdir / "my-app").is_dir()
        assert not (workdir / "my-app" / "src" / "pages").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_installer_failure_aborts(self, settings, runner_factory, workdir: Path):
        runner = runner_factory(fail_on="npm install")
        with pytest.raises(ExternalCommandFailure):
            await ProjectScaffolder(settings, runner=runner).run(_request())

        assert len(runner.calls) == 2
        assert not (workdir / "my-app" / "src" / "lib").exists()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_missing_manifest_aborts_after_materialize(
        self, settings, runner_factory, workdir: Path
    ):
        runner = runner_factory(manifest=None)
        with pytest.raises(ManifestReadError):
            await ProjectScaffolder(settings, runner=runner).run(_request())
        assert (workdir / "my-app" / "src" / "lib" / ".gitkeep").is_file()

    @pytest.mark.unit
    @pytest.mark.asyncio
    async def test_malformed_manifest_aborts(self, settings, runner_factory):
        runner = runner_factory(raw_manifest="{ nope")
        with pytest.raises(ManifestReadError):
            await ProjectScaffolder(settings, runner=runner).run(_request())


# ---------------------------------------------------------------------------
# Idempotence
# ---------------------------------------------------------------------------


class TestRerun:
    @pytest.mark.unit
    @pytest.mark.asyncio
    @pytest.mark.parametrize("flavor", [Flavor.CLASSIC, Flavor.VITE])
    async def test_materialize_and_patch_are_repeatable(
        self, settings, fake_runner, workdir: Path, flavor: Flavor
    ):
        scaffolder = ProjectScaffolder(settings, runner=fake_runner)
        request = _request("again", flavor)
        result = await scaffolder.run(request)
        before = _tree(result.project_root)

        profile = CLASSIC if flavor is Flavor.CLASSIC else VITE
        context = scaffolder.build_context(request)
        created, _ = await scaffolder.materialize(profile, result.project_root, context)
        await scaffolder.patch(profile, result.project_root, context)

        assert created == []
        assert _tree(result.project_root) == before

    @pytest.mark.unit
    def test_build_context(self):
        context = ProjectScaffolder.build_context(_request("ctx", Flavor.VITE))
        assert context == {"project_name": "ctx", "flavor": "vite"}

"""Shared pytest fixtures for the scaffolder test suite.

Provides reusable fixtures for:
- An isolated working directory (the scaffolder changes the process cwd)
- Settings pointing at a temporary output directory
- A fake command runner that records invocations and plays the part of
  ``create-react-app`` / ``create-vite`` by writing a ``package.json``
- Prompt answer helpers
"""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import pytest

from react_scaffolder.config import ScaffoldSettings


# ---------------------------------------------------------------------------
# Fake command runner
# ---------------------------------------------------------------------------

DEFAULT_MANIFEST: dict[str, Any] = {
    "name": "my-app",
    "version": "0.1.0",
    "private": True,
    "dependencies": {
        "react": "^18.2.0",
        "react-dom": "^18.2.0",
    },
    "scripts": {
        "start": "react-scripts start",
        "build": "react-scripts build",
        "test": "react-scripts test",
        "eject": "react-scripts eject",
    },
}

_GENERATOR_MARKERS = ("create-react-app", "vite@latest")


class FakeRunner:
    """Records every invocation instead of spawning a process.

    Args:
        fail_on: Substring of a command line that should exit non-zero.
        returncode: Exit status returned for the failing command.
        manifest: ``package.json`` content written by the generator command.
            ``None`` writes nothing, simulating a generator that produced no
            manifest.
        raw_manifest: Literal manifest text, overriding *manifest*.
    """

    def __init__(
        self,
        fail_on: str | None = None,
        returncode: int = 1,
        manifest: dict[str, Any] | None = DEFAULT_MANIFEST,
        raw_manifest: str | None = None,
    ) -> None:
        self.fail_on = fail_on
        self.returncode = returncode
        self.manifest = manifest
        self.raw_manifest = raw_manifest
        self.calls: list[dict[str, Any]] = []

    async def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> int:
        line = " ".join([command, *args])
        self.calls.append(
            {"command": command, "args": list(args), "cwd": Path(cwd), "env": dict(env or {})}
        )
        if self.fail_on and self.fail_on in line:
            return self.returncode

        if any(marker in args for marker in _GENERATOR_MARKERS):
            manifest_path = Path(cwd) / "package.json"
            if self.raw_manifest is not None:
                manifest_path.write_text(self.raw_manifest, encoding="utf-8")
            elif self.manifest is not None:
                manifest_path.write_text(json.dumps(self.manifest, indent=2), encoding="utf-8")
        return 0

    @property
    def command_lines(self) -> list[str]:
        return [" ".join([c["command"], *c["args"]]) for c in self.calls]


class RecordingAsk:
    """Stands in for the interactive prompt and remembers what it was asked."""

    def __init__(self, answer: str = "n") -> None:
        self.answer = answer
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return self.answer


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Temporary working directory; the original cwd is restored afterwards."""
    monkeypatch.chdir(tmp_path)
    for var in ("RS_OUTPUT_DIR", "RS_ASSUME_YES", "RS_NPM", "RS_NPX"):
        monkeypatch.delenv(var, raising=False)
    return tmp_path


@pytest.fixture
def settings(workdir: Path) -> ScaffoldSettings:
    return ScaffoldSettings(output_dir=workdir)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def ask_no() -> RecordingAsk:
    return RecordingAsk("n")


@pytest.fixture
def ask_yes() -> RecordingAsk:
    return RecordingAsk("y")


@pytest.fixture
def manifest_factory(tmp_path: Path):
    """Write a ``package.json`` under *tmp_path* and return its path."""

    def factory(data: dict[str, Any] | None = None, raw: str | None = None) -> Path:
        path = tmp_path / "package.json"
        if raw is not None:
            path.write_text(raw, encoding="utf-8")
        else:
            path.write_text(json.dumps(data or DEFAULT_MANIFEST, indent=2), encoding="utf-8")
        return path

    return factory


@pytest.fixture
def runner_factory():
    """Return the ``FakeRunner`` class for tests that need custom behaviour."""
    return FakeRunner


@pytest.fixture
def ask_factory():
    """Return the ``RecordingAsk`` class for tests that need a custom answer."""
    return RecordingAsk

"""Pydantic models describing one scaffolding run.

All models are frozen: a request, its plan and its patches are fixed for the
duration of an invocation and nothing is persisted across runs.
"""

from __future__ import annotations

import re
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9-]+$")


class Flavor(str, Enum):
    """Which base-template generation path is used."""

    CLASSIC = "classic"
    VITE = "vite"


class ScaffoldRequest(BaseModel):
    """A validated project name plus the flavor to generate."""

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1)
    flavor: Flavor = Flavor.CLASSIC

    @field_validator("project_name")
    @classmethod
    def _check_name(cls, value: str) -> str:
        if not PROJECT_NAME_PATTERN.fullmatch(value):
            raise ValueError("project name may only contain letters, numbers, and hyphens")
        return value


class CommandSpec(BaseModel):
    """One external process invocation."""

    model_config = ConfigDict(frozen=True)

    command: str
    args: tuple[str, ...] = ()
    env: dict[str, str] = Field(default_factory=dict)

    def command_line(self) -> str:
        return " ".join((self.command, *self.args))


class PackageSet(BaseModel):
    """Packages to install, partitioned by dependency category."""

    model_config = ConfigDict(frozen=True)

    runtime: tuple[str, ...] = ()
    dev: tuple[str, ...] = ()

    def all_packages(self) -> list[str]:
        return [*self.runtime, *self.dev]


class FolderPlan(BaseModel):
    """Relative directories created under the project root."""

    model_config = ConfigDict(frozen=True)

    directories: tuple[str, ...]


class PatchKind(str, Enum):
    OVERWRITE = "overwrite"
    MERGE_SCRIPTS = "merge_scripts"


class ConfigPatch(BaseModel):
    """A target file and how its content is produced.

    ``OVERWRITE`` patches render *template* and replace the file wholesale.
    ``MERGE_SCRIPTS`` patches merge *scripts* into the ``scripts`` object of
    a JSON manifest, keeping every other field.
    """

    model_config = ConfigDict(frozen=True)

    target: str
    kind: PatchKind = PatchKind.OVERWRITE
    template: str | None = None
    scripts: dict[str, str] = Field(default_factory=dict)


class ExampleFile(BaseModel):
    """A static example source file rendered from *template* into *target*."""

    model_config = ConfigDict(frozen=True)

    target: str
    template: str


class FlavorProfile(BaseModel):
    """Everything that differs between the classic and Vite flavors."""

    model_config = ConfigDict(frozen=True)

    flavor: Flavor
    display_name: str
    generator_commands: tuple[CommandSpec, ...]
    packages: PackageSet
    post_install_commands: tuple[CommandSpec, ...] = ()
    example_files: tuple[ExampleFile, ...] = ()
    config_patches: tuple[ConfigPatch, ...] = ()
    start_command: str
    capabilities: tuple[str, ...] = ()
    farewell: str = ""


class ScaffoldResult(BaseModel):
    """Outcome of a scaffolding run."""

    project_root: Path
    flavor: Flavor
    cancelled: bool = False
    created_dirs: list[str] = Field(default_factory=list)
    written_files: list[str] = Field(default_factory=list)
    patched_files: list[str] = Field(default_factory=list)
    elapsed: float = 0.0

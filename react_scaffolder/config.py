"""Scaffolder configuration.

Typed settings for a single scaffolding run.  Settings use a Pydantic v2
model so they can be validated at construction time and built from
environment variables, with CLI flags layered on top.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

_TRUTHY = {"1", "true", "yes", "y", "on"}


class ScaffoldSettings(BaseModel):
    """Run-wide settings shared by the scaffolder and its collaborators.

    Instances are created once by the CLI entry point and passed to
    ``ProjectScaffolder``.
    """

    output_dir: Path = Field(
        default=Path("."),
        description="Parent directory in which the project folder is created",
    )
    assume_yes: bool = Field(
        default=False,
        description="Overwrite an existing project directory without prompting",
    )
    npm_command: str = Field(default="npm", min_length=1)
    npx_command: str = Field(default="npx", min_length=1)
    marker_name: str = Field(
        default=".gitkeep",
        min_length=1,
        description="Empty placeholder file written into each planned directory",
    )

    def project_root(self, project_name: str) -> Path:
        """Return the directory a project named *project_name* is created in."""
        return self.output_dir / project_name

    @classmethod
    def from_env(cls, **overrides: Any) -> "ScaffoldSettings":
        """Build settings from environment variables.

        Recognised variables (all optional):
            RS_OUTPUT_DIR, RS_ASSUME_YES, RS_NPM, RS_NPX.

        Keyword *overrides* whose value is not ``None`` take precedence over
        the environment.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("RS_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["RS_OUTPUT_DIR"])
        if os.environ.get("RS_ASSUME_YES"):
            kwargs["assume_yes"] = os.environ["RS_ASSUME_YES"].strip().lower() in _TRUTHY
        if os.environ.get("RS_NPM"):
            kwargs["npm_command"] = os.environ["RS_NPM"]
        if os.environ.get("RS_NPX"):
            kwargs["npx_command"] = os.environ["RS_NPX"]

        kwargs.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**kwargs)

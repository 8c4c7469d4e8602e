"""Error taxonomy for the scaffolder.

Every failure that aborts a run is a ``ScaffoldError``.  The CLI catches the
base class together with ``OSError``, prints the message and exits with
status 1.  Operator cancellation is not an error and is reported through
``ScaffoldResult``.
"""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for fatal scaffolding errors."""


class InvalidArgument(ScaffoldError):
    """Raised when no project name was supplied."""


class InvalidName(ScaffoldError):
    """Raised when the project name contains disallowed characters."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f"Invalid project name {name!r}! Use only letters, numbers, and hyphens."
        )


class ExternalCommandFailure(ScaffoldError):
    """Raised when a delegated ``npm``/``npx`` invocation exits non-zero."""

    def __init__(self, command_line: str, returncode: int) -> None:
        self.command_line = command_line
        self.returncode = returncode
        super().__init__(f"Command failed with exit code {returncode}: {command_line}")


class ManifestReadError(ScaffoldError):
    """Raised when ``package.json`` is missing or is not a JSON object."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot read manifest {path}: {reason}")

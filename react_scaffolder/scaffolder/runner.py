"""External process invocation behind a narrow interface.

The scaffolder only needs "run this, tell me the exit status".  Keeping that
behind ``CommandRunner`` lets tests substitute a recorder that never spawns a
real process.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..utils import print_error, run_command

COMMAND_NOT_FOUND = 127


@runtime_checkable
class CommandRunner(Protocol):
    async def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> int:
        """Run *command* with *args* in *cwd* and return its exit status."""
        ...


class SubprocessRunner:
    """Runs commands as child processes attached to the operator's terminal.

    Output is passed through live rather than captured.  *aliases* maps the
    logical program names used by flavor profiles (``npm``, ``npx``) to the
    executables actually invoked.
    """

    def __init__(self, aliases: Mapping[str, str] | None = None) -> None:
        self.aliases = dict(aliases or {})

    async def run(
        self,
        command: str,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> int:
        program = self.aliases.get(command, command)
        try:
            return await run_command(
                [program, *args],
                cwd=cwd,
                env=dict(env) if env else None,
            )
        except FileNotFoundError:
            print_error(f"Executable not found: {program}")
            return COMMAND_NOT_FOUND

"""Overwrite guard: the single interactive suspension point of a run."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from pathlib import Path

from ..utils import console


class OverwriteDecision(str, Enum):
    PROCEED = "proceed"
    CANCEL = "cancel"


def _ask_console(prompt: str) -> str:
    return console.input(f"[yellow]{prompt}[/yellow]")


def check_overwrite(
    path: Path,
    *,
    assume_yes: bool = False,
    ask: Callable[[str], str] | None = None,
) -> OverwriteDecision:
    """Decide whether scaffolding into *path* may go ahead.

    An absent *path* proceeds without prompting.  An existing one blocks on a
    single ``(y/N)`` question; only ``y``/``Y`` proceeds, and end of input
    counts as a refusal.  *assume_yes* skips the question entirely.

    Args:
        path: Target project directory.
        assume_yes: Treat an existing directory as confirmed.
        ask: Callable that shows a prompt and returns the operator's answer.
            Defaults to reading from the Rich console.
    """
    if not path.exists():
        return OverwriteDecision.PROCEED
    if assume_yes:
        return OverwriteDecision.PROCEED

    ask = ask or _ask_console
    try:
        answer = ask(f'Directory "{path.name}" already exists. Overwrite? (y/N): ')
    except EOFError:
        return OverwriteDecision.CANCEL

    if answer.lower() == "y":
        return OverwriteDecision.PROCEED
    return OverwriteDecision.CANCEL

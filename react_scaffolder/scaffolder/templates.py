"""Jinja2 rendering of the scaffold payloads.

Every example file and overwrite patch is a ``.j2`` file under ``templates/``,
grouped as ``common/``, ``classic/`` and ``vite/``.  The only variables are
``project_name`` and ``flavor``, so equal contexts give identical bytes.
"""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined

from ..utils import write_text

TEMPLATE_ROOT = Path(__file__).parent / "templates"


class TemplateRenderer:
    """Loads payload templates from *template_dir* (the packaged set by default).

    Undefined variables raise instead of rendering as empty strings, and a
    template's trailing newline is preserved in the output.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        self.template_dir = Path(template_dir) if template_dir else TEMPLATE_ROOT
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=False,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render *template_path* (posix path relative to the template dir)."""
        return self.env.get_template(template_path).render(**context)

    async def render_to_file(
        self,
        template_path: str,
        output_path: str | Path,
        context: dict[str, Any],
    ) -> Path:
        """Render and write to *output_path*, replacing whatever is there."""
        target = Path(output_path)
        await asyncio.to_thread(write_text, target, self.render(template_path, context))
        return target


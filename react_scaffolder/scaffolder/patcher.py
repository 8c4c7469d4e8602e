"""Configuration patching.

Two kinds of patch exist: wholesale overwrites of tool configs and style
entry points, and a targeted merge of script entries into ``package.json``.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from ..errors import ManifestReadError
from ..utils import load_json, save_json
from .models import ConfigPatch, FlavorProfile, PatchKind
from .templates import TemplateRenderer


def read_manifest(path: Path) -> dict[str, Any]:
    """Load ``package.json``, raising ``ManifestReadError`` on any problem."""
    try:
        manifest = load_json(path)
    except FileNotFoundError as exc:
        raise ManifestReadError(path, "file not found") from exc
    except json.JSONDecodeError as exc:
        raise ManifestReadError(path, f"invalid JSON ({exc.msg} at line {exc.lineno})") from exc
    except (OSError, UnicodeDecodeError, ValueError) as exc:
        raise ManifestReadError(path, str(exc)) from exc

    scripts = manifest.get("scripts", {})
    if not isinstance(scripts, dict):
        raise ManifestReadError(path, '"scripts" is not an object')
    return manifest


def merge_scripts(manifest: dict[str, Any], scripts: dict[str, str]) -> dict[str, Any]:
    """Return *manifest* with *scripts* merged into its ``scripts`` object.

    Keys in *scripts* overwrite existing entries of the same name; all other
    scripts and manifest fields are kept in their original order.
    """
    merged = dict(manifest)
    merged["scripts"] = {**manifest.get("scripts", {}), **scripts}
    return merged


async def merge_manifest_scripts(path: Path, scripts: dict[str, str]) -> dict[str, Any]:
    """Read, merge and rewrite the manifest at *path*."""
    manifest = merge_scripts(read_manifest(path), scripts)
    await save_json(manifest, path)
    return manifest


async def apply_patch(
    root: Path,
    patch: ConfigPatch,
    renderer: TemplateRenderer,
    context: dict[str, Any],
) -> None:
    target = root / patch.target
    if patch.kind is PatchKind.MERGE_SCRIPTS:
        await merge_manifest_scripts(target, patch.scripts)
    else:
        if patch.template is None:
            raise ValueError(f"overwrite patch for {patch.target} has no template")
        await renderer.render_to_file(patch.template, target, context)


async def apply_patches(
    root: Path,
    profile: FlavorProfile,
    renderer: TemplateRenderer,
    context: dict[str, Any],
) -> list[str]:
    """Apply every config patch of *profile*, in declaration order."""
    patched: list[str] = []
    for patch in profile.config_patches:
        await apply_patch(root, patch, renderer, context)
        patched.append(patch.target)
    return patched

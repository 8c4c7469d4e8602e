"""Command-line input validation.

Runs before anything touches the filesystem.
"""

from __future__ import annotations

from pydantic import ValidationError

from ..errors import InvalidArgument, InvalidName
from .models import Flavor, ScaffoldRequest


def validate_request(
    project_name: str | None, flavor: Flavor | str = Flavor.CLASSIC
) -> ScaffoldRequest:
    """Turn raw CLI input into a ``ScaffoldRequest``.

    Raises:
        InvalidArgument: If *project_name* is missing or empty.
        InvalidName: If *project_name* contains anything other than ASCII
            letters, digits and hyphens.
    """
    if not project_name:
        raise InvalidArgument("Please provide a project name.")
    try:
        return ScaffoldRequest(project_name=project_name, flavor=Flavor(flavor))
    except ValidationError as exc:
        raise InvalidName(project_name) from exc

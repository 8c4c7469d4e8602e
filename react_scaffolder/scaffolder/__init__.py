"""React project scaffolder -- one flavor-parameterised generation workflow.

Takes a validated ``ScaffoldRequest`` and produces a React project skeleton
using either create-react-app (``Flavor.CLASSIC``) or Vite
(``Flavor.VITE``), then installs a fixed package set, lays out the standard
folder tree and writes example and configuration files.

Quick usage::

    from react_scaffolder.scaffolder import ProjectScaffolder, validate_request

    request = validate_request("my-app", "vite")
    result = await ProjectScaffolder().run(request)
"""

from .flavors import CLASSIC, FOLDER_PLAN, VITE, get_profile
from .generator import ProjectScaffolder
from .guard import OverwriteDecision, check_overwrite
from .models import Flavor, FlavorProfile, ScaffoldRequest, ScaffoldResult
from .runner import CommandRunner, SubprocessRunner
from .templates import TemplateRenderer
from .validator import validate_request

__all__ = [
    "CLASSIC",
    "FOLDER_PLAN",
    "VITE",
    "CommandRunner",
    "Flavor",
    "FlavorProfile",
    "OverwriteDecision",
    "ProjectScaffolder",
    "ScaffoldRequest",
    "ScaffoldResult",
    "SubprocessRunner",
    "TemplateRenderer",
    "check_overwrite",
    "get_profile",
    "validate_request",
]

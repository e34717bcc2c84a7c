"""Bootstrap a module from its shared and type specific templates.

The package collects the module's identifiers interactively, renders the
template trees through a literal ``%placeholder%`` substitution into a scratch
directory and finally replaces the working directory with the result. Every
step is usable programmatically as well as through the command line.
"""

from __future__ import annotations

from .config import ModuleConfig, ModuleType, ProjectLayout
from .errors import PromptAbortedError, ScaffoldError, TemplateLayoutError
from .files import list_files
from .prompts import PromptCollector
from .scaffold import ModuleScaffolder, Stage, remap_template_path
from .template import TemplateSubstitutor, substitute

__all__ = [
    "ModuleConfig",
    "ModuleScaffolder",
    "ModuleType",
    "ProjectLayout",
    "PromptAbortedError",
    "PromptCollector",
    "ScaffoldError",
    "Stage",
    "TemplateLayoutError",
    "TemplateSubstitutor",
    "list_files",
    "remap_template_path",
    "substitute",
]

__version__ = "0.1.0"

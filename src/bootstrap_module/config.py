"""Run configuration shared by the prompts, the scaffolder and the CLI."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import List, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .naming import (
    dash_to_camel_case,
    dash_to_underscore,
    is_valid_namespace,
    is_valid_package_name,
    is_valid_url,
)

__all__ = [
    "DEFAULT_COPYRIGHT_HOLDER",
    "ModuleConfig",
    "ModuleType",
    "PlaceholderMapping",
    "ProjectLayout",
    "SHARED_SELECTOR",
    "placeholder",
]


SHARED_SELECTOR = "shared"
DEFAULT_COPYRIGHT_HOLDER = "woda - Software Development GmbH"
REPOSITORY_URL_BASE = "https://github.com/kaisekidev/kaiseki-"

PlaceholderMapping = List[Tuple[str, str]]


def placeholder(key: str) -> str:
    """Return the literal token used for ``key`` inside template files."""

    return f"%{key}%"


class ModuleType(str, Enum):
    """Kinds of module that can be bootstrapped."""

    WORDPRESS = "wordpress"
    CORE = "core"

    @property
    def package_prefix(self) -> str:
        return "wp-" if self is ModuleType.WORDPRESS else ""

    @property
    def namespace_prefix(self) -> str:
        return "WordPress\\" if self is ModuleType.WORDPRESS else ""


class ModuleConfig(BaseModel):
    """Validated answers describing the module to generate.

    The model is frozen: once the prompts are done the answers are passed
    around read-only. ``repo_url`` is validated as a URL but stored exactly as
    typed so that the generated files contain the operator's spelling.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    module_type: ModuleType = Field(default=ModuleType.WORDPRESS, description="Kind of module to generate.")
    module_name: str = Field(..., description="Package name without the type prefix, e.g. 'billing'.")
    config_base_key: str = Field(..., description="Top level key of the module's configuration array.")
    namespace: str = Field(..., description="PascalCase namespace segment of the module.")
    repo_url: str = Field(..., description="URL of the module's repository.")
    copyright_holder: str = Field(default=DEFAULT_COPYRIGHT_HOLDER, description="Name used in license headers.")

    @field_validator("module_name")
    @classmethod
    def _check_module_name(cls, value: str) -> str:
        if not is_valid_package_name(value):
            raise ValueError(f"{value} is not a valid package name.")
        return value

    @field_validator("namespace")
    @classmethod
    def _check_namespace(cls, value: str) -> str:
        if not is_valid_namespace(value):
            raise ValueError(f"{value} is not a valid namespace.")
        return value

    @field_validator("repo_url")
    @classmethod
    def _check_repo_url(cls, value: str) -> str:
        if not is_valid_url(value):
            raise ValueError(f"{value} is not a URL.")
        return value

    @classmethod
    def from_module_name(
        cls,
        module_name: str,
        module_type: ModuleType = ModuleType.WORDPRESS,
        *,
        config_base_key: str | None = None,
        namespace: str | None = None,
        repo_url: str | None = None,
        copyright_holder: str | None = None,
    ) -> "ModuleConfig":
        """Build a config from ``module_name``, computing every omitted answer."""

        return cls(
            module_type=module_type,
            module_name=module_name,
            config_base_key=config_base_key or default_config_base_key(module_name),
            namespace=namespace or default_namespace(module_name),
            repo_url=repo_url or default_repo_url(module_name, module_type),
            copyright_holder=copyright_holder or DEFAULT_COPYRIGHT_HOLDER,
        )

    @property
    def package_name_dash(self) -> str:
        return self.module_type.package_prefix + self.module_name

    @property
    def namespace_escaped(self) -> str:
        return self.namespace.replace("\\", "\\\\")

    def placeholders(self) -> PlaceholderMapping:
        """Return the ordered ``(token, value)`` pairs applied to every template."""

        return [
            (placeholder("package_name_dash"), self.package_name_dash),
            (placeholder("config_base_key"), self.config_base_key),
            (placeholder("namespace"), self.namespace),
            (placeholder("namespace_escaped"), self.namespace_escaped),
            (placeholder("repo_url"), self.repo_url),
            (placeholder("copyright_holder"), self.copyright_holder),
        ]


def default_config_base_key(module_name: str) -> str:
    return dash_to_underscore(module_name)


def default_namespace(module_name: str) -> str:
    return dash_to_camel_case(module_name)


def default_repo_url(module_name: str, module_type: ModuleType) -> str:
    return REPOSITORY_URL_BASE + module_type.package_prefix + module_name


@dataclass(frozen=True, slots=True)
class ProjectLayout:
    """Directories involved in a single bootstrap run.

    Attributes
    ----------
    root:
        The working directory that is replaced by the generated module.
    templates_dir:
        Directory containing one sub-directory per template selector.
    output_dir:
        Scratch directory receiving the rendered files before promotion.
    """

    root: Path
    templates_dir: Path
    output_dir: Path

    @classmethod
    def from_root(cls, root: str | Path) -> "ProjectLayout":
        resolved = Path(root).expanduser().resolve()
        return cls(
            root=resolved,
            templates_dir=resolved / "templates",
            output_dir=resolved / "output",
        )

    def template_root(self, selector: str) -> Path:
        return self.templates_dir / selector

    def selectors(self) -> tuple[str, ...]:
        """All directory names recognised directly below :attr:`templates_dir`."""

        return (SHARED_SELECTOR, *(module_type.value for module_type in ModuleType))

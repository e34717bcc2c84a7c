"""Materialize the template trees into a module and commit it in place."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable

from .commit import cleanup, promote, purge
from .config import SHARED_SELECTOR, ModuleConfig, ProjectLayout
from .errors import ScaffoldError, TemplateLayoutError
from .files import list_files
from .template import TemplateSubstitutor

__all__ = [
    "ModuleScaffolder",
    "Stage",
    "remap_template_path",
    "template_path_for",
]


LOGGER = logging.getLogger(__name__)


class Stage(str, Enum):
    """Stages of a bootstrap run, in the order they are entered."""

    COLLECTING_ANSWERS = "collecting_answers"
    ENUMERATING = "enumerating"
    SUBSTITUTING = "substituting"
    PURGING = "purging"
    PROMOTING = "promoting"
    CLEANING_UP = "cleaning_up"
    DONE = "done"


_STAGE_ORDER = list(Stage)


def remap_template_path(
    source: str | Path,
    templates_dir: str | Path,
    output_dir: str | Path,
    selectors: Iterable[str],
) -> Path:
    """Map ``<templates_dir>/<selector>/<rest>`` onto ``<output_dir>/<rest>``.

    Raises :class:`TemplateLayoutError` when ``source`` is not located below a
    known selector directory.
    """

    source_path = Path(source)
    try:
        relative = source_path.relative_to(templates_dir)
    except ValueError as exc:
        raise TemplateLayoutError(f"{source_path} is not inside {templates_dir}") from exc

    known = set(selectors)
    if len(relative.parts) < 2 or relative.parts[0] not in known:
        raise TemplateLayoutError(
            f"{source_path} is not below one of the template folders {sorted(known)}"
        )

    return Path(output_dir).joinpath(*relative.parts[1:])


def template_path_for(
    target: str | Path,
    templates_dir: str | Path,
    output_dir: str | Path,
    selector: str,
) -> Path:
    """Inverse of :func:`remap_template_path` for a given ``selector``."""

    relative = Path(target).relative_to(output_dir)
    return Path(templates_dir) / selector / relative


@dataclass(slots=True)
class ModuleScaffolder:
    """Render the shared and type specific templates and promote the result.

    Each instance drives one run and remembers the :class:`Stage` it reached,
    which makes a failed run easy to diagnose.
    """

    layout: ProjectLayout
    stage: Stage = field(default=Stage.COLLECTING_ANSWERS)

    def advance(self, stage: Stage) -> None:
        if _STAGE_ORDER.index(stage) < _STAGE_ORDER.index(self.stage):
            raise ScaffoldError(f"cannot move from {self.stage.value} back to {stage.value}")
        LOGGER.info("Stage: %s", stage.value)
        self.stage = stage

    def template_files(self, config: ModuleConfig) -> list[Path]:
        """Return the shared template files followed by the type specific ones."""

        shared = list_files(self.layout.template_root(SHARED_SELECTOR))
        specific = list_files(self.layout.template_root(config.module_type.value))
        LOGGER.debug(
            "Found %d shared and %d %s template files",
            len(shared),
            len(specific),
            config.module_type.value,
        )
        return shared + specific

    def plan(self, sources: Iterable[Path]) -> list[tuple[Path, Path]]:
        """Pair every template file with its output path, rejecting collisions."""

        templates_dir = self.layout.templates_dir.resolve()
        selectors = self.layout.selectors()
        seen: dict[Path, Path] = {}
        pairs: list[tuple[Path, Path]] = []
        for source in sources:
            destination = remap_template_path(source, templates_dir, self.layout.output_dir, selectors)
            # promote() would move it back under the scratch dir, which cleanup() deletes
            if destination.relative_to(self.layout.output_dir).parts[0] == self.layout.output_dir.name:
                raise TemplateLayoutError(
                    f"{source} would be promoted into the scratch directory {self.layout.output_dir.name}/"
                )
            if destination in seen:
                raise TemplateLayoutError(
                    f"{source} and {seen[destination]} would both be written to {destination}"
                )
            seen[destination] = source
            pairs.append((source, destination))
        return pairs

    def materialize(self, config: ModuleConfig) -> list[Path]:
        """Write every substituted template into the scratch output directory."""

        if self.layout.output_dir.exists():
            raise ScaffoldError(
                f"{self.layout.output_dir} already exists, remove it before bootstrapping"
            )

        self.advance(Stage.ENUMERATING)
        pairs = self.plan(self.template_files(config))

        self.advance(Stage.SUBSTITUTING)
        substitutor = TemplateSubstitutor(config.placeholders())
        written: list[Path] = []
        for source, destination in pairs:
            LOGGER.debug("Rendering %s -> %s", source, destination)
            written.append(substitutor.render_file(source, destination))

        LOGGER.info("Rendered %d template files into %s", len(written), self.layout.output_dir)
        return written

    def commit(self) -> list[Path]:
        """Replace the working root with the contents of the output directory."""

        self.advance(Stage.PURGING)
        purge(self.layout.root, keep={self.layout.output_dir.name})

        self.advance(Stage.PROMOTING)
        promoted = promote(self.layout.output_dir, self.layout.root)

        self.advance(Stage.CLEANING_UP)
        cleanup(self.layout.output_dir)
        return promoted

    def run(self, config: ModuleConfig) -> Path:
        """Materialize ``config`` and commit the result; return the module root."""

        self.materialize(config)
        self.commit()
        self.advance(Stage.DONE)
        return self.layout.root

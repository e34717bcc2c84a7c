"""Literal placeholder substitution for template files."""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Sequence, TypeVar

__all__ = [
    "TemplateSubstitutor",
    "find_placeholders",
    "substitute",
]


LOGGER = logging.getLogger(__name__)

_PLACEHOLDER_PATTERN = re.compile(r"%[a-z][a-z0-9_]*%")

Content = TypeVar("Content", str, bytes)


def substitute(content: Content, mapping: Sequence[tuple[str, str]]) -> Content:
    """Replace every literal occurrence of each token in ``mapping`` order.

    ``content`` may be text or raw bytes; bytes are matched against the UTF-8
    encoding of tokens and values so binary templates pass through untouched
    unless they contain a token.
    """

    if isinstance(content, bytes):
        result_bytes = content
        for token, value in mapping:
            result_bytes = result_bytes.replace(token.encode("utf-8"), value.encode("utf-8"))
        return result_bytes

    result = content
    for token, value in mapping:
        result = result.replace(token, value)
    return result


def find_placeholders(content: str | bytes) -> list[str]:
    """Return the distinct ``%key%`` tokens left in ``content``, sorted."""

    if isinstance(content, bytes):
        content = content.decode("utf-8", errors="ignore")
    return sorted(set(_PLACEHOLDER_PATTERN.findall(content)))


@dataclass(slots=True)
class TemplateSubstitutor:
    """Render template files by applying an ordered placeholder mapping."""

    mapping: Sequence[tuple[str, str]]

    def render_bytes(self, template: bytes) -> bytes:
        return substitute(template, self.mapping)

    def render_file(self, template_path: str | Path, target: str | Path) -> Path:
        """Render ``template_path`` into ``target`` and return the written path."""

        template_path = Path(template_path)
        if not template_path.is_file():
            raise FileNotFoundError(template_path)

        rendered = self.render_bytes(template_path.read_bytes())
        leftovers = find_placeholders(rendered)
        if leftovers:
            LOGGER.debug("Unknown placeholders left in %s: %s", template_path, ", ".join(leftovers))

        target_path = Path(target)
        target_path.parent.mkdir(parents=True, exist_ok=True)
        target_path.write_bytes(rendered)
        return target_path

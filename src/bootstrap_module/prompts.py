"""Interactive questions collecting the answers for a new module."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, TextIO

from rich.console import Console
from rich.prompt import Prompt

from .config import (
    DEFAULT_COPYRIGHT_HOLDER,
    ModuleConfig,
    ModuleType,
    default_config_base_key,
    default_namespace,
    default_repo_url,
)
from .errors import PromptAbortedError
from .naming import guess_module_name, is_valid_namespace, is_valid_package_name, is_valid_url

__all__ = ["MAX_ATTEMPTS", "PromptCollector"]


LOGGER = logging.getLogger(__name__)

MAX_ATTEMPTS = 3

Validator = Callable[[str], Optional[str]]


def _package_name_error(answer: str) -> Optional[str]:
    return None if is_valid_package_name(answer) else f"{answer} is not a valid package name."


def _namespace_error(answer: str) -> Optional[str]:
    return None if is_valid_namespace(answer) else f"{answer} is not a valid namespace."


def _url_error(answer: str) -> Optional[str]:
    return None if is_valid_url(answer) else f"{answer} is not a URL."


class PromptCollector:
    """Ask the operator for every answer, one question after the other.

    Validated questions are asked up to :data:`MAX_ATTEMPTS` times. When the
    collector is not interactive every question takes its default, which is
    still validated.
    """

    def __init__(
        self,
        root: str | Path,
        *,
        console: Console | None = None,
        stream: TextIO | None = None,
        interactive: bool = True,
        max_attempts: int = MAX_ATTEMPTS,
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.root = Path(root)
        self.console = console or Console()
        self.stream = stream
        self.interactive = interactive
        self.max_attempts = max_attempts

    def collect(self, module_type: ModuleType | None = None) -> ModuleConfig:
        """Run every question in order and return the frozen answers."""

        if module_type is None:
            module_type = self.ask_type()
        module_name = self.ask_module_name(module_type)
        config_base_key = self.ask_config_base_key(module_name)
        namespace = self.ask_namespace(module_name, module_type)
        repo_url = self.ask_repo_url(module_name, module_type)
        copyright_holder = self.ask_copyright_holder()

        return ModuleConfig(
            module_type=module_type,
            module_name=module_name,
            config_base_key=config_base_key,
            namespace=namespace,
            repo_url=repo_url,
            copyright_holder=copyright_holder,
        )

    def ask_type(self) -> ModuleType:
        if not self.interactive:
            return ModuleType.WORDPRESS
        answer = Prompt.ask(
            "Which type of module do you want to create",
            choices=[module_type.value for module_type in ModuleType],
            default=ModuleType.WORDPRESS.value,
            console=self.console,
            stream=self.stream,
        )
        return ModuleType(answer)

    def ask_module_name(self, module_type: ModuleType) -> str:
        return self._ask_validated(
            f"Module name (kaiseki/{module_type.package_prefix}*)",
            guess_module_name(self.root),
            _package_name_error,
        )

    def ask_config_base_key(self, module_name: str) -> str:
        return self._ask("Config base key", default_config_base_key(module_name))

    def ask_namespace(self, module_name: str, module_type: ModuleType) -> str:
        return self._ask_validated(
            f"Module namespace (Kaiseki\\{module_type.namespace_prefix}*)",
            default_namespace(module_name),
            _namespace_error,
        )

    def ask_repo_url(self, module_name: str, module_type: ModuleType) -> str:
        return self._ask_validated(
            "URL to repository",
            default_repo_url(module_name, module_type),
            _url_error,
        )

    def ask_copyright_holder(self) -> str:
        return self._ask("Copyright holder", DEFAULT_COPYRIGHT_HOLDER)

    def _ask(self, question: str, default: str) -> str:
        if not self.interactive:
            return default
        answer = Prompt.ask(question, default=default, console=self.console, stream=self.stream)
        # a blank line read from a stream arrives as "" instead of the default
        return answer or default

    def _ask_validated(self, question: str, default: str, validator: Validator) -> str:
        attempts = 1 if not self.interactive else self.max_attempts
        error: Optional[str] = None
        for attempt in range(1, attempts + 1):
            answer = self._ask(question, default)
            error = validator(answer)
            if error is None:
                return answer
            LOGGER.debug("Attempt %d/%d for '%s' rejected: %s", attempt, attempts, question, error)
            self.console.print(error, style="red", markup=False)

        raise PromptAbortedError(question, attempts, error or "invalid answer")

"""Custom exception types raised while bootstrapping a module."""

from __future__ import annotations


class ScaffoldError(RuntimeError):
    """Base class for failures that abort a bootstrap run."""

    def __init__(self, message: str) -> None:
        super().__init__(message)


class PromptAbortedError(ScaffoldError):
    """Raised when a question exhausted its attempts without a valid answer."""

    def __init__(self, question: str, attempts: int, reason: str) -> None:
        super().__init__(f"{reason} (gave up after {attempts} attempts at '{question}')")
        self.question = question
        self.attempts = attempts
        self.reason = reason


class TemplateLayoutError(ScaffoldError):
    """Raised when the template tree does not match the expected layout."""


__all__ = ["PromptAbortedError", "ScaffoldError", "TemplateLayoutError"]

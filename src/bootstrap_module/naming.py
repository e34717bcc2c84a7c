"""String normalisation and validation helpers for module identifiers."""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import AnyUrl, TypeAdapter, ValidationError

__all__ = [
    "dash_to_camel_case",
    "dash_to_underscore",
    "guess_module_name",
    "is_valid_namespace",
    "is_valid_package_name",
    "is_valid_url",
]


PACKAGE_NAME_PATTERN = re.compile(r"^[a-z0-9](([_.]?|-{0,2})[a-z0-9]+)*$")
NAMESPACE_PATTERN = re.compile(r"^[A-Z][A-Za-z0-9]*$")
GUESS_STRIP_PREFIXES = ("kaiseki-", "wp-")

_URL_ADAPTER: TypeAdapter[AnyUrl] = TypeAdapter(AnyUrl)


def dash_to_underscore(value: str) -> str:
    return value.replace("-", "_")


def dash_to_camel_case(value: str) -> str:
    """Upper-case the first letter of every dash separated word and join them.

    ``"acme-billing"`` becomes ``"AcmeBilling"``. Characters other than the
    first of each word are left untouched.
    """

    return "".join(word[:1].upper() + word[1:] for word in value.split("-") if word)


def guess_module_name(root: str | Path) -> str:
    """Derive a default module name from the directory the module lives in."""

    name = Path(root).name
    for prefix in GUESS_STRIP_PREFIXES:
        name = name.replace(prefix, "")
    return name


def is_valid_package_name(value: str) -> bool:
    return bool(PACKAGE_NAME_PATTERN.fullmatch(value))


def is_valid_namespace(value: str) -> bool:
    return bool(NAMESPACE_PATTERN.fullmatch(value))


def is_valid_url(value: str) -> bool:
    """Return ``True`` when ``value`` parses as an absolute URL."""

    if not value or value != value.strip() or any(char.isspace() for char in value):
        return False
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        return False
    return True

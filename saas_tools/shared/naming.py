"""Naming utilities for code generation."""

from __future__ import annotations

import re
from functools import lru_cache

_CAPITAL = re.compile(r"([A-Z])")
_DASH_OR_SPACE = re.compile(r"[-\s]+")
_UNDERSCORE_OR_SPACE = re.compile(r"[_\s]+")
_SEPARATED = re.compile(r"[-_\s]+(.)?")

# Common irregular plurals
_IRREGULAR_PLURALS: dict[str, str] = {
    "children": "child",
    "people": "person",
    "men": "man",
    "women": "woman",
    "mice": "mouse",
    "data": "datum",
    "criteria": "criterion",
    "indices": "index",
    "matrices": "matrix",
}

_IRREGULAR_SINGULARS: dict[str, str] = {v: k for k, v in _IRREGULAR_PLURALS.items()}


def _match_case(original: str, replacement: str) -> str:
    if original[0].isupper():
        return replacement.capitalize()
    return replacement


@lru_cache(maxsize=1024)
def singularize(name: str) -> str:
    """Convert a plural word to singular form.

    Uses caching for repeated calls with the same input.
    """
    lower = name.lower()
    if lower in _IRREGULAR_PLURALS:
        return _match_case(name, _IRREGULAR_PLURALS[lower])

    if name.endswith("ies") and len(name) > 3:
        return name[:-3] + "y"
    for suffix in ("ses", "xes", "zes", "ches", "shes"):
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[:-2]
    if name.endswith("s") and not name.endswith("ss") and len(name) > 1:
        return name[:-1]
    return name


@lru_cache(maxsize=1024)
def pluralize(name: str) -> str:
    """Convert a singular word to plural form."""
    lower = name.lower()
    if lower in _IRREGULAR_SINGULARS:
        return _match_case(name, _IRREGULAR_SINGULARS[lower])

    if name.endswith("y") and len(name) > 1 and name[-2].lower() not in "aeiou":
        return name[:-1] + "ies"
    if name.endswith(("s", "x", "z", "ch", "sh")):
        return name + "es"
    return name + "s"


@lru_cache(maxsize=1024)
def to_snake_case(value: str) -> str:
    """Convert a string to snake_case.

    Every capital letter starts a new word, and runs of hyphens or
    whitespace collapse to a single underscore.

    Examples:
        >>> to_snake_case("createdAt")
        'created_at'
        >>> to_snake_case("user profiles")
        'user_profiles'
    """
    value = _CAPITAL.sub(r"_\1", value)
    value = _DASH_OR_SPACE.sub("_", value)
    value = value.lower()
    return value[1:] if value.startswith("_") else value


@lru_cache(maxsize=1024)
def to_kebab_case(value: str) -> str:
    """Convert a string to kebab-case."""
    value = _CAPITAL.sub(r"-\1", value)
    value = _UNDERSCORE_OR_SPACE.sub("-", value)
    value = value.lower()
    return value[1:] if value.startswith("-") else value


def _join_separated(value: str) -> str:
    return _SEPARATED.sub(lambda m: m.group(1).upper() if m.group(1) else "", value)


@lru_cache(maxsize=1024)
def to_camel_case(value: str) -> str:
    """Convert a string to camelCase.

    Examples:
        >>> to_camel_case("created_at")
        'createdAt'
        >>> to_camel_case("UserId")
        'userId'
    """
    joined = _join_separated(value)
    return joined[:1].lower() + joined[1:]


@lru_cache(maxsize=1024)
def to_pascal_case(value: str) -> str:
    """Convert a string to PascalCase.

    Examples:
        >>> to_pascal_case("todo_items")
        'TodoItems'
        >>> to_pascal_case("items")
        'Items'
    """
    joined = _join_separated(value)
    return joined[:1].upper() + joined[1:]

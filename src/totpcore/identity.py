"""Minimal view of an external user identity."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class HasIdentifier(Protocol):
    identifier: str


def resolve_identifier(value: str | HasIdentifier) -> str:
    """Accept a plain identifier string or anything exposing ``.identifier``."""
    if isinstance(value, str):
        return value
    ident = getattr(value, "identifier", None)
    if isinstance(ident, str):
        return ident
    raise TypeError(f"Expected a str or an object with a str 'identifier', got {type(value).__name__}")

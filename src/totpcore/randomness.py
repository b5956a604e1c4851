"""Pluggable sources of randomness for secret generation."""

from __future__ import annotations

import random
import secrets
from typing import Protocol, runtime_checkable


@runtime_checkable
class RandomSource(Protocol):
    def randint(self, low: int, high: int) -> int:
        """Return an integer N with low <= N <= high."""
        ...


class SystemRandomSource:
    """OS-backed CSPRNG. The default for anything that seeds a secret."""

    def __init__(self) -> None:
        self._rng = secrets.SystemRandom()

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)


class SeededRandomSource:
    """Deterministic source for tests. Never use it to provision real secrets."""

    def __init__(self, seed: int | str | bytes) -> None:
        self._rng = random.Random(seed)

    def randint(self, low: int, high: int) -> int:
        return self._rng.randint(low, high)

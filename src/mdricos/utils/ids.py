"""Node id generation.

Ids are short opaque strings of lowercase ASCII letters and digits.  They
come from a pseudo-random source and are **not** guaranteed to be unique:
two nodes in the same document may, with low probability, share an id.
Callers that need uniqueness must check for it themselves.
"""

from __future__ import annotations

import random
import string
from typing import Protocol

ID_ALPHABET = string.ascii_lowercase + string.digits
"""Characters a generated id may contain."""


class IdGenerator(Protocol):
    """Anything callable with no arguments that returns a new id string."""

    def __call__(self) -> str: ...


class RandomIdGenerator:
    """Generate fixed-length ids from :data:`ID_ALPHABET`.

    Parameters
    ----------
    length:
        Number of characters per id.
    rng:
        Random source.  Defaults to a fresh :class:`random.Random`; pass a
        seeded instance for reproducible output.

    Examples
    --------
    >>> gen = RandomIdGenerator(length=8, rng=random.Random(0))
    >>> len(gen())
    8
    """

    __slots__ = ("_length", "_rng")

    def __init__(self, length: int = 8, rng: random.Random | None = None) -> None:
        if length < 1:
            raise ValueError(f"length must be >= 1, got {length}")
        self._length = length
        self._rng = rng or random.Random()

    @property
    def length(self) -> int:
        return self._length

    def __call__(self) -> str:
        return "".join(self._rng.choices(ID_ALPHABET, k=self._length))

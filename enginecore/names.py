"""Interned, case-insensitively compared names."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from enginecore.singleton import Singleton

NAME_SIZE = 256
"""Names of this length or longer are not stored and become the None name."""

_HASH_SEED = 5381
_MASK = 0xFFFFFFFF


def hash_string(text: str) -> int:
    """Return the 32-bit djb2 hash of ``text``."""
    value = _HASH_SEED
    for char in text:
        value = (value * 33 + ord(char)) & _MASK
    return value


def _lower_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char


def hash_string_lower(text: str) -> int:
    """Return the djb2 hash of ``text`` with every character lower-cased."""
    return hash_string("".join(_lower_char(c) for c in text))


@dataclass(frozen=True)
class NameEntry:
    """A stored name and the hash used to compare it."""

    text: str
    comparison_id: int = 0


class NamePool(Singleton):
    """Stores name strings keyed by their case-sensitive and folded hashes."""

    def __init__(self) -> None:
        self._display: dict[int, NameEntry] = {}
        self._comparison: dict[int, NameEntry] = {}

    def find_or_store(self, text: str) -> int:
        """Store ``text`` if it is new and return its display hash."""
        display_hash = hash_string(text)
        if display_hash in self._display:
            return display_hash

        comparison_hash = hash_string_lower(text)
        self._comparison.setdefault(comparison_hash, NameEntry(text))
        self._display[display_hash] = NameEntry(text, comparison_hash)
        return display_hash

    def resolve(self, display_index: int) -> NameEntry:
        """Return the entry stored under ``display_index``.

        Raises KeyError when nothing was stored under that hash.
        """
        try:
            return self._display[display_index]
        except KeyError:
            raise KeyError(f"no name stored under display index {display_index}") from None


def get_name_pool() -> NamePool:
    """Return the shared name pool."""
    return NamePool.get()


class Name:
    """An interned name; equality ignores letter case."""

    __slots__ = ("_display_index", "_comparison_index")

    def __init__(self, text: Optional[str] = None) -> None:
        self._display_index = 0
        self._comparison_index = 0
        if text is None or len(text) >= NAME_SIZE:
            return
        pool = get_name_pool()
        display_id = pool.find_or_store(text)
        self._display_index = display_id
        self._comparison_index = pool.resolve(display_id).comparison_id if display_id else 0

    @property
    def display_index(self) -> int:
        return self._display_index

    @property
    def comparison_index(self) -> int:
        return self._comparison_index

    def is_none(self) -> bool:
        """True for the empty name that has nothing stored behind it."""
        return self._display_index == 0 and self._comparison_index == 0

    def __str__(self) -> str:
        if self.is_none():
            return "None"
        return get_name_pool().resolve(self._display_index).text

    def __repr__(self) -> str:
        return f"Name({str(self)!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Name):
            return NotImplemented
        return self._comparison_index == other._comparison_index

    def __hash__(self) -> int:
        return hash(self._comparison_index)
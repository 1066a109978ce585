"""Switches that decide which kinds of things the engine draws."""

from __future__ import annotations

from enum import IntFlag
from typing import Optional

from enginecore.singleton import Singleton

ALL_FLAGS = (1 << 64) - 1


class ShowFlag(IntFlag):
    PRIMITIVES = 1 << 0
    BILLBOARD_TEXT = 1 << 1


class EngineShowFlags(Singleton):
    """A 64-bit set of show flags, with lookup by name."""

    def __init__(self) -> None:
        self.bits = 0
        self._names: dict[str, ShowFlag] = {}
        self.initialize()

    @classmethod
    def get(cls) -> "EngineShowFlags":
        """Return the shared show-flag set, creating it on first use."""
        return super().get()

    def initialize(self) -> None:
        """Turn every flag on and register the flag names."""
        self.bits = ALL_FLAGS
        self._names["Primitives"] = ShowFlag.PRIMITIVES
        self._names["BillboardText"] = ShowFlag.BILLBOARD_TEXT

    def get_flag(self, flag: ShowFlag) -> bool:
        return bool(self.bits & int(flag))

    def set_flag(self, flag: ShowFlag, enabled: bool) -> None:
        if enabled:
            self.bits |= int(flag)
        else:
            self.bits &= ~int(flag) & ALL_FLAGS

    def toggle_flag(self, flag: ShowFlag) -> None:
        self.bits ^= int(flag)

    def _lookup(self, name: str) -> Optional[ShowFlag]:
        return self._names.get(name)

    def set_flag_by_name(self, name: str, enabled: bool) -> bool:
        """Set the named flag; False if no flag has that name."""
        flag = self._lookup(name)
        if flag is None:
            return False
        self.set_flag(flag, enabled)
        return True

    @classmethod
    def find_index_by_name(cls, name: str) -> int:
        """Return the bit value of the named flag, or -1 if there is none."""
        flag = cls.get()._lookup(name)
        return -1 if flag is None else int(flag)
"""A per-class, lazily created shared instance."""

from __future__ import annotations

import threading
from typing import Any, ClassVar, TypeVar

_T = TypeVar("_T", bound="Singleton")


class Singleton:
    """Base class that gives every subclass one shared, lazily built instance.

    Each subclass gets its own instance. ``get`` builds it on first use with
    no arguments, and ``destroy`` drops it so that the next ``get`` builds a
    fresh one.
    """

    _instances: ClassVar[dict[type, Any]] = {}
    _lock: ClassVar[threading.RLock] = threading.RLock()

    @classmethod
    def get(cls: type[_T]) -> _T:
        """Return the shared instance of this class, creating it if needed."""
        with Singleton._lock:
            instance = Singleton._instances.get(cls)
            if instance is None:
                instance = cls()
                Singleton._instances[cls] = instance
            return instance

    @classmethod
    def destroy(cls) -> None:
        """Forget the shared instance of this class, if there is one."""
        with Singleton._lock:
            Singleton._instances.pop(cls, None)
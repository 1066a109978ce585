"""Single-cast and multicast callback holders."""

from __future__ import annotations

import functools
import itertools
import threading
from typing import Any, Callable, Optional

_MAX_ID = 1 << 64


class UnboundDelegateError(RuntimeError):
    """Raised when an unbound delegate is executed."""


class DelegateHandle:
    """Identifies one callback registered on a multicast delegate."""

    __slots__ = ("handle_id",)

    _counter = itertools.count(1)
    _lock = threading.Lock()

    def __init__(self, handle_id: int = 0) -> None:
        self.handle_id = handle_id

    @classmethod
    def create(cls) -> "DelegateHandle":
        """Return a handle with a fresh, non-zero id."""
        with cls._lock:
            value = next(cls._counter) % _MAX_ID
            if value == 0:
                value = next(cls._counter) % _MAX_ID
        return cls(value)

    def is_valid(self) -> bool:
        return self.handle_id != 0

    def invalidate(self) -> None:
        self.handle_id = 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DelegateHandle):
            return NotImplemented
        return self.handle_id == other.handle_id

    def __hash__(self) -> int:
        return hash(self.handle_id)

    def __repr__(self) -> str:
        return f"DelegateHandle({self.handle_id})"


class Delegate:
    """Holds at most one callable, with optional pre-bound arguments."""

    def __init__(self) -> None:
        self._func: Optional[Callable[..., Any]] = None

    def bind(self, func: Callable[..., Any], *args: Any) -> None:
        """Bind ``func``; ``args`` are passed before the call's own arguments."""
        self._func = functools.partial(func, *args)

    def unbind(self) -> None:
        self._func = None

    def is_bound(self) -> bool:
        return self._func is not None

    def execute(self, *args: Any) -> Any:
        """Call the bound callable and return its result."""
        if self._func is None:
            raise UnboundDelegateError("delegate has no bound callable")
        return self._func(*args)

    def execute_if_bound(self, *args: Any) -> bool:
        """Call the bound callable if there is one; report whether it ran."""
        if self._func is None:
            return False
        self._func(*args)
        return True


class MulticastDelegate:
    """Holds any number of callables, all called on broadcast."""

    def __init__(self) -> None:
        self._callbacks: dict[DelegateHandle, Callable[..., Any]] = {}

    def add(self, func: Callable[..., Any], *args: Any) -> DelegateHandle:
        """Register ``func`` and return the handle that removes it."""
        handle = DelegateHandle.create()
        self._callbacks[handle] = functools.partial(func, *args)
        return handle

    def remove(self, handle: DelegateHandle) -> bool:
        """Unregister the callable behind ``handle``; False for an invalid handle."""
        if not handle.is_valid():
            return False
        self._callbacks.pop(handle, None)
        return True

    def broadcast(self, *args: Any) -> None:
        """Call every registered callable as they stood when the call began."""
        for callback in list(self._callbacks.values()):
            callback(*args)

    def __len__(self) -> int:
        return len(self._callbacks)
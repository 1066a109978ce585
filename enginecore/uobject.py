"""Runtime class information, engine objects and checked casts."""

from __future__ import annotations

import threading
from enum import IntEnum
from typing import Any, ClassVar, Optional, TypeVar, Union

from enginecore.names import Name

INDEX_NONE = 0xFFFFFFFF
"""Internal index of an object that is not registered in any object array."""

_T = TypeVar("_T")


class EndPlayReason(IntEnum):
    """Why an object stopped taking part in play."""

    DESTROYED = 0
    """Removed explicitly, for example by being destroyed."""
    WORLD_TRANSITION = 1
    """The world it lived in was replaced."""
    QUIT = 2
    """The program shut down."""


class CastError(TypeError):
    """Raised by ``cast_checked`` when the cast does not succeed."""


class ClassInfo:
    """Runtime type information for one engine object class."""

    def __init__(
        self,
        name: str,
        python_type: type,
        super_class: Optional["ClassInfo"] = None,
    ) -> None:
        self.fname = Name(name)
        self.python_type = python_type
        self.super_class = super_class
        self._default_object: Optional[Any] = None

    @property
    def name(self) -> str:
        return str(self.fname)

    def is_child_of(self, base: Union["ClassInfo", type, None]) -> bool:
        """True if this class is ``base`` or derives from it."""
        if base is None:
            return False
        base_info = _as_class_info(base)
        current: Optional[ClassInfo] = self
        while current is not None:
            if current is base_info:
                return True
            current = current.super_class
        return False

    def default_object(self) -> Any:
        """Return the class default object, building it on first use."""
        if self._default_object is None:
            self._default_object = self.python_type()
        return self._default_object

    def __repr__(self) -> str:
        return f"ClassInfo({self.name!r})"


def _as_class_info(target: Union[ClassInfo, type]) -> ClassInfo:
    if isinstance(target, ClassInfo):
        return target
    if isinstance(target, type) and issubclass(target, EngineObject):
        return target.static_class()
    raise TypeError(f"{target!r} is neither class information nor an engine object class")


class EngineObject:
    """Base of every object that carries runtime class information."""

    _class_infos: ClassVar[dict[type, ClassInfo]] = {}
    _class_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self.fname = Name("None")
        self.uuid = 0
        self.internal_index = INDEX_NONE

    @classmethod
    def static_class(cls) -> ClassInfo:
        """Return the class information of this class, creating it once."""
        with EngineObject._class_lock:
            info = EngineObject._class_infos.get(cls)
            if info is not None:
                return info
        super_class = None
        for base in cls.__mro__[1:]:
            if isinstance(base, type) and issubclass(base, EngineObject):
                super_class = base.static_class()
                break
        with EngineObject._class_lock:
            info = EngineObject._class_infos.get(cls)
            if info is None:
                info = ClassInfo(cls.__name__, cls, super_class)
                EngineObject._class_infos[cls] = info
            return info

    @property
    def name(self) -> str:
        return str(self.fname)

    @property
    def class_info(self) -> ClassInfo:
        return type(self).static_class()

    def is_a(self, base: Union[ClassInfo, type]) -> bool:
        """True if this object's class is ``base`` or derives from it."""
        return self.class_info.is_child_of(base)


def cast(target: Union[type, ClassInfo], obj: Any) -> Optional[Any]:
    """Return ``obj`` if it is of class ``target``, otherwise None."""
    if obj is None:
        return None
    if isinstance(target, type) and isinstance(obj, target):
        return obj
    if isinstance(obj, EngineObject) and (
        isinstance(target, ClassInfo)
        or (isinstance(target, type) and issubclass(target, EngineObject))
    ):
        return obj if obj.is_a(target) else None
    return None


def cast_checked(target: Union[type, ClassInfo], obj: Any) -> Any:
    """Like ``cast`` but raise CastError instead of returning None."""
    if obj is None:
        raise CastError("cannot cast None")
    result = cast(target, obj)
    if result is None:
        raise CastError(f"{type(obj).__name__} is not a {target!r}")
    return result
"""Global view mode and the rasterizer state each mode uses."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Optional

from enginecore.singleton import Singleton


class ViewModeIndex(IntEnum):
    DEFAULT = 0
    """No global rasterizer state is applied."""
    SOLID = 1
    WIREFRAME = 2


class FillMode(Enum):
    SOLID = "solid"
    WIREFRAME = "wireframe"


class CullMode(Enum):
    NONE = "none"
    FRONT = "front"
    BACK = "back"


@dataclass(frozen=True)
class RasterizerState:
    """Description of how primitives are rasterized."""

    fill_mode: FillMode = FillMode.SOLID
    cull_mode: CullMode = CullMode.BACK
    front_counter_clockwise: bool = False
    depth_clip_enable: bool = True
    multisample_enable: bool = True


class ViewMode(Singleton):
    """Holds the current view mode and its rasterizer states."""

    def __init__(self) -> None:
        self.current = ViewModeIndex.SOLID
        self._states: dict[ViewModeIndex, RasterizerState] = {}

    @classmethod
    def get(cls) -> "ViewMode":
        """Return the shared view mode, creating it on first use."""
        return super().get()

    def initialize(self) -> None:
        """Build the rasterizer states and switch to the default mode."""
        solid = RasterizerState()
        self._states[ViewModeIndex.SOLID] = solid
        self._states[ViewModeIndex.WIREFRAME] = replace(solid, fill_mode=FillMode.WIREFRAME)
        self.current = ViewModeIndex.DEFAULT

    def set_view_mode(self, mode: ViewModeIndex) -> None:
        self.current = ViewModeIndex(mode)

    def rasterizer_state(self) -> Optional[RasterizerState]:
        """Return the state to apply for the current mode, or None for none."""
        return self._states.get(self.current)
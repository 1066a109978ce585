"""Core building blocks for a small game engine: names, delegates, reflection,
show flags, view modes, font atlases, a debug console, scene files and debug
line batching."""

__version__ = "0.1.0"

__all__ = [
    "console",
    "debug_draw",
    "delegates",
    "font_atlas",
    "names",
    "scene_io",
    "show_flags",
    "singleton",
    "uobject",
    "view_mode",
]
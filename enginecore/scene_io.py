"""Saving and loading scenes as JSON ``.scene`` files."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

SCENE_SUFFIX = ".scene"

Vector = tuple[float, float, float]
_ZERO: Vector = (0.0, 0.0, 0.0)


@dataclass
class ObjectInfo:
    """Placement and type of one actor in a saved scene."""

    location: Vector = _ZERO
    rotation: Vector = _ZERO
    scale: Vector = _ZERO
    object_type: str = ""
    uuid: int = 0


@dataclass
class WorldInfo:
    """Contents of a saved scene."""

    scene_name: str = ""
    version: int = 0
    actor_count: int = 0
    next_uuid: int = 0
    object_infos: list[ObjectInfo] = field(default_factory=list)


def _scene_path(scene_name: Union[str, "os.PathLike[str]"]) -> Path:
    return Path(os.fspath(scene_name) + SCENE_SUFFIX)


def _vector(values: Any) -> Vector:
    x, y, z = (float(value) for value in list(values)[:3])
    return (x, y, z)


def load_scene(scene_name: Union[str, "os.PathLike[str]"]) -> WorldInfo:
    """Read ``<scene_name>.scene``; raises FileNotFoundError if it is missing.

    Actors come back ordered by their UUID key compared as text.
    """
    with _scene_path(scene_name).open(encoding="utf-8") as handle:
        data = json.load(handle)

    world = WorldInfo(
        scene_name=str(data.get("SceneName", "")),
        version=int(data.get("Version", 0)),
        actor_count=int(data.get("ActorCount", 0)),
        next_uuid=int(data.get("NextUUID", 0)),
    )
    actors = data.get("Actors") or {}
    for key in sorted(actors):
        actor = actors[key]
        world.object_infos.append(
            ObjectInfo(
                location=_vector(actor.get("Location", _ZERO)),
                rotation=_vector(actor.get("Rotation", _ZERO)),
                scale=_vector(actor.get("Scale", _ZERO)),
                object_type=str(actor.get("Type", "")),
                uuid=int(key) if key.isdigit() else 0,
            )
        )
    return world


def save_scene(world_info: WorldInfo) -> Optional[Path]:
    """Write ``<scene_name>.scene`` and return its path; nothing for an unnamed scene."""
    if not world_info.scene_name:
        return None

    document: dict[str, Any] = {
        "Version": world_info.version,
        "NextUUID": world_info.next_uuid,
        "ActorCount": world_info.actor_count,
        "SceneName": world_info.scene_name,
    }
    if world_info.object_infos:
        document["Actors"] = {
            str(info.uuid): {
                "Location": list(info.location),
                "Rotation": list(info.rotation),
                "Scale": list(info.scale),
                "Type": info.object_type,
            }
            for info in world_info.object_infos
        }

    path = _scene_path(world_info.scene_name)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(document, handle, indent=2, sort_keys=True)
    return path
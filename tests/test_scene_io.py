import json

import pytest

from enginecore.scene_io import ObjectInfo, WorldInfo, load_scene, save_scene


def _world(tmp_path, name="level"):
    return WorldInfo(
        scene_name=str(tmp_path / name),
        version=1,
        actor_count=2,
        next_uuid=11,
        object_infos=[
            ObjectInfo((1.0, 2.0, 3.0), (0.0, 90.0, 0.0), (1.0, 1.0, 1.0), "ACube", 9),
            ObjectInfo((4.5, 5.5, 6.5), (10.0, 0.0, 0.0), (2.0, 2.0, 2.0), "ASphere", 10),
        ],
    )


def test_round_trip(tmp_path):
    world = _world(tmp_path)
    save_scene(world)
    loaded = load_scene(world.scene_name)
    assert loaded.scene_name == world.scene_name
    assert loaded.version == world.version
    assert loaded.actor_count == world.actor_count
    assert loaded.next_uuid == world.next_uuid
    assert sorted(loaded.object_infos, key=lambda o: o.uuid) == world.object_infos


def test_actors_ordered_by_text_key(tmp_path):
    world = _world(tmp_path)
    save_scene(world)
    loaded = load_scene(world.scene_name)
    assert [info.uuid for info in loaded.object_infos] == [10, 9]


def test_file_has_scene_suffix_and_keys(tmp_path):
    world = _world(tmp_path)
    path = save_scene(world)
    assert path == tmp_path / "level.scene"
    data = json.loads(path.read_text(encoding="utf-8"))
    assert set(data) == {"Version", "NextUUID", "ActorCount", "SceneName", "Actors"}
    assert data["Actors"]["9"]["Type"] == "ACube"
    assert data["Actors"]["9"]["Location"] == [1.0, 2.0, 3.0]


def test_save_does_not_consume_input(tmp_path):
    world = _world(tmp_path)
    save_scene(world)
    assert len(world.object_infos) == 2


def test_unnamed_scene_is_not_saved(tmp_path):
    world = WorldInfo(scene_name="", object_infos=[ObjectInfo(object_type="ACube")])
    assert save_scene(world) is None
    assert list(tmp_path.iterdir()) == []


def test_empty_scene_round_trip(tmp_path):
    world = WorldInfo(scene_name=str(tmp_path / "empty"), version=3)
    path = save_scene(world)
    assert "Actors" not in json.loads(path.read_text(encoding="utf-8"))
    loaded = load_scene(world.scene_name)
    assert loaded.object_infos == []
    assert loaded.version == 3


def test_load_missing_scene_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_scene(tmp_path / "nowhere")
import io
import struct

import pytest

from enginecore.behaviour import ScriptBehaviour
from enginecore.components import (
    BoxCollider2D,
    GameObject,
    Mesh,
    Rigidbody,
    Script,
    Transform,
    write_mesh_file,
)
from enginecore.serialization import (
    load_scene,
    read_game_object,
    read_scene,
    save_scene,
    write_game_object,
    write_scene,
)
from enginecore.vectors import Vector2, Vector3, Vertex


class _Recorder(ScriptBehaviour):
    def __init__(self):
        super().__init__()
        self.started = False

    def on_start(self):
        self.started = True

    def on_update(self):
        pass

    def on_fixed_update(self):
        pass

    def on_event(self, event):
        pass


def _round_trip(game_object, loader=None):
    buffer = io.BytesIO()
    write_game_object(game_object, buffer)
    buffer.seek(0)
    return read_game_object(buffer, loader)


def test_empty_scene_bytes():
    buffer = io.BytesIO()
    write_scene([], buffer)
    assert buffer.getvalue() == b"\x00\x00\x00\x00"


def test_bare_game_object_bytes():
    buffer = io.BytesIO()
    write_game_object(GameObject("ab"), buffer)
    assert buffer.getvalue() == struct.pack("<I", 2) + b"ab" + struct.pack("<I", 0)


def test_transform_round_trip():
    obj = GameObject("player")
    transform = obj.add_component(Transform)
    transform.position = Vector3(1.5, -2.0, 0.25)
    transform.scale = Vector3(2.0, 3.0, 4.0)
    transform.rotation = Vector3(0.5, 0.0, -1.0)
    loaded = _round_trip(obj)
    assert loaded.name == "player"
    got = loaded.get_component(Transform)
    assert got.position == transform.position
    assert got.scale == transform.scale
    assert got.rotation == transform.rotation
    assert got.game_object is loaded


def test_rigidbody_and_collider_round_trip():
    obj = GameObject()
    body = obj.add_component(Rigidbody)
    body.gravity = True
    body.velocity = Vector3(1.0, 2.0, 3.0)
    body.acceleration = Vector3(-0.5, 0.0, 0.5)
    body.restitution = 0.75
    collider = obj.add_component(BoxCollider2D)
    collider.stationary = True
    loaded = _round_trip(obj)
    got = loaded.get_component(Rigidbody)
    assert got.gravity is True
    assert got.velocity == body.velocity
    assert got.acceleration == body.acceleration
    assert got.restitution == body.restitution
    assert loaded.get_component(BoxCollider2D).stationary is True


def test_component_order_preserved():
    obj = GameObject()
    obj.add_component(BoxCollider2D)
    obj.add_component(Transform)
    obj.add_component(Rigidbody)
    loaded = _round_trip(obj)
    assert [type(c) for c in loaded.components] == [BoxCollider2D, Transform, Rigidbody]


def test_mesh_round_trip_loads_file(tmp_path):
    path = tmp_path / "quad.mesh"
    vertices = [Vertex(Vector3(1.0, 2.0, 3.0), Vector2(0.5, 0.5), Vector3(1.0))]
    write_mesh_file(path, vertices, [0, 0, 0])
    obj = GameObject()
    mesh = obj.add_component(Mesh)
    mesh.mesh_file_path = str(path)
    mesh.color = Vector3(0.5, 0.25, 1.0)
    loaded = _round_trip(obj).get_component(Mesh)
    assert loaded.mesh_file_path == str(path)
    assert loaded.color == mesh.color
    assert loaded.vertices == vertices
    assert loaded.indices == [0, 0, 0]


def test_script_uses_loader():
    obj = GameObject()
    obj.add_component(Script).name = "Mover"
    requested = []
    made = []

    def loader(name):
        requested.append(name)
        behaviour = _Recorder()
        made.append(behaviour)
        return behaviour

    loaded = _round_trip(obj, loader)
    script = loaded.get_component(Script)
    assert requested == ["Mover"]
    assert script.behaviour is made[0]
    assert made[0].started
    assert made[0].game_object is loaded


def test_script_without_loader_keeps_name():
    obj = GameObject()
    obj.add_component(Script).name = "Mover"
    script = _round_trip(obj).get_component(Script)
    assert script.name == "Mover"
    assert script.behaviour is None


def test_unknown_component_id_rejected():
    data = struct.pack("<I", 1) + b"x" + struct.pack("<II", 1, 99)
    with pytest.raises(ValueError):
        read_game_object(io.BytesIO(data))


def test_truncated_data_rejected():
    buffer = io.BytesIO()
    obj = GameObject("thing")
    obj.add_component(Transform)
    write_scene([obj], buffer)
    with pytest.raises(ValueError):
        read_scene(io.BytesIO(buffer.getvalue()[:-3]))


def test_scene_file_round_trip(tmp_path):
    first = GameObject("first")
    first.add_component(Transform).position = Vector3(4.0, 5.0, 6.0)
    second = GameObject("second")
    second.add_component(Rigidbody)
    path = tmp_path / "level.cn"
    save_scene([first, second], path)
    loaded = load_scene(path)
    assert [g.name for g in loaded] == ["first", "second"]
    assert loaded[0].get_component(Transform).position == Vector3(4.0, 5.0, 6.0)
    assert loaded[1].get_component(Rigidbody) is not None
    assert loaded[1].get_component(Transform) is None
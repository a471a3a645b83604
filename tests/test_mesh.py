"""Tests for the mesh container and the OBJ loader."""

import pytest

from wireframe_overlay.errors import (MeshError, MissingTexcoordsError, ObjParseError,
                                      VertexIndexError)
from wireframe_overlay.math_utils import Vec3
from wireframe_overlay.mesh import Mesh


def test_validate_accepts_valid_mesh() -> None:
    Mesh([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 2)]).validate()


@pytest.mark.parametrize("bad", [3, -1])
def test_validate_rejects_out_of_range(bad) -> None:
    mesh = Mesh([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 2), (0, bad, 1)])
    with pytest.raises(VertexIndexError) as info:
        mesh.validate()
    assert info.value.triangle == 1
    assert info.value.index == bad
    assert isinstance(info.value, IndexError)
    assert isinstance(info.value, MeshError)


def test_triangles_need_three_indices() -> None:
    with pytest.raises(ValueError):
        Mesh([(0, 0, 0)] * 4, [(0, 1, 2, 3)])


def test_validate_texcoords() -> None:
    mesh = Mesh([(0, 0, 0)] * 3, [(0, 1, 2)], [(0, 0), (1, 0)])
    with pytest.raises(MissingTexcoordsError):
        mesh.validate_texcoords()


def test_cube_faces_point_outwards() -> None:
    cube = Mesh.cube()
    assert len(cube.vertices) == 8
    assert len(cube.triangles) == 12
    for a, b, c in cube.triangles:
        pa, pb, pc = (Vec3(*cube.vertices[i]) for i in (a, b, c))
        normal = (pb - pa).cross(pc - pa)
        centroid = (pa + pb + pc) / 3
        assert normal.dot(centroid) > 0
    cube.validate_texcoords()


QUAD_OBJ = """\
# quad with a texture
v -1 -1 0
v  1 -1 0
v  1  1 0
v -1  1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


def test_obj_quad_is_fan_triangulated(tmp_path) -> None:
    path = tmp_path / "quad.obj"
    path.write_text(QUAD_OBJ)
    mesh = Mesh.from_obj(path)
    assert mesh.vertices == [(-1, -1, 0), (1, -1, 0), (1, 1, 0), (-1, 1, 0)]
    assert mesh.triangles == [(0, 1, 2), (0, 2, 3)]
    # v flipped to image orientation
    assert mesh.texcoords == [(0.0, 1.0), (1.0, 1.0), (1.0, 0.0), (0.0, 0.0)]


def test_obj_without_texcoords(tmp_path) -> None:
    path = tmp_path / "tri.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nvn 0 0 1\nf 1//1 2//1 3//1\n")
    mesh = Mesh.from_obj(path)
    assert mesh.triangles == [(0, 1, 2)]
    assert mesh.texcoords is None


def test_obj_negative_indices(tmp_path) -> None:
    path = tmp_path / "neg.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n")
    assert Mesh.from_obj(path).triangles == [(0, 1, 2)]


def test_obj_uv_seam_duplicates_vertex(tmp_path) -> None:
    path = tmp_path / "seam.obj"
    path.write_text(
        "v 0 0 0\nv 1 0 0\nv 0 1 0\nv 1 1 0\n"
        "vt 0 0\nvt 1 0\nvt 0 1\nvt 0.5 0.5\n"
        "f 1/1 2/2 3/3\n"
        "f 2/4 4/2 3/3\n"
    )
    mesh = Mesh.from_obj(path)
    assert len(mesh.vertices) == 5
    assert mesh.vertices[4] == mesh.vertices[1]
    assert mesh.triangles == [(0, 1, 2), (4, 3, 2)]
    assert mesh.texcoords[4] == (0.5, 0.5)
    mesh.validate_texcoords()


@pytest.mark.parametrize("body, lineno", [
    ("v 0 0\n", 1),
    ("v 0 0 0\nv 1 0 0\nf 1 2\n", 3),
    ("v 0 0 0\nf 1 2 3\n", 2),
    ("v 0 0 0\nv 1 0 0\nv a 1 0\n", 3),
])
def test_obj_parse_errors_name_the_line(tmp_path, body, lineno) -> None:
    path = tmp_path / "bad.obj"
    path.write_text(body)
    with pytest.raises(ObjParseError) as info:
        Mesh.from_obj(path)
    assert info.value.lineno == lineno
    assert f"bad.obj:{lineno}:" in str(info.value)


def test_obj_missing_file(tmp_path) -> None:
    with pytest.raises(OSError):
        Mesh.from_obj(tmp_path / "nope.obj")


def test_obj_with_latin1_comment_loads(tmp_path) -> None:
    path = tmp_path / "latin1.obj"
    path.write_bytes(b"# caf\xe9\xff\nv 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    mesh = Mesh.from_obj(path)
    assert mesh.triangles == [(0, 1, 2)]


def test_obj_undecodable_bytes_in_a_record(tmp_path) -> None:
    path = tmp_path / "garbled.obj"
    path.write_bytes(b"v 0 0 0\nv 1 \xe9 0\n")
    with pytest.raises(ObjParseError) as info:
        Mesh.from_obj(path)
    assert info.value.lineno == 2


def test_obj_texcoord_without_v(tmp_path) -> None:
    path = tmp_path / "u_only.obj"
    path.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nvt 0.25\nvt 0.5\nvt 0.75\nf 1/1 2/2 3/3\n")
    mesh = Mesh.from_obj(path)
    # v defaults to 0, flipped to image orientation
    assert mesh.texcoords == [(0.25, 1.0), (0.5, 1.0), (0.75, 1.0)]

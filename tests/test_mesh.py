import numpy as np
import pytest

from lathecad.mesh import Mesh, index_dtype, mesh_view, typed_buffers


def _triangle():
    return Mesh.from_lists(
        [(0, 0, 0), (1, 0, 0), (0, 1, 0)],
        [(0, 1, 2)],
        [(0, 0, 1)] * 3,
    )


def test_from_lists_accepts_mappings():
    mesh = Mesh.from_lists(
        [{'x': 0, 'y': 0, 'z': 0}, {'x': 1, 'y': 0, 'z': 0}, {'x': 0, 'y': 1, 'z': 0}],
        [[0, 1, 2]],
    )
    assert mesh.vertices[1] == (1.0, 0.0, 0.0)
    assert mesh.faces == ((0, 1, 2),)
    assert mesh.normals == ()


def test_normals_must_match_vertices():
    with pytest.raises(ValueError):
        Mesh.from_lists([(0, 0, 0), (1, 0, 0)], [], [(0, 0, 1)])


def test_faces_must_index_vertices():
    with pytest.raises(ValueError):
        Mesh.from_lists([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 3)])
    with pytest.raises(ValueError):
        Mesh(((0.0, 0.0, 0.0),), ((0, 0, -1),))


def test_empty_mesh():
    mesh = Mesh()
    assert mesh.is_empty()
    assert mesh.vertex_count == 0 and mesh.face_count == 0
    typed = typed_buffers(mesh)
    assert typed.positions.shape == (0,)
    assert typed.indices.shape == (0,)


def test_index_dtype():
    assert index_dtype(3) is np.uint16
    assert index_dtype(65535) is np.uint16
    assert index_dtype(65536) is np.uint32


def test_typed_buffers_zero_fill_missing_normals():
    mesh = Mesh.from_lists([(0, 0, 0), (1, 0, 0), (0, 1, 0)], [(0, 1, 2)])
    typed = typed_buffers(mesh, {'vertexCount': 3})
    assert typed.normals.shape == (9,)
    assert not typed.normals.any()
    assert typed.info == {'vertexCount': 3}


def test_mesh_view_recomputes_face_normals():
    mesh = Mesh.from_lists(
        [(0, 0, 0), (1, 0, 0), (0, 1, 0)],
        [(0, 2, 1)],
        [(0, 0, 1)] * 3,
    )
    normal, v0, v1, v2 = next(mesh_view(mesh))
    assert normal == (0.0, 0.0, -1.0)
    assert (v0, v1, v2) == ((0.0, 0.0, 0.0), (0.0, 1.0, 0.0), (1.0, 0.0, 0.0))


def test_mesh_view_count():
    assert len(list(mesh_view(_triangle()))) == 1

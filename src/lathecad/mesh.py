"""Indexed triangle meshes and their flat-buffer views."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Sequence, Tuple

import numpy as np

from lathecad.vec import Vec3, point3, triangle_normal

Face = Tuple[int, int, int]
TriTuple = Tuple[Vec3, Vec3, Vec3, Vec3]

UINT16_MAX_VERTICES = 65535


@dataclass(frozen=True)
class Mesh:
    """Vertices, triangle faces and per-vertex normals, correlated by index.

    Faces refer to vertices by position.  ``normals`` is either empty or
    holds exactly one entry per vertex.
    """

    vertices: Tuple[Vec3, ...] = ()
    faces: Tuple[Face, ...] = ()
    normals: Tuple[Vec3, ...] = ()

    def __post_init__(self):
        if self.normals and len(self.normals) != len(self.vertices):
            raise ValueError('mesh needs one normal per vertex')
        count = len(self.vertices)
        for face in self.faces:
            for idx in face:
                if not 0 <= idx < count:
                    raise ValueError(f'face {face} refers past the {count} mesh vertices')

    @classmethod
    def from_lists(cls, vertices: Sequence, faces: Sequence[Sequence[int]],
                   normals: Sequence = ()) -> 'Mesh':
        """Build a mesh from loose data; points may be triples or x/y/z mappings."""

        return cls(
            tuple(point3(v) for v in vertices),
            tuple((int(f[0]), int(f[1]), int(f[2])) for f in faces),
            tuple(point3(n) for n in normals),
        )

    @property
    def vertex_count(self) -> int:
        return len(self.vertices)

    @property
    def face_count(self) -> int:
        return len(self.faces)

    def is_empty(self) -> bool:
        return not self.vertices


@dataclass(frozen=True)
class TypedGeometry:
    """Packed numpy buffers for rendering back ends.

    ``positions`` and ``normals`` are ``float32`` arrays of length
    ``vertexCount * 3``; ``indices`` holds ``faceCount * 3`` entries as
    ``uint16`` or, past 65535 vertices, ``uint32``.
    """

    positions: np.ndarray
    indices: np.ndarray
    normals: np.ndarray
    info: Dict[str, Any] = field(default_factory=dict)


def index_dtype(vertex_count: int):
    """Smallest unsigned integer type able to address ``vertex_count`` vertices."""

    return np.uint32 if vertex_count > UINT16_MAX_VERTICES else np.uint16


def typed_buffers(mesh: Mesh, info: Dict[str, Any] = None) -> TypedGeometry:
    """Pack ``mesh`` into flat buffers; missing normals are zero-filled."""

    vcount = mesh.vertex_count
    positions = np.asarray(mesh.vertices, dtype=np.float32).reshape(vcount * 3)
    indices = np.asarray(mesh.faces, dtype=index_dtype(vcount)).reshape(mesh.face_count * 3)
    if mesh.normals:
        normals = np.asarray(mesh.normals, dtype=np.float32).reshape(vcount * 3)
    else:
        normals = np.zeros(vcount * 3, dtype=np.float32)
    return TypedGeometry(positions, indices, normals, dict(info or {}))


def mesh_view(mesh: Mesh) -> Iterator[TriTuple]:
    """Yield triangles of ``mesh`` as ``(normal, v0, v1, v2)``.

    Face normals are recomputed from the vertices rather than taken from
    the stored per-vertex normals.  Degenerate faces keep a zero normal.
    """

    verts = mesh.vertices
    for idx0, idx1, idx2 in mesh.faces:
        v0 = verts[idx0]
        v1 = verts[idx1]
        v2 = verts[idx2]
        yield triangle_normal(v0, v1, v2), v0, v1, v2


__all__ = [
    'Face',
    'Mesh',
    'TypedGeometry',
    'UINT16_MAX_VERTICES',
    'index_dtype',
    'typed_buffers',
    'mesh_view',
]

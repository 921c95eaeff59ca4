"""Surfaces of revolution.

:class:`Revolution3D` sweeps a 2D profile, typically the output of
:meth:`lathecad.curve.Curve2D.generate_curve`, around one of the
coordinate axes and builds an indexed triangle mesh with per-vertex
normals.

Profile coordinates are interpreted as ``(radius, height)``: the ``x``
of each profile point is rotated around the chosen axis while ``y``
stays on that axis.

Vertices are stored ring-major: the vertex for ring ``i`` (sweep angle
``i * maxAngle / subdivisions``) and profile point ``j`` lives at index
``i * len(profile) + j``.  A full 360 degree sweep therefore has its
last ring coincide with ring 0; the duplicate vertices are kept, not
welded.

Every setter bumps :attr:`Revolution3D.version` and discards the
generated mesh, so stale combinations of vertices, faces and normals
cannot be observed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from math import cos, isnan, radians, sin
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from lathecad.mesh import Face, Mesh, TypedGeometry, typed_buffers
from lathecad.vec import ZERO3, Vec2, Vec3, add3, normalize3, point2, scale3, triangle_normal

logger = logging.getLogger(__name__)

MIN_ANGLE = 0.0
MAX_ANGLE = 360.0
MIN_SUBDIVISIONS = 8
MAX_SUBDIVISIONS = 360


class Axis(str, Enum):
    X = 'x'
    Y = 'y'
    Z = 'z'

    @classmethod
    def parse(cls, value: Union['Axis', str]) -> 'Axis':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f'unknown revolution axis: {value!r}') from None


@dataclass(frozen=True)
class RevolutionConfig:
    """Sweep axis, sweep angle in degrees, and angular step count."""

    axis: Axis = Axis.Y
    max_angle: float = 360.0
    subdivisions: int = 32


def clamp_angle(angle: float) -> float:
    return max(MIN_ANGLE, min(MAX_ANGLE, float(angle)))


def clamp_subdivisions(subdivisions: int) -> int:
    value = float(subdivisions)
    if isnan(value):
        return MIN_SUBDIVISIONS
    return int(max(MIN_SUBDIVISIONS, min(MAX_SUBDIVISIONS, value)))


def profile_to_3d(p: Vec2, angle: float, axis: Axis = Axis.Y) -> Vec3:
    """Rotate profile point ``p`` by ``angle`` radians around ``axis``."""

    x, y = p
    c = cos(angle)
    s = sin(angle)
    if axis is Axis.X:
        return y, x * c, x * s
    if axis is Axis.Z:
        return x * c, x * s, y
    return x * c, y, x * s


class Revolution3D:
    """Revolution surface mesher."""

    def __init__(self, profile: Optional[Iterable] = None, config: Optional[RevolutionConfig] = None):
        self._profile: List[Vec2] = []
        self._config = RevolutionConfig()
        self._vertices: List[Vec3] = []
        self._faces: List[Face] = []
        self._normals: List[Vec3] = []
        self._version = 0
        self._typed = None
        if config is not None:
            self._config = RevolutionConfig(
                Axis.parse(config.axis),
                clamp_angle(config.max_angle),
                clamp_subdivisions(config.subdivisions),
            )
        if profile is not None:
            self.set_profile(profile)

    def __repr__(self):
        return 'Revolution3D({} profile points, {})'.format(len(self._profile), self._config)

    @property
    def version(self) -> int:
        """Counter bumped whenever configuration or generated data changes."""
        return self._version

    @property
    def config(self) -> RevolutionConfig:
        return self._config

    @property
    def profile(self):
        return tuple(self._profile)

    @property
    def axis(self) -> Axis:
        return self._config.axis

    @property
    def max_angle(self) -> float:
        return self._config.max_angle

    @property
    def subdivisions(self) -> int:
        return self._config.subdivisions

    @property
    def vertices(self):
        return tuple(self._vertices)

    @property
    def faces(self):
        return tuple(self._faces)

    @property
    def normals(self):
        return tuple(self._normals)

    @property
    def mesh(self) -> Mesh:
        return Mesh(tuple(self._vertices), tuple(self._faces), tuple(self._normals))

    def _touch(self) -> None:
        self._version += 1
        self._typed = None

    ## configuration

    def set_profile(self, points: Iterable) -> None:
        """Replace the profile with copies of ``points`` and drop the mesh."""

        self._profile = [point2(p) for p in points]
        self.clear()

    def set_axis(self, axis: Union[Axis, str]) -> None:
        self._config = replace(self._config, axis=Axis.parse(axis))
        self.clear()

    def set_max_angle(self, angle: float) -> None:
        self._config = replace(self._config, max_angle=clamp_angle(angle))
        self.clear()

    def set_subdivisions(self, subdivisions: int) -> None:
        self._config = replace(self._config, subdivisions=clamp_subdivisions(subdivisions))
        self.clear()

    def clear(self) -> None:
        """Discard vertices, faces, normals and cached buffers."""

        self._vertices = []
        self._faces = []
        self._normals = []
        self._touch()

    ## generation

    def profile_to_3d(self, p: Vec2, angle: float) -> Vec3:
        return profile_to_3d(p, angle, self._config.axis)

    def generate_vertices(self) -> None:
        """Build ``subdivisions + 1`` rings of vertices.

        Faces and normals refer to the previous vertices and are dropped.
        """

        verts = []
        if self._profile:
            axis = self._config.axis
            step = radians(self._config.max_angle) / self._config.subdivisions
            for i in range(self._config.subdivisions + 1):
                angle = i * step
                for p in self._profile:
                    verts.append(profile_to_3d(p, angle, axis))
        self._vertices = verts
        self._faces = []
        self._normals = []
        self._touch()

    def generate_faces(self) -> None:
        """Split each quad between neighbouring rings into two triangles.

        The quad ``v1 = (i, j)``, ``v2 = (i, j+1)``, ``v3 = (i+1, j)``,
        ``v4 = (i+1, j+1)`` becomes ``(v1, v2, v3)`` and ``(v2, v4, v3)``.
        Only rings ``i`` and ``i + 1`` for ``i < subdivisions`` are joined;
        there is no band from the last ring back to ring 0, which would
        bridge the gap of an open sweep.
        """

        faces = []
        plen = len(self._profile)
        if self._vertices:
            for i in range(self._config.subdivisions):
                base = i * plen
                nxt = (i + 1) * plen
                for j in range(plen - 1):
                    v1 = base + j
                    v2 = base + j + 1
                    v3 = nxt + j
                    v4 = nxt + j + 1
                    faces.append((v1, v2, v3))
                    faces.append((v2, v4, v3))
        self._faces = faces
        self._normals = []
        self._touch()

    def calculate_face_normal(self, face: Sequence[int]) -> Vec3:
        """Unit normal of ``face``; the zero vector for a degenerate face."""

        v = self._vertices
        return triangle_normal(v[face[0]], v[face[1]], v[face[2]])

    def generate_vertex_normals(self) -> None:
        """Average the normals of the faces around each vertex.

        Every adjacent face counts equally regardless of its area.
        Vertices without faces keep a zero normal.
        """

        sums = [ZERO3] * len(self._vertices)
        counts = [0] * len(self._vertices)
        for face in self._faces:
            fn = self.calculate_face_normal(face)
            for idx in face:
                sums[idx] = add3(sums[idx], fn)
                counts[idx] += 1

        normals = []
        for total, count in zip(sums, counts):
            if count:
                normals.append(normalize3(scale3(total, 1.0 / count)))
            else:
                normals.append(ZERO3)
        self._normals = normals
        self._touch()

    def generate_surface(self) -> None:
        """Generate vertices, faces and normals, in that order.

        With an empty profile a warning is logged and the mesh stays empty.
        """

        if not self._profile:
            logger.warning('no 2D profile set; revolution surface is empty')
            self.clear()
            return

        self.generate_vertices()
        self.generate_faces()
        self.generate_vertex_normals()
        logger.debug('revolved %d profile points around %s: %d vertices, %d faces',
                     len(self._profile), self._config.axis.value,
                     len(self._vertices), len(self._faces))

    ## accessors

    def _info(self) -> Dict[str, Any]:
        return {
            'vertexCount': len(self._vertices),
            'faceCount': len(self._faces),
            'axis': self._config.axis.value,
            'maxAngle': self._config.max_angle,
            'subdivisions': self._config.subdivisions,
        }

    def get_geometry(self) -> Dict[str, Any]:
        return {
            'vertices': list(self._vertices),
            'faces': list(self._faces),
            'normals': list(self._normals),
            'info': self._info(),
        }

    def get_typed_geometry(self) -> TypedGeometry:
        """Return packed buffers of the surface, generating it if needed.

        The buffers are cached until the next change of :attr:`version`.
        """

        if not self._vertices or (not self._faces and len(self._profile) > 1):
            self.generate_surface()
        if len(self._normals) != len(self._vertices):
            self.generate_vertex_normals()

        if self._typed is None or self._typed[0] != self._version:
            self._typed = (self._version, typed_buffers(self.mesh, self._info()))
        return self._typed[1]

    def get_info(self) -> Dict[str, Any]:
        return {
            'profilePoints': len(self._profile),
            'vertices': len(self._vertices),
            'faces': len(self._faces),
            'axis': self._config.axis.value,
            'maxAngle': self._config.max_angle,
            'subdivisions': self._config.subdivisions,
        }


__all__ = [
    'Axis',
    'RevolutionConfig',
    'Revolution3D',
    'profile_to_3d',
    'clamp_angle',
    'clamp_subdivisions',
    'MIN_SUBDIVISIONS',
    'MAX_SUBDIVISIONS',
]

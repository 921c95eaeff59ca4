## small tuple vector helpers for latheCAD
## Copyright (c) 2026 latheCAD contributors

# Permission is hereby granted, free of charge, to any person
# obtaining a copy of this software and associated documentation files
# (the "Software"), to deal in the Software without restriction,
# including without limitation the rights to use, copy, modify, merge,
# publish, distribute, sublicense, and/or sell copies of the Software,
# and to permit persons to whom the Software is furnished to do so,
# subject to the following conditions:
#
# The above copyright notice and this permission notice shall be
# included in all copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
# EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
# MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND
# NONINFRINGEMENT. IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS
# BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN
# ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN
# CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.

"""Point and vector helpers shared by the curve and revolution code.

Points and vectors in **latheCAD** are plain tuples of floats:
``(x, y)`` for profile and control points, ``(x, y, z)`` for mesh
vertices and normals.  Unlike a homogeneous ``[x, y, z, w]``
representation there is no normalisation coordinate; the mesher only
ever rotates, it never projects.

``epsilon`` is the tolerance used by the comparison helpers.  The
normalisation helpers do not use it: they only refuse to divide by an
exact zero, so that tiny but valid normals are not flattened.
"""

from __future__ import annotations

from math import sqrt
from typing import Mapping, Sequence, Tuple, Union

Vec2 = Tuple[float, float]
Vec3 = Tuple[float, float, float]

epsilon = 5e-6

ZERO3: Vec3 = (0.0, 0.0, 0.0)


def point2(p: Union[Sequence[float], Mapping[str, float]]) -> Vec2:
    """Return ``p`` as an ``(x, y)`` float tuple.

    Accepts pairs (tuples, lists, numpy rows) and mappings with ``x``
    and ``y`` keys, which is how interactive front ends tend to hand
    over points.
    """

    if isinstance(p, Mapping):
        return float(p['x']), float(p['y'])
    if len(p) < 2:
        raise ValueError(f'bad point: {p!r}')
    return float(p[0]), float(p[1])


def point3(p: Union[Sequence[float], Mapping[str, float]]) -> Vec3:
    """Return ``p`` as an ``(x, y, z)`` float tuple; see :func:`point2`."""

    if isinstance(p, Mapping):
        return float(p['x']), float(p['y']), float(p['z'])
    if len(p) < 3:
        raise ValueError(f'bad point: {p!r}')
    return float(p[0]), float(p[1]), float(p[2])


def lerp2(a: Vec2, b: Vec2, t: float) -> Vec2:
    """Linear interpolation, unclamped: ``t`` outside [0,1] extrapolates."""

    s = 1.0 - t
    return s * a[0] + t * b[0], s * a[1] + t * b[1]


def sub3(a: Vec3, b: Vec3) -> Vec3:
    return a[0] - b[0], a[1] - b[1], a[2] - b[2]


def add3(a: Vec3, b: Vec3) -> Vec3:
    return a[0] + b[0], a[1] + b[1], a[2] + b[2]


def scale3(a: Vec3, s: float) -> Vec3:
    return a[0] * s, a[1] * s, a[2] * s


def cross3(a: Vec3, b: Vec3) -> Vec3:
    return (
        a[1] * b[2] - a[2] * b[1],
        a[2] * b[0] - a[0] * b[2],
        a[0] * b[1] - a[1] * b[0],
    )


def mag3(a: Vec3) -> float:
    return sqrt(a[0] * a[0] + a[1] * a[1] + a[2] * a[2])


def normalize3(a: Vec3) -> Vec3:
    """Return ``a`` scaled to unit length, or ``a`` unchanged if zero length."""

    length = mag3(a)
    if length > 0:
        return a[0] / length, a[1] / length, a[2] / length
    return a


def triangle_normal(v0: Vec3, v1: Vec3, v2: Vec3) -> Vec3:
    """Unit normal of the triangle ``(v0, v1, v2)`` by the right-hand rule.

    Degenerate triangles give the zero vector instead of NaNs.
    """

    return normalize3(cross3(sub3(v1, v0), sub3(v2, v0)))


def close3(a: Vec3, b: Vec3, tol: float = epsilon) -> bool:
    return mag3(sub3(a, b)) <= tol


__all__ = [
    'Vec2',
    'Vec3',
    'epsilon',
    'ZERO3',
    'point2',
    'point3',
    'lerp2',
    'sub3',
    'add3',
    'scale3',
    'cross3',
    'mag3',
    'normalize3',
    'triangle_normal',
    'close3',
]

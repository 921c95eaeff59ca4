"""Spline helpers for latheCAD.

Stateless evaluation routines for the two curve families a profile can
be drawn with: Bézier curves (De Casteljau) and clamped uniform
B-Splines (Cox–de Boor).  :class:`lathecad.curve.Curve2D` wraps these
with editable control points and configuration.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from lathecad.vec import Vec2, lerp2


def de_casteljau(ctrl: Sequence[Vec2], t: float) -> Optional[Vec2]:
    """Evaluate the Bézier curve over ``ctrl`` at parameter ``t``.

    Adjacent points are repeatedly interpolated until one remains.
    ``t`` is not clamped.  Returns ``None`` for an empty control set.
    """

    if not ctrl:
        return None
    pts = list(ctrl)
    while len(pts) > 1:
        pts = [lerp2(pts[i], pts[i + 1], t) for i in range(len(pts) - 1)]
    return pts[0]


def clamped_knots(count: int, degree: int) -> List[float]:
    """Return the clamped (open) uniform knot vector for ``count`` control
    points of the given ``degree``.

    The first and last ``degree + 1`` knots are 0 and 1; interior knots
    are evenly spaced.  Requires ``1 <= degree < count``.
    """

    if degree < 1 or degree >= count:
        raise ValueError(f'degree {degree} invalid for {count} control points')
    m = count + degree + 1
    knots = []
    for i in range(m):
        if i <= degree:
            knots.append(0.0)
        elif i >= m - degree - 1:
            knots.append(1.0)
        else:
            knots.append((i - degree) / (count - degree))
    return knots


def basis_function(i: int, k: int, t: float, knots: Sequence[float]) -> float:
    """Cox–de Boor B-Spline basis ``N(i, k)`` evaluated at ``t``.

    The degree-0 basis is 1 on the half-open span ``[knots[i], knots[i+1])``.
    A term whose knot span is empty contributes exactly 0.
    """

    if k == 0:
        return 1.0 if knots[i] <= t < knots[i + 1] else 0.0

    left = 0.0
    denom = knots[i + k] - knots[i]
    if denom != 0.0:
        left = (t - knots[i]) / denom * basis_function(i, k - 1, t, knots)

    right = 0.0
    denom = knots[i + k + 1] - knots[i + 1]
    if denom != 0.0:
        right = (knots[i + k + 1] - t) / denom * basis_function(i + 1, k - 1, t, knots)

    return left + right


def evaluate_bspline(ctrl: Sequence[Vec2], degree: int, t: float) -> Optional[Vec2]:
    """Evaluate a clamped uniform B-Spline at ``t`` in ``[0, 1]``.

    The effective degree is ``min(degree, len(ctrl) - 1)``.  ``t`` is
    mapped linearly onto the valid knot domain.  Since the half-open
    basis vanishes at the upper end of that domain, ``t`` at or beyond
    it yields the last control point, which a clamped curve interpolates.
    """

    n = len(ctrl)
    if n == 0:
        return None
    if n == 1:
        return ctrl[0]

    k = min(max(int(degree), 1), n - 1)
    knots = clamped_knots(n, k)
    t_min = knots[k]
    t_max = knots[n]
    real_t = t_min + t * (t_max - t_min)
    if real_t >= t_max:
        return ctrl[-1]

    x = 0.0
    y = 0.0
    for i in range(n):
        basis = basis_function(i, k, real_t, knots)
        if basis == 0.0:
            continue
        x += ctrl[i][0] * basis
        y += ctrl[i][1] * basis
    return x, y


__all__ = [
    'de_casteljau',
    'clamped_knots',
    'basis_function',
    'evaluate_bspline',
]

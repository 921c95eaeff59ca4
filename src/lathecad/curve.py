"""Editable 2D profile curves.

:class:`Curve2D` holds an ordered list of control points plus a
:class:`CurveConfig` and discretises the resulting Bézier or B-Spline
curve into a polyline that can be fed to
:class:`lathecad.revolve.Revolution3D`.

Point editing is permissive: updating or removing a point at an index
that does not exist is silently ignored, and the numeric setters clamp
instead of rejecting, so an interactive editor can forward user input
without validating it first.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Tuple, Union

from lathecad import spline
from lathecad.vec import Vec2, point2

logger = logging.getLogger(__name__)

MIN_DEGREE = 1
MIN_RESOLUTION = 10


class CurveType(str, Enum):
    BEZIER = 'bezier'
    BSPLINE = 'bspline'

    @classmethod
    def parse(cls, value: Union['CurveType', str]) -> 'CurveType':
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f'unknown curve type: {value!r}') from None


@dataclass(frozen=True)
class CurveConfig:
    """Curve family and discretisation settings."""

    type: CurveType = CurveType.BEZIER
    degree: int = 3
    resolution: int = 100


class Curve2D:
    """Bézier / B-Spline curve over an editable list of control points."""

    def __init__(self, points: Optional[Iterable] = None, config: Optional[CurveConfig] = None):
        self._ctrl: List[Vec2] = []
        self._config = CurveConfig()
        if config is not None:
            self.set_curve_type(config.type)
            self.set_degree(config.degree)
            self.set_resolution(config.resolution)
        if points is not None:
            self.set_control_points(points)

    def __repr__(self):
        return 'Curve2D({}, {})'.format(list(self._ctrl), self._config)

    @property
    def control_points(self) -> Tuple[Vec2, ...]:
        return tuple(self._ctrl)

    @property
    def config(self) -> CurveConfig:
        return self._config

    @property
    def curve_type(self) -> CurveType:
        return self._config.type

    @property
    def degree(self) -> int:
        return self._config.degree

    @property
    def resolution(self) -> int:
        return self._config.resolution

    ## control point editing

    def set_control_points(self, points: Iterable) -> None:
        """Replace all control points with copies of ``points``."""

        self._ctrl = [point2(p) for p in points]

    def add_control_point(self, x: float, y: float) -> None:
        self._ctrl.append((float(x), float(y)))

    def insert_control_point(self, index: int, x: float, y: float) -> None:
        """Insert a point before ``index``; ``index == len`` appends."""

        if 0 <= index <= len(self._ctrl):
            self._ctrl.insert(index, (float(x), float(y)))

    def remove_control_point(self, index: int) -> None:
        if 0 <= index < len(self._ctrl):
            del self._ctrl[index]

    def update_control_point(self, index: int, x: float, y: float) -> None:
        if 0 <= index < len(self._ctrl):
            self._ctrl[index] = (float(x), float(y))

    ## evaluation

    def evaluate_bezier(self, t: float) -> Optional[Vec2]:
        """Point on the Bézier curve at ``t``, or ``None`` with no control points."""

        return spline.de_casteljau(self._ctrl, t)

    basis_function = staticmethod(spline.basis_function)

    def evaluate_bspline(self, t: float) -> Optional[Vec2]:
        """Point on the clamped uniform B-Spline at ``t`` in [0, 1]."""

        return spline.evaluate_bspline(self._ctrl, self._config.degree, t)

    def evaluate(self, t: float) -> Optional[Vec2]:
        if self._config.type is CurveType.BEZIER:
            return self.evaluate_bezier(t)
        return self.evaluate_bspline(t)

    def generate_curve(self) -> List[Vec2]:
        """Sample the curve at ``resolution + 1`` evenly spaced parameters."""

        if not self._ctrl:
            return []
        steps = self._config.resolution
        pts = []
        for i in range(steps + 1):
            p = self.evaluate(i / steps)
            if p is not None:
                pts.append(p)
        logger.debug('sampled %d-point %s curve into %d points',
                     len(self._ctrl), self._config.type.value, len(pts))
        return pts

    ## configuration

    def set_curve_type(self, curve_type: Union[CurveType, str]) -> None:
        self._config = replace(self._config, type=CurveType.parse(curve_type))

    def set_degree(self, degree: int) -> None:
        self._config = replace(self._config, degree=max(MIN_DEGREE, int(degree)))

    def set_resolution(self, resolution: int) -> None:
        self._config = replace(self._config, resolution=max(MIN_RESOLUTION, int(resolution)))

    def get_info(self) -> Dict[str, Any]:
        return {
            'controlPoints': len(self._ctrl),
            'curveType': self._config.type.value,
            'degree': self._config.degree,
            'resolution': self._config.resolution,
        }


__all__ = ['CurveType', 'CurveConfig', 'Curve2D', 'MIN_DEGREE', 'MIN_RESOLUTION']

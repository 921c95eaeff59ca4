"""YAML job files.

A job names a set of control points together with the curve and
revolution settings to apply to them, and the formats to export::

    name: vase
    curve:
      type: bspline
      degree: 3
      resolution: 100
      points: [[1.0, 0.0], [1.5, 1.0], [0.8, 2.0], [1.2, 3.0]]
    revolution:
      axis: y
      max_angle: 360
      subdivisions: 32
    output:
      formats: [obj, stl, json]

Every section is optional.  Numeric settings go through the same
clamping setters the interactive classes use, so out-of-range values
are corrected rather than rejected; structurally wrong content raises
:class:`~lathecad.errors.ConfigError`.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from lathecad.curve import Curve2D, CurveConfig, CurveType
from lathecad.errors import ConfigError
from lathecad.revolve import Axis, Revolution3D, RevolutionConfig
from lathecad.vec import Vec2, point2

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ('obj', 'stl', 'json', 'dxf')
DEFAULT_FORMATS = ('obj',)


def _section(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key) or {}
    if not isinstance(value, Mapping):
        raise ConfigError(f'"{key}" must be a mapping')
    return value


def _name(raw: Any) -> str:
    # used as an output file stem
    name = str(raw).strip()
    if not name or name in ('.', '..') or '/' in name or '\\' in name:
        raise ConfigError(f'"name" must be a plain file stem, got {raw!r}')
    return name


def _points(raw: Any) -> List[Vec2]:
    if raw is None:
        return []
    if not isinstance(raw, (list, tuple)):
        raise ConfigError('"curve.points" must be a list of [x, y] pairs')
    try:
        return [point2(p) for p in raw]
    except (TypeError, ValueError, KeyError) as exc:
        raise ConfigError(f'bad control point in "curve.points": {exc}') from exc


def _number(section: Mapping[str, Any], key: str, default, kind):
    value = section.get(key, default)
    try:
        return kind(value)
    except (TypeError, ValueError, OverflowError) as exc:
        raise ConfigError(f'"{key}" must be a finite number, got {value!r}') from exc


@dataclass
class LatheJob:
    """A parsed job file."""

    name: str = 'surface'
    points: List[Vec2] = field(default_factory=list)
    curve: CurveConfig = field(default_factory=CurveConfig)
    revolution: RevolutionConfig = field(default_factory=RevolutionConfig)
    formats: Tuple[str, ...] = DEFAULT_FORMATS

    @classmethod
    def from_dict(cls, data: Any) -> 'LatheJob':
        if data is None:
            data = {}
        if not isinstance(data, Mapping):
            raise ConfigError('job document must be a mapping')

        curve = _section(data, 'curve')
        rev = _section(data, 'revolution')
        output = _section(data, 'output')

        try:
            ctype = CurveType.parse(curve.get('type', CurveType.BEZIER))
            axis = Axis.parse(rev.get('axis', Axis.Y))
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc

        formats = output.get('formats', list(DEFAULT_FORMATS))
        if isinstance(formats, str):
            formats = [formats]
        formats = tuple(str(f).lower() for f in formats)
        unknown = [f for f in formats if f not in EXPORT_FORMATS]
        if unknown:
            raise ConfigError(f'unknown output format(s): {", ".join(unknown)}')

        return cls(
            name=_name(data.get('name', 'surface')),
            points=_points(curve.get('points')),
            curve=CurveConfig(
                ctype,
                _number(curve, 'degree', 3, int),
                _number(curve, 'resolution', 100, int),
            ),
            revolution=RevolutionConfig(
                axis,
                _number(rev, 'max_angle', 360.0, float),
                _number(rev, 'subdivisions', 32, int),
            ),
            formats=formats,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'curve': {
                'type': self.curve.type.value,
                'degree': self.curve.degree,
                'resolution': self.curve.resolution,
                'points': [[x, y] for x, y in self.points],
            },
            'revolution': {
                'axis': self.revolution.axis.value,
                'max_angle': self.revolution.max_angle,
                'subdivisions': self.revolution.subdivisions,
            },
            'output': {
                'formats': list(self.formats),
            },
        }

    def build(self) -> Tuple[Curve2D, Revolution3D]:
        """Return a curve and a mesher configured from this job.

        The mesher's profile is the sampled curve; the surface itself is
        not generated yet.
        """

        curve = Curve2D(self.points, self.curve)
        rev = Revolution3D(curve.generate_curve(), self.revolution)
        return curve, rev

    def parameters(self) -> Dict[str, Any]:
        """Generation settings in the form recorded by the JSON exporter."""

        curve, rev = Curve2D(config=self.curve), Revolution3D(config=self.revolution)
        return {
            'curveType': curve.curve_type.value,
            'degree': curve.degree,
            'resolution': curve.resolution,
            'axis': rev.axis.value,
            'maxAngle': rev.max_angle,
            'subdivisions': rev.subdivisions,
        }


def load_job(path: Path | str) -> LatheJob:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f'job file not found: {path}')
    try:
        with path.open('r', encoding='utf-8') as fp:
            data = yaml.safe_load(fp)
    except (yaml.YAMLError, UnicodeDecodeError) as exc:
        raise ConfigError(f'could not parse {path}: {exc}') from exc
    except OSError as exc:
        raise ConfigError(f'could not read {path}: {exc}') from exc
    job = LatheJob.from_dict(data)
    logger.debug('loaded job %r from %s', job.name, path)
    return job


def save_job(job: LatheJob, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open('w', encoding='utf-8') as fp:
        yaml.safe_dump(job.to_dict(), fp, sort_keys=False)


__all__ = ['EXPORT_FORMATS', 'LatheJob', 'load_job', 'save_job']

"""JSON export of revolution surfaces.

The document carries three sections: ``metadata`` (format, counts and
a UTC timestamp), ``parameters`` (the curve and revolution settings the
mesh was generated with) and ``geometry`` (vertices, faces and normals
with coordinates rounded to six decimals).
"""

from __future__ import annotations

import datetime as _dt
import json
from enum import Enum
from typing import Any, Dict, Mapping, Optional

from lathecad import __version__ as _lathecad_version
from lathecad.errors import ExportError
from lathecad.io._streams import output_stream
from lathecad.mesh import Mesh

FORMAT_NAME = 'Revolution Surface Geometry'
FORMAT_VERSION = '1.0'
GENERATOR = 'latheCAD'

DEFAULT_PARAMETERS: Dict[str, Any] = {
    'curveType': 'unknown',
    'degree': 3,
    'axis': 'y',
    'maxAngle': 360,
    'subdivisions': 32,
    'resolution': 100,
}


def _now_iso() -> str:
    return _dt.datetime.now(_dt.timezone.utc).isoformat()


def _round_vec(vec) -> list:
    return [round(float(c), 6) + 0.0 for c in vec]


def _plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def geometry_to_json(mesh: Mesh, parameters: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """Return the JSON document for ``mesh`` as a dictionary.

    ``parameters`` override the entries of :data:`DEFAULT_PARAMETERS`;
    keys not listed there are carried through unchanged.
    """

    if mesh.is_empty():
        raise ExportError('no geometry to export')

    params = dict(DEFAULT_PARAMETERS)
    for key, value in (parameters or {}).items():
        params[key] = _plain(value)

    return {
        'metadata': {
            'format': FORMAT_NAME,
            'version': FORMAT_VERSION,
            'generator': f'{GENERATOR} {_lathecad_version}',
            'timestamp': _now_iso(),
            'vertexCount': mesh.vertex_count,
            'faceCount': mesh.face_count,
            'normalCount': len(mesh.normals),
        },
        'parameters': params,
        'geometry': {
            'vertices': [_round_vec(v) for v in mesh.vertices],
            'faces': [[int(i) for i in f] for f in mesh.faces],
            'normals': [_round_vec(n) for n in mesh.normals],
        },
    }


def format_json(mesh: Mesh, parameters: Optional[Mapping[str, Any]] = None) -> str:
    return json.dumps(geometry_to_json(mesh, parameters), indent=2)


def write_json(mesh: Mesh, path_or_file, parameters: Optional[Mapping[str, Any]] = None) -> None:
    text = format_json(mesh, parameters)
    with output_stream(path_or_file, 'w') as stream:
        stream.write(text)
        stream.write('\n')


__all__ = [
    'FORMAT_NAME',
    'FORMAT_VERSION',
    'DEFAULT_PARAMETERS',
    'geometry_to_json',
    'format_json',
    'write_json',
]

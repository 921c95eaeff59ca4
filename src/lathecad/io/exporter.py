"""Stateful exporter holding one mesh at a time."""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional, Sequence

from lathecad.errors import ExportError
from lathecad.io._streams import output_stream
from lathecad.io.geometry_json import format_json
from lathecad.io.obj import format_obj
from lathecad.io.stl import DEFAULT_NAME, format_stl, write_stl
from lathecad.mesh import Mesh

logger = logging.getLogger(__name__)

FORMATS = ('obj', 'stl', 'json')


class GeometryExporter:
    """Turn a mesh into OBJ, STL or JSON text.

    Geometry is set once with :meth:`set_geometry` (or built with
    :meth:`from_mesh`) and may then be exported in any number of
    formats.  All export methods raise :class:`ExportError` while no
    geometry, or geometry without vertices, is set.
    """

    def __init__(self):
        self._mesh: Optional[Mesh] = None

    @classmethod
    def from_mesh(cls, mesh: Mesh) -> 'GeometryExporter':
        exporter = cls()
        exporter._mesh = mesh
        return exporter

    def set_geometry(self, vertices: Sequence, faces: Sequence, normals: Sequence = ()) -> None:
        """Replace the held geometry; faces must index existing vertices."""

        try:
            self._mesh = Mesh.from_lists(
                () if vertices is None else vertices,
                () if faces is None else faces,
                () if normals is None else normals,
            )
        except (TypeError, ValueError, KeyError, IndexError) as exc:
            raise ExportError(f'invalid geometry: {exc}') from exc

    def _require(self) -> Mesh:
        if self._mesh is None or self._mesh.is_empty():
            raise ExportError('no geometry set for export')
        return self._mesh

    def export_obj(self) -> str:
        return format_obj(self._require())

    def export_stl(self, name: str = DEFAULT_NAME) -> str:
        return format_stl(self._require(), name)

    def export_json(self, parameters: Optional[Mapping[str, Any]] = None) -> str:
        return format_json(self._require(), parameters)

    def write(self, fmt: str, path_or_file, *, binary: bool = False,
              parameters: Optional[Mapping[str, Any]] = None) -> None:
        """Write the geometry in ``fmt`` to a path or an open stream.

        ``binary`` only applies to STL; ``parameters`` only to JSON.
        """

        fmt = fmt.lower()
        mesh = self._require()
        if fmt == 'stl' and binary:
            write_stl(mesh, path_or_file, binary=True)
        else:
            if fmt == 'obj':
                text = format_obj(mesh)
            elif fmt == 'stl':
                text = format_stl(mesh)
            elif fmt == 'json':
                text = format_json(mesh, parameters) + '\n'
            else:
                raise ExportError(f'unsupported export format: {fmt!r}')
            with output_stream(path_or_file, 'w') as stream:
                stream.write(text)
        logger.info('exported %d faces as %s', mesh.face_count, fmt)

    def get_geometry_info(self) -> Optional[Dict[str, Any]]:
        if self._mesh is None:
            return None
        return {
            'vertices': self._mesh.vertex_count,
            'faces': self._mesh.face_count,
            'normals': len(self._mesh.normals),
            'hasNormals': bool(self._mesh.normals),
        }


__all__ = ['FORMATS', 'GeometryExporter']

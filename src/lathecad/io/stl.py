"""STL export for latheCAD meshes.

Facet normals are recomputed from each triangle's vertices; the stored
per-vertex normals are smoothed and do not belong in an STL facet.
"""

from __future__ import annotations

import struct
from typing import List

from lathecad.errors import ExportError
from lathecad.io._streams import fixed6, output_stream
from lathecad.mesh import Mesh, mesh_view

DEFAULT_NAME = 'RevolutionSurface'

_HEADER_SIZE = 80
_STRUCT_TRIANGLE = struct.Struct('<12fH')


def _vertex_line(indent: str, keyword: str, v) -> str:
    return f'{indent}{keyword} {fixed6(v[0])} {fixed6(v[1])} {fixed6(v[2])}'


def format_stl(mesh: Mesh, name: str = DEFAULT_NAME) -> str:
    """Return ``mesh`` as ASCII STL text."""

    if mesh.is_empty():
        raise ExportError('no geometry to export')

    lines: List[str] = [f'solid {name}']
    for normal, v0, v1, v2 in mesh_view(mesh):
        lines.append(_vertex_line('  ', 'facet normal', normal))
        lines.append('    outer loop')
        lines.append(_vertex_line('      ', 'vertex', v0))
        lines.append(_vertex_line('      ', 'vertex', v1))
        lines.append(_vertex_line('      ', 'vertex', v2))
        lines.append('    endloop')
        lines.append('  endfacet')
    lines.append(f'endsolid {name}')
    return '\n'.join(lines) + '\n'


def write_stl(mesh: Mesh, path_or_file, *, binary: bool = False, name: str = DEFAULT_NAME) -> None:
    """Write ``mesh`` as STL.

    ``path_or_file`` can be a filesystem path or an open stream; binary
    output needs a binary stream.
    """

    if binary:
        _write_binary(mesh, path_or_file, name)
    else:
        text = format_stl(mesh, name)
        with output_stream(path_or_file, 'w', encoding='ascii') as stream:
            stream.write(text)


def _write_binary(mesh: Mesh, path_or_file, name: str) -> None:
    if mesh.is_empty():
        raise ExportError('no geometry to export')

    with output_stream(path_or_file, 'wb') as stream:
        header = (name[:_HEADER_SIZE]).encode('ascii', errors='replace')
        header = header.ljust(_HEADER_SIZE, b' ')
        stream.write(header)
        stream.write(struct.pack('<I', mesh.face_count))

        for normal, v0, v1, v2 in mesh_view(mesh):
            stream.write(_STRUCT_TRIANGLE.pack(*normal, *v0, *v1, *v2, 0))


__all__ = ['DEFAULT_NAME', 'format_stl', 'write_stl']

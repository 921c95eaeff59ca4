"""Wavefront OBJ export for latheCAD meshes."""

from __future__ import annotations

from typing import List

from lathecad.errors import ExportError
from lathecad.io._streams import fixed6, output_stream
from lathecad.mesh import Mesh


def format_obj(mesh: Mesh) -> str:
    """Return ``mesh`` as OBJ text.

    Faces use 1-based indices; when normals are present each face corner
    references the normal with the same index as its vertex (``f a//a``).
    """

    if mesh.is_empty():
        raise ExportError('no geometry to export')

    lines: List[str] = [
        '# OBJ file generated by latheCAD',
        '# Surface of revolution',
        '',
        '# Vertices',
    ]
    for v in mesh.vertices:
        lines.append(f'v {fixed6(v[0])} {fixed6(v[1])} {fixed6(v[2])}')

    if mesh.normals:
        lines.append('')
        lines.append('# Vertex normals')
        for n in mesh.normals:
            lines.append(f'vn {fixed6(n[0])} {fixed6(n[1])} {fixed6(n[2])}')

    lines.append('')
    lines.append('# Faces')
    for face in mesh.faces:
        a, b, c = (idx + 1 for idx in face)
        if mesh.normals:
            lines.append(f'f {a}//{a} {b}//{b} {c}//{c}')
        else:
            lines.append(f'f {a} {b} {c}')

    return '\n'.join(lines) + '\n'


def write_obj(mesh: Mesh, path_or_file) -> None:
    """Write ``mesh`` as OBJ to a path or an open text stream."""

    text = format_obj(mesh)
    with output_stream(path_or_file, 'w') as stream:
        stream.write(text)


__all__ = ['format_obj', 'write_obj']

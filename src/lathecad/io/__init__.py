"""I/O utilities for latheCAD."""

from .exporter import FORMATS, GeometryExporter
from .geometry_json import write_json
from .obj import write_obj
from .stl import write_stl

__all__ = ['FORMATS', 'GeometryExporter', 'write_json', 'write_obj', 'write_stl']

"""DXF export of 2D profiles.

Writes the sampled profile as an open polyline and, optionally, the
control polygon it was generated from, so the sketch can be reopened in
a 2D CAD package.
"""

from __future__ import annotations

from typing import Iterable, Optional

import ezdxf

from lathecad.errors import ExportError
from lathecad.vec import point2

PROFILE_LAYER = 'PROFILE'
CONTROL_LAYER = 'CONTROL'


def profile_document(profile: Iterable, control_points: Optional[Iterable] = None):
    """Return an ezdxf document holding ``profile`` (and the control polygon)."""

    coords = [point2(p) for p in profile]
    if not coords:
        raise ExportError('no profile to export')

    doc = ezdxf.new('R2010')
    msp = doc.modelspace()
    doc.layers.add(name=PROFILE_LAYER, color=5)
    if len(coords) == 1:
        msp.add_point(coords[0], dxfattribs={'layer': PROFILE_LAYER})
    else:
        msp.add_lwpolyline(coords, format='xy', close=False, dxfattribs={'layer': PROFILE_LAYER})

    if control_points is not None:
        ctrl = [point2(p) for p in control_points]
        doc.layers.add(name=CONTROL_LAYER, color=1)
        for p in ctrl:
            msp.add_point(p, dxfattribs={'layer': CONTROL_LAYER})
        if len(ctrl) > 1:
            msp.add_lwpolyline(ctrl, format='xy', close=False, dxfattribs={'layer': CONTROL_LAYER})
    return doc


def write_profile_dxf(profile: Iterable, path, control_points: Optional[Iterable] = None) -> None:
    """Save ``profile`` to the DXF file at ``path``."""

    doc = profile_document(profile, control_points)
    doc.saveas(path)


__all__ = ['PROFILE_LAYER', 'CONTROL_LAYER', 'profile_document', 'write_profile_dxf']

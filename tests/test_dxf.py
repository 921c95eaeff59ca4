import ezdxf
import pytest

from lathecad.curve import Curve2D
from lathecad.errors import ExportError
from lathecad.io.dxf import CONTROL_LAYER, PROFILE_LAYER, write_profile_dxf


def test_profile_dxf_output(tmp_path):
    curve = Curve2D([(1, 0), (2, 1), (0.5, 2), (1, 3)])
    curve.set_resolution(20)
    profile = curve.generate_curve()

    path = tmp_path / 'profile.dxf'
    write_profile_dxf(profile, path, control_points=curve.control_points)
    assert path.exists() and path.stat().st_size > 0

    doc = ezdxf.readfile(path)
    msp = doc.modelspace()
    profiles = list(msp.query(f'LWPOLYLINE[layer=="{PROFILE_LAYER}"]'))
    assert len(profiles) == 1
    assert len(profiles[0]) == 21
    assert not profiles[0].closed

    controls = list(msp.query(f'LWPOLYLINE[layer=="{CONTROL_LAYER}"]'))
    assert len(controls) == 1
    assert len(controls[0]) == 4
    assert len(list(msp.query(f'POINT[layer=="{CONTROL_LAYER}"]'))) == 4


def test_profile_dxf_without_control_polygon(tmp_path):
    path = tmp_path / 'bare.dxf'
    write_profile_dxf([(1, 0), (1, 1)], path)
    doc = ezdxf.readfile(path)
    assert not list(doc.modelspace().query(f'*[layer=="{CONTROL_LAYER}"]'))


def test_empty_profile_is_refused(tmp_path):
    with pytest.raises(ExportError):
        write_profile_dxf([], tmp_path / 'empty.dxf')

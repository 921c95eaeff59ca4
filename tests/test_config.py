import textwrap

import pytest

from lathecad.config import LatheJob, load_job, save_job
from lathecad.curve import CurveConfig, CurveType
from lathecad.errors import ConfigError
from lathecad.revolve import Axis, RevolutionConfig

JOB = textwrap.dedent("""\
    name: vase
    curve:
      type: bspline
      degree: 3
      resolution: 40
      points: [[1.0, 0.0], [1.5, 1.0], [0.8, 2.0], [1.2, 3.0]]
    revolution:
      axis: z
      max_angle: 270
      subdivisions: 24
    output:
      formats: [obj, json]
    """)


def _write(tmp_path, text, name='job.yaml'):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_load_job(tmp_path):
    job = load_job(_write(tmp_path, JOB))
    assert job.name == 'vase'
    assert job.points == [(1.0, 0.0), (1.5, 1.0), (0.8, 2.0), (1.2, 3.0)]
    assert job.curve == CurveConfig(CurveType.BSPLINE, 3, 40)
    assert job.revolution == RevolutionConfig(Axis.Z, 270.0, 24)
    assert job.formats == ('obj', 'json')


def test_defaults_for_missing_sections(tmp_path):
    job = load_job(_write(tmp_path, 'name: bare\n'))
    assert job.points == []
    assert job.curve == CurveConfig()
    assert job.revolution == RevolutionConfig()
    assert job.formats == ('obj',)


def test_empty_document(tmp_path):
    job = load_job(_write(tmp_path, ''))
    assert job.name == 'surface'


def test_build_clamps_settings():
    job = LatheJob.from_dict({
        'curve': {'degree': 0, 'resolution': 2, 'points': [[1, 0], [1, 1]]},
        'revolution': {'max_angle': 500, 'subdivisions': 2},
    })
    curve, rev = job.build()
    assert curve.degree == 1
    assert curve.resolution == 10
    assert rev.max_angle == 360.0
    assert rev.subdivisions == 8
    assert len(rev.profile) == 11
    assert rev.vertices == ()

    rev.generate_surface()
    assert len(rev.vertices) == 9 * 11


def test_parameters_reflect_clamped_settings():
    job = LatheJob.from_dict({'curve': {'type': 'BSPLINE', 'degree': -2},
                              'revolution': {'axis': 'X', 'subdivisions': 1000}})
    assert job.parameters() == {
        'curveType': 'bspline',
        'degree': 1,
        'resolution': 100,
        'axis': 'x',
        'maxAngle': 360.0,
        'subdivisions': 360,
    }


@pytest.mark.parametrize('data', [
    ['not', 'a', 'mapping'],
    {'curve': 'bezier'},
    {'curve': {'type': 'nurbs'}},
    {'revolution': {'axis': 'w'}},
    {'revolution': {'subdivisions': 'many'}},
    {'curve': {'points': 'abc'}},
    {'curve': {'points': [[1.0]]}},
    {'output': {'formats': ['obj', 'ply']}},
    {'revolution': {'subdivisions': float('inf')}},
    {'curve': {'degree': float('inf')}},
    {'curve': {'resolution': float('nan')}},
    {'name': '../../x'},
    {'name': 'out/vase'},
    {'name': 'out\\vase'},
    {'name': '..'},
    {'name': '  '},
])
def test_bad_content_raises(data):
    with pytest.raises(ConfigError):
        LatheJob.from_dict(data)


def test_unparseable_yaml(tmp_path):
    with pytest.raises(ConfigError):
        load_job(_write(tmp_path, 'curve: [1, 2\n'))


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_job(tmp_path / 'nope.yaml')


def test_save_and_reload(tmp_path):
    job = load_job(_write(tmp_path, JOB))
    target = tmp_path / 'copy' / 'job.yaml'
    save_job(job, target)
    assert load_job(target) == job


def test_single_format_string():
    job = LatheJob.from_dict({'output': {'formats': 'STL'}})
    assert job.formats == ('stl',)


def test_infinite_subdivisions_in_file(tmp_path):
    path = _write(tmp_path, 'revolution:\n  subdivisions: .inf\n')
    with pytest.raises(ConfigError, match='subdivisions'):
        load_job(path)


def test_non_utf8_file(tmp_path):
    path = tmp_path / 'job.yaml'
    path.write_bytes(b'name: \xff\xfe\n')
    with pytest.raises(ConfigError, match='could not parse'):
        load_job(path)


def test_directory_instead_of_file(tmp_path):
    with pytest.raises(ConfigError, match='could not read'):
        load_job(tmp_path)


def test_name_is_kept_as_file_stem():
    assert LatheJob.from_dict({'name': ' vase..v2 '}).name == 'vase..v2'

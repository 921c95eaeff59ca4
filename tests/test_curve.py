import pytest

from lathecad.curve import Curve2D, CurveConfig, CurveType


def _close(a, b, tol=1e-9):
    assert abs(a[0] - b[0]) <= tol and abs(a[1] - b[1]) <= tol, (a, b)


def _curve(points, curve_type='bezier', degree=3):
    c = Curve2D()
    c.set_control_points(points)
    c.set_curve_type(curve_type)
    c.set_degree(degree)
    return c


def test_single_point_is_returned_unchanged():
    for kind in ('bezier', 'bspline'):
        c = _curve([(3.0, -2.0)], kind)
        for i in range(11):
            t = i / 10
            assert c.evaluate_bezier(t) == (3.0, -2.0)
            assert c.evaluate_bspline(t) == (3.0, -2.0)


def test_no_points_evaluates_to_none():
    c = Curve2D()
    assert c.evaluate_bezier(0.5) is None
    assert c.evaluate_bspline(0.5) is None
    assert c.generate_curve() == []


def test_linear_bezier():
    p0, p1 = (1.0, 2.0), (5.0, -2.0)
    c = _curve([p0, p1])
    for t in (0.0, 0.25, 0.5, 1.0):
        expected = ((1 - t) * p0[0] + t * p1[0], (1 - t) * p0[1] + t * p1[1])
        _close(c.evaluate_bezier(t), expected)


def test_quadratic_bezier_midpoint():
    p0, p1, p2 = (0.0, 0.0), (2.0, 4.0), (4.0, 0.0)
    c = _curve([p0, p1, p2])
    expected = (
        0.25 * p0[0] + 0.5 * p1[0] + 0.25 * p2[0],
        0.25 * p0[1] + 0.5 * p1[1] + 0.25 * p2[1],
    )
    _close(c.evaluate_bezier(0.5), expected)


def test_basis_function_is_available_on_the_class():
    knots = [0.0, 0.0, 1.0, 1.0]
    assert Curve2D.basis_function(0, 1, 0.25, knots) == pytest.approx(0.75)
    assert Curve2D().basis_function(1, 1, 0.25, knots) == pytest.approx(0.25)


@pytest.mark.parametrize('kind', ['bezier', 'bspline'])
def test_generate_curve_sample_count(kind):
    c = _curve([(0, 0), (1, 2), (2, -1), (3, 0), (4, 1)], kind)
    c.set_resolution(37)
    pts = c.generate_curve()
    assert len(pts) == 38
    _close(pts[0], (0.0, 0.0))
    _close(pts[-1], (4.0, 1.0))


def test_generate_curve_is_repeatable():
    c = _curve([(0, 0), (1, 2), (2, -1), (3, 0)], 'bspline', 2)
    assert c.generate_curve() == c.generate_curve()


def test_set_control_points_copies():
    src = [[0.0, 0.0], [1.0, 1.0]]
    c = Curve2D()
    c.set_control_points(src)
    src[0][0] = 99.0
    src.append([5.0, 5.0])
    assert c.control_points == ((0.0, 0.0), (1.0, 1.0))


def test_set_control_points_accepts_mappings():
    c = Curve2D()
    c.set_control_points([{'x': 1, 'y': 2}, {'x': 3.5, 'y': -1}])
    assert c.control_points == ((1.0, 2.0), (3.5, -1.0))


def test_point_editing():
    c = Curve2D()
    c.add_control_point(0, 0)
    c.add_control_point(2, 2)
    c.insert_control_point(1, 1, 5)
    assert c.control_points == ((0.0, 0.0), (1.0, 5.0), (2.0, 2.0))
    c.update_control_point(1, 1, 1)
    assert c.control_points[1] == (1.0, 1.0)
    c.remove_control_point(0)
    assert c.control_points == ((1.0, 1.0), (2.0, 2.0))
    c.insert_control_point(2, 3, 3)
    assert c.control_points[-1] == (3.0, 3.0)


def test_invalid_indices_are_ignored():
    c = Curve2D([(0, 0), (1, 1)])
    before = c.control_points
    c.remove_control_point(2)
    c.remove_control_point(-1)
    c.update_control_point(5, 9, 9)
    c.update_control_point(-1, 9, 9)
    c.insert_control_point(3, 9, 9)
    c.insert_control_point(-1, 9, 9)
    assert c.control_points == before


def test_setters_clamp():
    c = Curve2D()
    c.set_degree(0)
    assert c.degree == 1
    c.set_degree(-4)
    assert c.degree == 1
    c.set_degree(5)
    assert c.degree == 5
    c.set_resolution(3)
    assert c.resolution == 10
    c.set_resolution(250)
    assert c.resolution == 250


def test_curve_type_parsing():
    c = Curve2D()
    c.set_curve_type('BSpline')
    assert c.curve_type is CurveType.BSPLINE
    c.set_curve_type(CurveType.BEZIER)
    assert c.curve_type is CurveType.BEZIER
    with pytest.raises(ValueError):
        c.set_curve_type('nurbs')


def test_config_round_trip_and_clamp():
    c = Curve2D(config=CurveConfig(CurveType.BSPLINE, 0, 2))
    assert c.config == CurveConfig(CurveType.BSPLINE, 1, 10)


def test_get_info():
    c = Curve2D([(0, 0), (1, 1), (2, 0)])
    c.set_curve_type('bspline')
    c.set_degree(2)
    c.set_resolution(50)
    assert c.get_info() == {
        'controlPoints': 3,
        'curveType': 'bspline',
        'degree': 2,
        'resolution': 50,
    }


def test_bspline_degree_above_point_count_is_reduced():
    pts = [(0.0, 0.0), (1.0, 3.0), (2.0, 0.0)]
    spline = _curve(pts, 'bspline', 7)
    bezier = _curve(pts, 'bezier')
    for a, b in zip(spline.generate_curve(), bezier.generate_curve()):
        _close(a, b, tol=1e-12)

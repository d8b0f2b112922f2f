import pytest

from commonkit.geometry import lerp, make_lerp, straight_line_equation


def test_lerp_midpoint():
    assert lerp((0, 0), (10, 20), 0.5) == pytest.approx((5.0, 10.0))

def test_lerp_endpoints():
    assert lerp((1, 2, 3), (4, 5, 6), 0) == (1.0, 2.0, 3.0)
    assert lerp((1, 2, 3), (4, 5, 6), 1) == (4.0, 5.0, 6.0)

def test_lerp_returns_python_floats():
    point = lerp([0, 0], [1, 1], 0.25)
    assert isinstance(point, tuple)
    assert all(type(v) is float for v in point)

def test_lerp_dimension_mismatch():
    with pytest.raises(ValueError):
        lerp((0, 0), (1, 1, 1), 0.5)

@pytest.mark.parametrize("t", [0.0, 0.1, 0.33, 0.5, 0.9, 1.0])
def test_make_lerp_matches_lerp(t):
    p1, p2 = (2.5, -1.0), (7.0, 4.0)
    assert make_lerp(p1, p2)(t) == pytest.approx(lerp(p1, p2, t))

def test_straight_line_equation():
    line = straight_line_equation((0, 1), (2, 5))
    assert line(0) == pytest.approx(1.0)
    assert line(1) == pytest.approx(3.0)
    assert line(-1) == pytest.approx(-1.0)

def test_straight_line_equation_horizontal():
    line = straight_line_equation((1, 4), (9, 4))
    assert line(100) == pytest.approx(4.0)

from commonkit.conversions.to_hsv import hsl_to_hsv, np_hsl_to_hsv, unit_rgb_to_hsv, np_unit_rgb_to_hsv
import numpy as np
from ..samples import samples_hsl_hsv, samples_rgb_hsv

def test_hsl_to_hsv():
    for (h, s, l), (h_exp, s_exp, v_exp) in samples_hsl_hsv.items():
        h_out, s_out, v_out = hsl_to_hsv(h, s, l)

        assert abs(h_out - h_exp) < 1/360
        assert abs(float(s_out) - s_exp) < 1/255
        assert abs(float(v_out) - v_exp) < 1/255

def test_hsl_to_hsv_numpy():
    the_matrix = np.array(list(samples_hsl_hsv.keys()))
    expected = np.array(list(samples_hsl_hsv.values()))
    result = np_hsl_to_hsv(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(result, expected, atol=1/360)

def test_unit_rgb_to_hsv():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsv.items():
        h_out, s_out, v_out = unit_rgb_to_hsv(r, g, b)

        assert abs(h_out - h_exp) < .5
        assert abs(float(s_out) - s_exp) < 1/255
        assert abs(float(v_out) - v_exp) < 1/255

def test_unit_rgb_to_hsv_numpy():
    the_matrix = np.array(list(samples_rgb_hsv.keys()))
    expected = np.array(list(samples_rgb_hsv.values()))
    r, g, b = the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2]
    hsv = np_unit_rgb_to_hsv(r, g, b)

    assert np.allclose(hsv[..., 0], expected[..., 0], atol=0.5)
    assert np.allclose(hsv[..., 1], expected[..., 1], atol=1/255)
    assert np.allclose(hsv[..., 2], expected[..., 2], atol=1/255)

def test_unit_rgb_to_hsv_numpy_broadcasts_scalars():
    hsv = np_unit_rgb_to_hsv(np.array([1.0, 0.0]), 0.0, 0.0)
    assert hsv.shape == (2, 3)
    assert np.allclose(hsv, [[0.0, 1.0, 1.0], [0.0, 0.0, 0.0]])

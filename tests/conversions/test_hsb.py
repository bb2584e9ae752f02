from colorterp.conversions import unit_rgb_to_hsb, np_unit_rgb_to_hsb, hsb_to_unit_rgb, np_hsb_to_unit_rgb
from samples import samples_rgb_hsb, samples_hsb_rgb
import numpy as np
import pytest

tolerance = 1e-9


def test_unit_rgb_to_hsb():
    for (r, g, b), (h_exp, s_exp, v_exp) in samples_rgb_hsb.items():
        h, s, v = unit_rgb_to_hsb(r, g, b)

        assert abs(h - h_exp) < 1e-6
        assert abs(s - s_exp) < tolerance
        assert abs(v - v_exp) < tolerance


def test_unit_rgb_to_hsb_numpy():
    the_matrix = np.array(list(samples_rgb_hsb.keys()))
    expected = np.array(list(samples_rgb_hsb.values()))
    hsb = np_unit_rgb_to_hsb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert hsb.shape == expected.shape
    assert np.allclose(hsb, expected, atol=1e-6)


def test_numpy_matches_scalar():
    for (r, g, b) in samples_rgb_hsb:
        scalar = unit_rgb_to_hsb(r, g, b)
        vector = np_unit_rgb_to_hsb(r, g, b)
        assert vector.shape == (3,)
        assert np.allclose(vector, scalar, atol=tolerance)


def test_hsb_to_unit_rgb():
    for (h, s, v), (r_exp, g_exp, b_exp) in samples_hsb_rgb.items():
        r, g, b = hsb_to_unit_rgb(h, s, v)

        assert abs(r - r_exp) < 1e-6
        assert abs(g - g_exp) < 1e-6
        assert abs(b - b_exp) < 1e-6


def test_hsb_to_unit_rgb_numpy():
    the_matrix = np.array(list(samples_hsb_rgb.keys()))
    expected = np.array(list(samples_hsb_rgb.values()))
    rgb = np_hsb_to_unit_rgb(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])

    assert np.allclose(rgb, expected, atol=1e-6)


@pytest.mark.parametrize("hue, expected", [
    (-120.0, (0.0, 0.0, 1.0)),
    (480.0, (0.0, 1.0, 0.0)),
    (840.0, (0.0, 1.0, 0.0)),
])
def test_hue_is_wrapped(hue, expected):
    assert np.allclose(hsb_to_unit_rgb(hue, 1.0, 1.0), expected, atol=1e-9)
    assert np.allclose(np_hsb_to_unit_rgb(hue, 1.0, 1.0), expected, atol=1e-9)


def test_zero_saturation_is_gray():
    assert hsb_to_unit_rgb(200.0, 0.0, 0.4) == (0.4, 0.4, 0.4)
    assert np.allclose(np_hsb_to_unit_rgb(200.0, 0.0, 0.4), (0.4, 0.4, 0.4))


def test_round_trip_rgb_hsb():
    for (r, g, b) in samples_rgb_hsb:
        h, s, v = unit_rgb_to_hsb(r, g, b)
        r_out, g_out, b_out = hsb_to_unit_rgb(h, s, v)

        assert abs(r - r_out) < 1e-9
        assert abs(g - g_out) < 1e-9
        assert abs(b - b_out) < 1e-9

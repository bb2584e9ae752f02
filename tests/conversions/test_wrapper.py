from colorterp.conversions import convert, normalize, scale
from colorterp.types.color_space import ColorSpace
from colorterp.errors import UnsupportedSpaceError
import numpy as np
import pytest


def test_convert_rgb_to_hsb():
    assert convert((255, 0, 0), "rgb", "hsb") == (0.0, 1.0, 1.0)


def test_convert_hsb_to_rgb():
    assert convert((120.0, 1.0, 1.0), "hsb", "rgb") == (0, 255, 0)
    assert convert((0.0, 0.0, 0.5, 0.5), "hsba", "rgba") == (128, 128, 128, 128)


def test_convert_rgb_to_srgb():
    r, g, b = convert((255, 51, 0), "rgb", "srgb")
    assert (r, g, b) == (1.0, 0.2, 0.0)


def test_convert_unknown_space():
    with pytest.raises(UnsupportedSpaceError):
        convert((0, 0, 0), "rgb", "cmyk")


def test_normalize_adds_opaque_alpha():
    unit = normalize(np.array([255, 0, 170]), ColorSpace.RGB)
    assert unit.shape == (4,)
    assert np.allclose(unit, [1.0, 0.0, 170 / 255, 1.0])


def test_normalize_rgba_alpha_is_unscaled():
    transparent = normalize(np.array([10, 20, 30, 0]), ColorSpace.RGBA)
    opaque = normalize(np.array([10, 20, 30, 128]), ColorSpace.RGBA)
    assert transparent[3] == 0.0
    assert opaque[3] == 1.0


def test_normalize_array():
    arr = np.array([[0, 0, 0], [255, 255, 255]])
    unit = normalize(arr, ColorSpace.RGB)
    assert unit.shape == (2, 4)
    assert np.allclose(unit, [[0, 0, 0, 1], [1, 1, 1, 1]])


def test_normalize_wrong_channel_count():
    with pytest.raises(ValueError):
        normalize(np.array([1, 2, 3, 4]), ColorSpace.RGB)


def test_scale_alpha_per_space():
    unit = np.array([1.0, 0.0, 0.0, 0.5])
    assert scale(unit, ColorSpace.RGBA).tolist() == [255.0, 0.0, 0.0, 128.0]
    assert scale(unit, ColorSpace.SRGBA).tolist() == [1.0, 0.0, 0.0, 0.5]
    assert scale(unit, ColorSpace.WEBA).tolist() == [255.0, 0.0, 0.0, 0.5]
    assert scale(unit, ColorSpace.HSBA).tolist() == [0.0, 1.0, 1.0, 0.5]
    assert scale(unit, ColorSpace.HEX).tolist() == [255.0, 0.0, 0.0]


def test_normalize_clamps_alpha_array():
    unit = normalize(np.array([[0, 0, 0, 0], [0, 0, 0, 255]]), ColorSpace.RGBA)
    assert unit[:, 3].tolist() == [0.0, 1.0]

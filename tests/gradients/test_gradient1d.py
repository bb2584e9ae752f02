from colorterp.colors import Color
from colorterp.formatting import format_colors
from colorterp.gradients import Gradient1D, compute_fractions
from colorterp.types.options import GrayscaleMode, Modifier, Spacing
import numpy as np
import pytest

BLACK = Color.rgb(0, 0, 0)
WHITE = Color.rgb(255, 255, 255)


def _gradient(start, end, points, spacing=Spacing.INCLUSIVE, include_start=False):
    return Gradient1D.from_colors(start, end, compute_fractions(points, spacing, include_start))


def test_black_to_white_inclusive():
    gradient = _gradient(BLACK, WHITE, 4)
    assert gradient.shape == (4, 4)
    assert format_colors(gradient, "rgb") == [
        "64 64 64", "128 128 128", "191 191 191", "255 255 255",
    ]


def test_black_to_white_interior():
    gradient = _gradient(BLACK, WHITE, 4, Spacing.INTERIOR)
    assert format_colors(gradient, "rgb") == [
        "51 51 51", "102 102 102", "153 153 153", "204 204 204",
    ]


def test_single_point_is_end_color():
    assert format_colors(_gradient(BLACK, WHITE, 1), "rgb") == ["255 255 255"]
    assert format_colors(_gradient(BLACK, WHITE, 2), "rgb") == ["128 128 128", "255 255 255"]


def test_include_start_reports_start_first():
    gradient = _gradient(Color.rgb(197, 115, 47), WHITE, 2, include_start=True)
    assert len(gradient) == 3
    assert gradient[0] == Color.rgb(197, 115, 47)
    assert gradient[-1] == WHITE


def test_identical_endpoints():
    color = Color.rgb(197, 115, 47, 0.5)
    gradient = _gradient(color, color, 5, Spacing.INTERIOR)
    assert all(c == color for c in gradient)
    modified = gradient.apply(Modifier.DARKER)
    assert all(c == color.darker() for c in modified)


def test_alpha_is_interpolated():
    start = Color.rgb(255, 0, 0, 0.0)
    end = Color.rgb(255, 0, 0, 1.0)
    gradient = _gradient(start, end, 4)
    assert np.allclose(gradient.opacity, [0.25, 0.5, 0.75, 1.0])


def test_apply_order_modifier_invert_grayscale():
    gradient = _gradient(Color.rgb(197, 115, 47), Color.rgb(5, 37, 249), 3)
    applied = gradient.apply(Modifier.BRIGHTER, invert=True, grayscale=True)
    expected = [c.brighter().invert().grayscale() for c in gradient]
    assert list(applied) == expected


def test_apply_without_options_is_identity():
    gradient = _gradient(BLACK, WHITE, 3)
    assert gradient.apply() == gradient
    assert gradient.apply("") == gradient


def test_grayscale_yields_gray():
    gradient = _gradient(Color.rgb(197, 115, 47), Color.rgb(5, 37, 249), 6).apply(grayscale=True)
    value = gradient.value
    assert np.array_equal(value[:, 0], value[:, 1])
    assert np.array_equal(value[:, 1], value[:, 2])


def test_legacy_grayscale_warns_and_reinverts():
    gradient = _gradient(Color.rgb(197, 115, 47), WHITE, 3)
    with pytest.warns(DeprecationWarning):
        legacy = gradient.apply(grayscale=True, grayscale_mode=GrayscaleMode.LEGACY_INVERT)
    assert format_colors(legacy, "rgb") == format_colors(gradient.apply(invert=True), "rgb")


def test_gradient_is_immutable():
    gradient = _gradient(BLACK, WHITE, 2)
    with pytest.raises(ValueError):
        gradient.value[0, 0] = 0.5
    with pytest.raises(AttributeError):
        gradient._value = None


def test_indexing_and_slicing():
    gradient = _gradient(BLACK, WHITE, 4)
    assert isinstance(gradient[0], Color)
    assert isinstance(gradient[1:3], Gradient1D)
    assert len(gradient[1:3]) == 2


def test_requires_two_dimensions():
    with pytest.raises(ValueError):
        Gradient1D((0.0, 0.0, 0.0, 1.0))
    with pytest.raises(ValueError):
        Gradient1D(np.zeros((2, 3)))


def test_from_colors_rejects_bad_fractions():
    with pytest.raises(ValueError):
        Gradient1D.from_colors(BLACK, WHITE, [])
    with pytest.raises(TypeError):
        Gradient1D.from_colors(Color(np.zeros((2, 4))), WHITE, [0.5])

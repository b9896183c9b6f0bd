import copy
import dataclasses

import pytest

from tideflow.filter import (
    Blur,
    Brightness,
    Contrast,
    Grayscale,
    HueRotation,
    Invert,
    Saturation,
)


def test_field_holds_given_value():
    assert Blur(0.75).radius == 0.75
    assert Brightness(0.75).amount == 0.75
    assert Contrast(0.75).amount == 0.75
    assert Saturation(0.75).amount == 0.75
    assert Grayscale(0.75).intensity == 0.75
    assert HueRotation(0.75).angle == 0.75
    assert Invert(0.75).intensity == 0.75


def test_keyword_construction_matches_positional():
    assert Blur(radius=2.5) == Blur(2.5)
    assert Brightness(amount=2.5) == Brightness(2.5)
    assert Contrast(amount=2.5) == Contrast(2.5)
    assert Saturation(amount=2.5) == Saturation(2.5)
    assert Grayscale(intensity=2.5) == Grayscale(2.5)
    assert HueRotation(angle=2.5) == HueRotation(2.5)
    assert Invert(intensity=2.5) == Invert(2.5)


def test_copy_is_equal_and_independent():
    pairs = [
        (Blur(1.0), "radius"),
        (Brightness(1.0), "amount"),
        (Contrast(1.0), "amount"),
        (Saturation(1.0), "amount"),
        (Grayscale(1.0), "intensity"),
        (HueRotation(1.0), "angle"),
        (Invert(1.0), "intensity"),
    ]
    for original, field in pairs:
        duplicate = copy.copy(original)
        assert duplicate == original
        setattr(duplicate, field, 3.0)
        assert getattr(original, field) == 1.0


def test_replace_changes_only_that_value():
    original = Blur(1.0)
    changed = dataclasses.replace(original, radius=4.0)
    assert changed.radius == 4.0
    assert original.radius == 1.0

    rotation = HueRotation(1.0)
    turned = dataclasses.replace(rotation, angle=4.0)
    assert turned.angle == 4.0
    assert rotation.angle == 1.0

    invert = Invert(1.0)
    half = dataclasses.replace(invert, intensity=0.5)
    assert half.intensity == 0.5
    assert invert.intensity == 1.0


def test_single_field():
    instances = [
        (Blur(0.0), "radius"),
        (Brightness(0.0), "amount"),
        (Contrast(0.0), "amount"),
        (Saturation(0.0), "amount"),
        (Grayscale(0.0), "intensity"),
        (HueRotation(0.0), "angle"),
        (Invert(0.0), "intensity"),
    ]
    for instance, field in instances:
        assert [f.name for f in dataclasses.fields(instance)] == [field]


def test_different_filters_are_not_equal():
    assert Brightness(1.0) != Contrast(1.0)


def test_missing_value_raises():
    with pytest.raises(TypeError):
        Blur()
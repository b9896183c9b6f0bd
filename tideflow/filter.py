"""Visual filters that can be applied to rendered views."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Blur:
    """A blur with the given radius in pixels."""

    radius: float


@dataclass
class Brightness:
    """A brightness adjustment; 1.0 is unchanged, above brightens, below darkens."""

    amount: float


@dataclass
class Contrast:
    """A contrast adjustment; 1.0 is unchanged."""

    amount: float


@dataclass
class Saturation:
    """A saturation adjustment; 1.0 is unchanged."""

    amount: float


@dataclass
class Grayscale:
    """A grayscale effect; 0.0 has no effect, 1.0 is fully gray."""

    intensity: float


@dataclass
class HueRotation:
    """A hue rotation by the given angle in degrees."""

    angle: float


@dataclass
class Invert:
    """A color inversion; 0.0 has no effect, 1.0 is fully inverted."""

    intensity: float
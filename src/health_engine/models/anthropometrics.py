"""Anthropometric input taken from a pilot profile."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AnthropometricInput:
    """Body weight and height as stored on the pilot profile.

    Either value may be missing; BMI is only derived when both are present
    and the height is positive.
    """

    weight_kg: float | None = None
    height_m: float | None = None

"""Body Mass Index and adult weight-status classification.

Reference:
    WHO (2000). Obesity: preventing and managing the global epidemic.
    WHO Technical Report Series 894.
"""

from __future__ import annotations

import math

from health_engine.models.enums import BMI_BANDS, BmiClass
from health_engine.models.scores import BmiResult


def classify_bmi(bmi: float) -> BmiClass:
    """Map a BMI value to its WHO class. Lower band bounds are inclusive.

    Example: 18.5 -> NORMAL, 25.0 -> OVERWEIGHT, 40.0 -> OBESITY_III.
    """
    for upper, bmi_class in BMI_BANDS:
        if bmi < upper:
            return bmi_class
    return BmiClass.OBESITY_III


def compute_bmi(weight_kg: float | None, height_m: float | None) -> BmiResult:
    """Calculate BMI = weight / height² rounded to 2 decimals.

    Args:
        weight_kg: Body weight in kilograms. None, 0 or non-finite counts as missing.
        height_m: Height in metres. None, non-finite or <= 0 counts as missing.

    Returns:
        BmiResult. ``bmi`` is None and the class is INSUFFICIENT_DATA when
        either input is missing.
    """
    if not weight_kg or not height_m or height_m <= 0:
        return BmiResult(bmi=None, classification=BmiClass.INSUFFICIENT_DATA)

    weight = float(weight_kg)
    height = float(height_m)
    if not (math.isfinite(weight) and math.isfinite(height)):
        return BmiResult(bmi=None, classification=BmiClass.INSUFFICIENT_DATA)
    bmi = round(weight / (height * height), 2)
    return BmiResult(bmi=bmi, classification=classify_bmi(bmi))

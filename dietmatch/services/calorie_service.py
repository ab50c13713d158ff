"""
Calorie Service

Daily calorie target for a pregnant user and the coarse calorie category
used for both the target and individual food items.
"""

from typing import Union

from dietmatch.utils.enums import ActivityLevel, CalorieCategory, PregnancyStage
from dietmatch.services.diet_constants import (
    ACTIVITY_FACTORS,
    BMR_AGE_FACTOR,
    BMR_FEMALE_OFFSET,
    BMR_HEIGHT_CM_FACTOR,
    BMR_WEIGHT_FACTOR,
    DEFAULT_ACTIVITY_FACTOR,
    LOW_CALORIE_MAX,
    MID_CALORIE_MAX,
    TRIMESTER_CALORIES,
)


def _key(value) -> str:
    return getattr(value, "value", value)


def calculate_bmr(age: float, height_m: float, weight_kg: float) -> float:
    """Mifflin-St Jeor basal metabolic rate for a woman, height given in metres."""
    height_cm = height_m * 100
    return (
        BMR_WEIGHT_FACTOR * weight_kg
        + BMR_HEIGHT_CM_FACTOR * height_cm
        - BMR_AGE_FACTOR * age
        + BMR_FEMALE_OFFSET
    )


def activity_factor(active: Union[ActivityLevel, str]) -> float:
    return ACTIVITY_FACTORS.get(_key(active), DEFAULT_ACTIVITY_FACTOR)


def trimester_calories(preg_stage: Union[PregnancyStage, str]) -> float:
    return TRIMESTER_CALORIES.get(_key(preg_stage), 0)


def estimate_calories(
    age: float,
    height_m: float,
    weight_kg: float,
    preg_stage: Union[PregnancyStage, str],
    active: Union[ActivityLevel, str],
) -> float:
    """
    Estimate the daily calorie target.

    BMR is scaled by the activity factor and the trimester supplement is
    added on top. Unknown activity levels use the sedentary factor and
    unknown stages add nothing. The result is not rounded.

    Args:
        age: Age in years
        height_m: Height in metres
        weight_kg: Body weight in kilograms
        preg_stage: Pregnancy stage (enum member or its string value)
        active: Activity level (enum member or its string value)

    Returns:
        Daily calories in kcal
    """
    daily_calories = calculate_bmr(age, height_m, weight_kg) * activity_factor(active)
    return daily_calories + trimester_calories(preg_stage)


def classify_calories(value: float) -> str:
    """Map kcal to low (< 150), mid (150..300 inclusive) or high (> 300)."""
    if value < LOW_CALORIE_MAX:
        return CalorieCategory.LOW.value
    if value <= MID_CALORIE_MAX:
        return CalorieCategory.MID.value
    return CalorieCategory.HIGH.value

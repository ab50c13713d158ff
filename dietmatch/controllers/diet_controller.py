"""
Diet Controller

Handles the diet recommendation endpoints:
- Top 10 foods nearest to the daily calorie target
- Daily meal plan with serving counts
"""

import math
from typing import Any, Dict, Optional

from flask import current_app
from marshmallow import ValidationError

from dietmatch.schemas.diet_schema import DietQuerySchema
from dietmatch.services.calorie_service import estimate_calories, classify_calories
from dietmatch.services.dataset_service import get_food_table
from dietmatch.services.diet_service import select_top_diets, plan_meals
from dietmatch.services.diet_constants import MEALS_PER_DAY
from dietmatch.utils.http import ok, error, query_args, round_half_up

_query_schema = DietQuerySchema()


def _validation_error(err: ValidationError):
    messages = err.normalized_messages()
    missing = sorted(
        field for field, msgs in messages.items()
        if "Missing data for required field." in msgs
    )
    if missing:
        message = f"Missing required query parameters: {', '.join(missing)}."
    else:
        message = f"Invalid query parameters: {', '.join(sorted(messages))}."
    return error("VALIDATION_ERROR", message, 400, details=messages)


def _not_ready():
    return error("DATASET_NOT_READY", "Food dataset is not loaded yet.", 503)


def _not_finite():
    return error("VALIDATION_ERROR", "Computed calorie target is not finite.", 400)


def _target(params: Dict[str, Any]) -> Optional[Dict[str, Any]]:
    """Calorie target for the validated query, or None when the numbers overflow."""
    calories = estimate_calories(
        params["age"],
        params["height"],
        params["weight"],
        params["preg_stage"],
        params["active"],
    )
    if not math.isfinite(calories):
        return None
    return {
        "calories": calories,
        "recommended_calories": round_half_up(calories),
        "caloric_classification": classify_calories(calories),
    }


def top_10_diets_handler():
    """
    Recommend the ten foods whose calories are nearest the daily target.

    Query Parameters:
        - age: Age in years
        - height: Height in metres
        - weight: Weight in kg
        - preg_stage: FirstTrimester / SecondTrimester / ThirdTrimester
        - active: Sedentary / Light Active / Moderately Active / Very Active
    """
    foods = get_food_table()
    if foods is None:
        return _not_ready()

    try:
        params = _query_schema.load(query_args())
    except ValidationError as err:
        return _validation_error(err)

    try:
        target = _target(params)
        if target is None:
            return _not_finite()
        top_diets = select_top_diets(target["calories"], foods)
    except Exception:
        current_app.logger.exception("Failed to build top diets for %s", params)
        return error("INTERNAL_ERROR", "Internal server error.", 500)

    return ok({
        "recommended_calories": target["recommended_calories"],
        "caloric_classification": target["caloric_classification"],
        "top_10_diets": top_diets,
    })


def meal_plan_handler():
    """Daily meal plan: foods sized for one of MEALS_PER_DAY meals, with servings."""
    foods = get_food_table()
    if foods is None:
        return _not_ready()

    try:
        params = _query_schema.load(query_args())
    except ValidationError as err:
        return _validation_error(err)

    try:
        target = _target(params)
        if target is None:
            return _not_finite()
        meal_plan = plan_meals(target["calories"], foods, meals_per_day=MEALS_PER_DAY)
    except Exception:
        current_app.logger.exception("Failed to build meal plan for %s", params)
        return error("INTERNAL_ERROR", "Internal server error.", 500)

    return ok({
        "recommended_calories": target["recommended_calories"],
        "caloric_classification": target["caloric_classification"],
        "meals_per_day": MEALS_PER_DAY,
        "per_meal_calories": round(target["calories"] / MEALS_PER_DAY, 1),
        "meal_plan": meal_plan,
    })

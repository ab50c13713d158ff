"""
Diet Service

Handles diet matching against the food table including:
- Eligibility filtering and de-duplication by description
- Nearest-calorie ranking for the top diets list
- Serving arithmetic for the daily meal plan
"""

from typing import Any, Dict, Iterable, List

from dietmatch.models.food import FoodRecord
from dietmatch.services.calorie_service import classify_calories
from dietmatch.services.diet_constants import (
    MAX_SERVINGS,
    MEALS_PER_DAY,
    MIN_PLAN_MATCH_PERCENT,
    MIN_SERVINGS,
    TOP_DIETS_LIMIT,
)
from dietmatch.utils.http import round_half_up


def unique_eligible_foods(foods: Iterable[FoodRecord]) -> List[FoodRecord]:
    """
    Keep foods with positive calories, first occurrence per description.

    Ineligible rows are dropped before de-duplication so a zero-calorie row
    never hides a later valid row with the same description.
    """
    seen = set()
    unique = []
    for food in foods:
        if not food.is_eligible or food.description in seen:
            continue
        seen.add(food.description)
        unique.append(food)
    return unique


def rank_by_calorie_distance(
    foods: Iterable[FoodRecord],
    target_calories: float
) -> List[FoodRecord]:
    """Sort foods by |calories - target|; equal distances keep table order."""
    return sorted(foods, key=lambda food: abs(food.calories - target_calories))


def serialize_food(food: FoodRecord) -> Dict[str, Any]:
    return {
        "description": food.description,
        "calories": food.calories,
        "calorie_category": classify_calories(food.calories),
    }


def select_top_diets(
    target_calories: float,
    foods: Iterable[FoodRecord],
    limit: int = TOP_DIETS_LIMIT
) -> List[Dict[str, Any]]:
    """
    Select the foods whose calories are closest to the target.

    Args:
        target_calories: Daily calorie target
        foods: Food table in dataset order
        limit: Maximum number of foods returned

    Returns:
        Up to ``limit`` serialized foods, nearest first, unique descriptions
    """
    ranked = rank_by_calorie_distance(unique_eligible_foods(foods), target_calories)
    return [serialize_food(food) for food in ranked[:limit]]


def recommended_servings(target_calories: float, calories_per_serving: float) -> int:
    servings = round_half_up(target_calories / calories_per_serving)
    return max(MIN_SERVINGS, min(MAX_SERVINGS, servings))


def plan_meals(
    target_calories: float,
    foods: Iterable[FoodRecord],
    meals_per_day: int = MEALS_PER_DAY,
    limit: int = TOP_DIETS_LIMIT
) -> List[Dict[str, Any]]:
    """
    Build a meal plan from foods sized around a single meal.

    Foods are ranked by distance to ``target / meals_per_day``. Each
    candidate gets a serving count (clamped to MIN_SERVINGS..MAX_SERVINGS)
    so that servings * calories approaches the daily target, and candidates
    covering less than MIN_PLAN_MATCH_PERCENT of the target are dropped.

    Returns:
        Up to ``limit`` plan entries, nearest per-meal match first
    """
    if target_calories <= 0:
        return []

    per_meal_calories = target_calories / meals_per_day
    ranked = rank_by_calorie_distance(unique_eligible_foods(foods), per_meal_calories)

    plan = []
    for food in ranked:
        servings = recommended_servings(target_calories, food.calories)
        total_calories = servings * food.calories
        percent_of_target = total_calories * 100 / target_calories
        if percent_of_target < MIN_PLAN_MATCH_PERCENT:
            continue

        entry = serialize_food(food)
        entry.update({
            "servings": servings,
            "total_calories": round(total_calories, 1),
            "percent_of_target": round(percent_of_target, 1),
        })
        plan.append(entry)
        if len(plan) >= limit:
            break

    return plan

import random

from dietmatch.models.food import FoodRecord
from dietmatch.services.diet_service import (
    plan_meals,
    recommended_servings,
    select_top_diets,
    unique_eligible_foods,
)


def foods(*rows):
    return [FoodRecord(description=d, calories=c) for d, c in rows]


# ── unique_eligible_foods ───────────────────────────────────────────
def test_dedup_keeps_first_occurrence():
    table = foods(("Jollof rice", 164), ("Moi moi", 158), ("Jollof rice", 171))
    result = unique_eligible_foods(table)
    assert [f.description for f in result] == ["Jollof rice", "Moi moi"]
    assert result[0].calories == 164


def test_zero_calorie_duplicate_does_not_hide_valid_row():
    table = foods(("Pap", 0), ("Pap", 52))
    assert unique_eligible_foods(table) == [FoodRecord("Pap", 52)]


# ── select_top_diets ────────────────────────────────────────────────
def test_select_nearest_first_and_strips_delta():
    table = foods(("Eba", 162), ("Akara", 252), ("Zobo", 38), ("Egusi soup", 298))
    result = select_top_diets(250, table)
    assert [r["description"] for r in result] == ["Akara", "Egusi soup", "Eba", "Zobo"]
    assert result[0] == {"description": "Akara", "calories": 252, "calorie_category": "mid"}
    assert all("delta" not in r for r in result)


def test_select_excludes_zero_and_negative_calories():
    table = foods(("Water", 0), ("Broken row", -5), ("Garden egg", 24))
    result = select_top_diets(0, table)
    assert [r["description"] for r in result] == ["Garden egg"]


def test_select_returns_at_most_ten_unique():
    table = foods(*[(f"Food {i % 15}", 100 + i) for i in range(40)])
    result = select_top_diets(120, table)
    assert len(result) == 10
    descriptions = [r["description"] for r in result]
    assert len(set(descriptions)) == len(descriptions)


def test_select_limit():
    table = foods(*[(f"Food {i}", 100 + i) for i in range(20)])
    assert len(select_top_diets(100, table, limit=3)) == 3


def test_select_ties_keep_table_order():
    table = foods(("Below", 90), ("Above", 110), ("Exact", 100))
    result = select_top_diets(100, table)
    assert [r["description"] for r in result] == ["Exact", "Below", "Above"]


def test_select_is_deterministic():
    rng = random.Random(7)
    table = foods(*[(f"Food {rng.randint(0, 60)}", rng.randint(0, 600)) for _ in range(200)])
    assert select_top_diets(2014.325, table) == select_top_diets(2014.325, table)


def test_select_empty_table():
    assert select_top_diets(2000, []) == []


# ── meal plan ───────────────────────────────────────────────────────
def test_recommended_servings_clamped():
    assert recommended_servings(2000, 500) == 4
    assert recommended_servings(2000, 100) == 5
    assert recommended_servings(2000, 1500) == 3


def test_plan_meals_ranks_by_per_meal_target_and_filters_low_match():
    table = foods(
        ("Rice cake", 300),      # 5 servings -> 75% -> dropped
        ("Plantain chips", 500), # 4 servings -> 100%
        ("Water", 0),
        ("Fish stew", 700),      # 3 servings -> 105%
        ("Meat pie", 460),       # 4 servings -> 92%
    )
    plan = plan_meals(2000, table)
    assert [p["description"] for p in plan] == ["Plantain chips", "Meat pie", "Fish stew"]

    first = plan[0]
    assert first["servings"] == 4
    assert first["total_calories"] == 2000
    assert first["percent_of_target"] == 100.0
    assert first["calories"] == 500
    assert first["calorie_category"] == "high"
    assert plan[1]["percent_of_target"] == 92.0
    assert plan[2]["servings"] == 3


def test_plan_meals_respects_limit_and_unique_descriptions():
    table = foods(*[(f"Dish {i % 12}", 480 + i) for i in range(30)])
    plan = plan_meals(2000, table, limit=5)
    assert len(plan) == 5
    assert len({p["description"] for p in plan}) == 5


def test_plan_meals_non_positive_target():
    assert plan_meals(0, foods(("Dish", 400))) == []


def test_recommended_servings_rounds_half_up():
    # 2000.25 / 444.5 is exactly 4.5
    assert recommended_servings(2000.25, 444.5) == 5


def test_plan_meals_keeps_half_serving_boundary_food():
    plan = plan_meals(2000.25, foods(("Chin chin", 444.5)))
    assert len(plan) == 1
    assert plan[0]["servings"] == 5
    assert plan[0]["percent_of_target"] == 111.1


def test_plan_meals_keeps_exactly_ninety_percent():
    # 3 servings * 600 kcal = 1800 kcal = 90% of 2000
    plan = plan_meals(2000, foods(("Ofada rice", 600)))
    assert len(plan) == 1
    assert plan[0]["servings"] == 3
    assert plan[0]["total_calories"] == 1800
    assert plan[0]["percent_of_target"] == 90.0


def test_plan_meals_drops_just_below_ninety_percent():
    # 3 servings * 599 kcal = 1797 kcal = 89.85% of 2000
    assert plan_meals(2000, foods(("Ofada rice", 599))) == []

import os

from flask import current_app
from dietmatch.services.dataset_service import get_food_table
from dietmatch.utils.http import ok

def home_index():
    return ok({
        "message": "Diet recommendation API is running.",
        "endpoints": ["/api/top_10_diets", "/api/meal_plan", "/health"],
    })

def health_check():
    foods = get_food_table()
    dataset = {
        "file": os.path.basename(current_app.config.get("FOODS_CSV_PATH") or ""),
        "records": len(foods) if foods is not None else 0,
    }
    if foods is None:
        return ok({"status": "not_ready", "dataset": dataset}, 503)
    return ok({"status": "ready", "dataset": dataset})

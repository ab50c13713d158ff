from flask import Blueprint
from dietmatch.controllers.diet_controller import top_10_diets_handler, meal_plan_handler

diet_bp = Blueprint("diet", __name__, url_prefix="/api")

@diet_bp.get("/top_10_diets")
def top_10_diets():
    return top_10_diets_handler()


@diet_bp.get("/meal_plan")
def meal_plan():
    return meal_plan_handler()

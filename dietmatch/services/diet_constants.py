"""
Diet Service Constants

Contains the calorie policy constants shared by the estimator, the
classifier and the diet selector.
"""

from dietmatch.utils.enums import ActivityLevel, PregnancyStage

# Mifflin-St Jeor (female) coefficients
BMR_WEIGHT_FACTOR = 10.0
BMR_HEIGHT_CM_FACTOR = 6.25
BMR_AGE_FACTOR = 5.0
BMR_FEMALE_OFFSET = -161.0

# Activity multipliers, keyed by the query-string value
ACTIVITY_FACTORS = {
    ActivityLevel.SEDENTARY.value: 1.2,
    ActivityLevel.LIGHT_ACTIVE.value: 1.3,
    ActivityLevel.MODERATELY_ACTIVE.value: 1.45,
    ActivityLevel.VERY_ACTIVE.value: 1.6,
}
DEFAULT_ACTIVITY_FACTOR = ACTIVITY_FACTORS[ActivityLevel.SEDENTARY.value]

# Extra daily kcal per pregnancy stage
TRIMESTER_CALORIES = {
    PregnancyStage.FIRST_TRIMESTER.value: 85,
    PregnancyStage.SECOND_TRIMESTER.value: 285,
    PregnancyStage.THIRD_TRIMESTER.value: 475,
}

# Category bands: value < LOW_MAX is low, value <= MID_MAX is mid, above is high
LOW_CALORIE_MAX = 150
MID_CALORIE_MAX = 300

# Selection
TOP_DIETS_LIMIT = 10

# Meal plan extension
MEALS_PER_DAY = 4
MIN_SERVINGS = 3
MAX_SERVINGS = 5
MIN_PLAN_MATCH_PERCENT = 90.0

from enum import Enum

class PregnancyStage(str, Enum):
    FIRST_TRIMESTER = "FirstTrimester"
    SECOND_TRIMESTER = "SecondTrimester"
    THIRD_TRIMESTER = "ThirdTrimester"

class ActivityLevel(str, Enum):
    SEDENTARY = "Sedentary"
    LIGHT_ACTIVE = "Light Active"
    MODERATELY_ACTIVE = "Moderately Active"
    VERY_ACTIVE = "Very Active"

class CalorieCategory(str, Enum):
    LOW = "low"
    MID = "mid"
    HIGH = "high"

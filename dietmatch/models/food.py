from dataclasses import dataclass


@dataclass(frozen=True)
class FoodRecord:
    """One row of the nutrition table: energy is kcal per reference serving."""

    description: str
    calories: float

    @property
    def is_eligible(self) -> bool:
        return self.calories > 0

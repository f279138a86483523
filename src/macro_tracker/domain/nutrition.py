"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class MacroProfile:
    """Macronutrient grams and calories for a meal or a day."""

    protein: float
    carbs: float
    fat: float
    calories: float

    def __add__(self, other: "MacroProfile") -> "MacroProfile":
        return MacroProfile(
            protein=self.protein + other.protein,
            carbs=self.carbs + other.carbs,
            fat=self.fat + other.fat,
            calories=self.calories + other.calories,
        )

    def scaled(self, factor: float) -> "MacroProfile":
        """Return the profile multiplied by a serving factor."""
        return MacroProfile(
            protein=self.protein * factor,
            carbs=self.carbs * factor,
            fat=self.fat * factor,
            calories=self.calories * factor,
        )


ZERO_MACROS = MacroProfile(protein=0.0, carbs=0.0, fat=0.0, calories=0.0)


def estimate_calories(protein: float, carbs: float, fat: float) -> float:
    """Estimate calories from macros using 4/4/9 kcal per gram."""
    return float(round(protein * 4 + carbs * 4 + fat * 9))

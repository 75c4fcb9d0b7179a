"""Nutrition planner — calorie target, macro split, meals, hydration, supplements, notes."""

from __future__ import annotations

import logging
import random

from biosync.engine import nutrition_tables as tables
from biosync.engine.metrics import round_half_up
from biosync.engine.models import (
    FitnessGoal,
    HealthMetrics,
    Hydration,
    Macros,
    MacroTarget,
    Meals,
    MealSuggestion,
    NutritionPlan,
    NutritionSummary,
    UserProfile,
)

log = logging.getLogger(__name__)

NUTRITION_NOTES: tuple[str, ...] = (
    "🥗 Focus on whole, minimally processed foods",
    "⏰ Eat regular meals to maintain energy levels",
    "🏋️ Have a protein source with each meal",
)

GOAL_NOTES: dict[FitnessGoal, str] = {
    FitnessGoal.fat_loss: "📉 Create a moderate calorie deficit for sustainable fat loss",
    FitnessGoal.muscle_gain: "📈 Eat in a slight surplus to support muscle growth",
}

LIMITATIONS_NOTE = "⚠️ Consider your health limitations when planning meals"


def target_calories(tdee: int, goal: str) -> int:
    return tdee + tables.get_calorie_adjustment(goal)


def _macro(calories: float, ratio: float, kcal_per_gram: int) -> MacroTarget:
    return MacroTarget(
        grams=round_half_up(calories * ratio / kcal_per_gram),
        calories=round_half_up(calories * ratio),
        percentage=round_half_up(ratio * 100),
    )


def macro_distribution(calories: float, goal: str) -> Macros:
    """Each field rounded independently; percentages are not renormalized."""
    ratio = tables.get_macro_ratio(goal)
    return Macros(
        protein=_macro(calories, ratio.protein, tables.KCAL_PER_GRAM_PROTEIN),
        carbs=_macro(calories, ratio.carbs, tables.KCAL_PER_GRAM_CARBS),
        fats=_macro(calories, ratio.fats, tables.KCAL_PER_GRAM_FAT),
    )


def meal_target_calories(macros: Macros, share: float) -> int:
    return round_half_up(
        macros.protein.calories * share + macros.carbs.calories * share + macros.fats.calories * share
    )


def meal_plan(preference: str, macros: Macros, rng: random.Random) -> Meals:
    candidates = tables.get_meal_candidates(preference)
    slots = {}
    for slot, share in tables.MEAL_SHARES.items():
        slots[slot] = MealSuggestion(
            title=slot.title(),
            suggestion=rng.choice(getattr(candidates, slot)),
            target_calories=meal_target_calories(macros, share),
        )
    return Meals(**slots)


def hydration_target(weight_kg: float, session_minutes: int, workout_days: int) -> Hydration:
    """35 ml/kg baseline plus 600 ml per training hour, averaged over the week."""
    base_ml = weight_kg * tables.HYDRATION_ML_PER_KG
    exercise_ml = session_minutes / 60 * tables.HYDRATION_ML_PER_TRAINING_HOUR * workout_days
    total_ml = base_ml + exercise_ml / 7
    return Hydration(
        daily_liters=round_half_up(total_ml / 1000 * 10) / 10,
        notes=tables.HYDRATION_NOTE,
    )


def supplement_recommendations(goal: str, preference: str) -> list[str]:
    supplements = list(tables.BASE_SUPPLEMENTS)
    supplements.extend(tables.GOAL_SUPPLEMENTS.get(goal, ()))
    supplements.extend(tables.DIET_SUPPLEMENTS.get(preference, ()))
    return supplements


def nutrition_notes(profile: UserProfile) -> list[str]:
    notes = list(NUTRITION_NOTES)
    goal_note = GOAL_NOTES.get(profile.fitness_goal)
    if goal_note:
        notes.append(goal_note)
    if profile.health_limitations:
        notes.append(LIMITATIONS_NOTE)
    return notes


def generate_nutrition_plan(
    profile: UserProfile,
    metrics: HealthMetrics,
    rng: random.Random | None = None,
) -> NutritionPlan:
    rng = rng or random.Random()
    calories = target_calories(metrics.tdee, profile.fitness_goal.value)
    macros = macro_distribution(calories, profile.fitness_goal)
    log.debug("Calorie target %d kcal (tdee %d, goal %s)", calories, metrics.tdee, profile.fitness_goal.value)

    return NutritionPlan(
        summary=NutritionSummary(
            calories=calories,
            goal=profile.fitness_goal,
            diet_type=profile.dietary_preference,
        ),
        macros=macros,
        meals=meal_plan(profile.dietary_preference, macros, rng),
        hydration=hydration_target(
            profile.weight_kg,
            profile.session_duration_minutes,
            profile.workout_days_per_week,
        ),
        supplements=supplement_recommendations(profile.fitness_goal, profile.dietary_preference),
        notes=nutrition_notes(profile),
    )


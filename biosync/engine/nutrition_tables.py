"""Static nutrition tables — calorie adjustments, macro ratios, meal candidates, supplements."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from biosync.engine.models import DietaryPreference, FitnessGoal

log = logging.getLogger(__name__)

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARBS = 4
KCAL_PER_GRAM_FAT = 9

HYDRATION_ML_PER_KG = 35
HYDRATION_ML_PER_TRAINING_HOUR = 600
HYDRATION_NOTE = "Increase intake on workout days and in hot weather"

BASE_SUPPLEMENTS: tuple[str, ...] = ("Multivitamin", "Omega-3 fatty acids")


@dataclass(frozen=True, slots=True)
class MacroRatio:
    protein: float
    carbs: float
    fats: float


@dataclass(frozen=True, slots=True)
class MealCandidates:
    breakfast: tuple[str, ...]
    lunch: tuple[str, ...]
    dinner: tuple[str, ...]
    snacks: tuple[str, ...]


CALORIE_ADJUSTMENTS: dict[FitnessGoal, int] = {
    FitnessGoal.fat_loss: -500,
    FitnessGoal.muscle_gain: 300,
    FitnessGoal.maintenance: 0,
    FitnessGoal.endurance: 200,
    FitnessGoal.strength: 200,
}

MACRO_RATIOS: dict[FitnessGoal, MacroRatio] = {
    FitnessGoal.fat_loss: MacroRatio(protein=0.35, carbs=0.30, fats=0.35),
    FitnessGoal.muscle_gain: MacroRatio(protein=0.30, carbs=0.45, fats=0.25),
    FitnessGoal.maintenance: MacroRatio(protein=0.25, carbs=0.45, fats=0.30),
    FitnessGoal.endurance: MacroRatio(protein=0.20, carbs=0.60, fats=0.20),
    FitnessGoal.strength: MacroRatio(protein=0.30, carbs=0.40, fats=0.30),
}

# Share of each macro's calories assigned to a meal slot
MEAL_SHARES: dict[str, float] = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.30,
    "snacks": 0.10,
}

MEAL_CANDIDATES: dict[DietaryPreference, MealCandidates] = {
    DietaryPreference.omnivore: MealCandidates(
        breakfast=(
            "Oatmeal with berries and protein powder",
            "Eggs with whole grain toast",
            "Greek yogurt with nuts and fruit",
        ),
        lunch=(
            "Grilled chicken with quinoa and vegetables",
            "Salmon with sweet potato",
            "Lean beef with brown rice",
        ),
        dinner=(
            "Baked fish with roasted vegetables",
            "Chicken stir-fry with brown rice",
            "Lean pork with steamed broccoli",
        ),
        snacks=(
            "Apple with almond butter",
            "Protein shake with banana",
            "Mixed nuts and dried fruit",
        ),
    ),
    DietaryPreference.vegetarian: MealCandidates(
        breakfast=(
            "Vegetarian protein smoothie",
            "Tofu scramble with vegetables",
            "Greek yogurt with granola",
        ),
        lunch=(
            "Quinoa bowl with black beans",
            "Lentil soup with whole grain bread",
            "Chickpea salad wrap",
        ),
        dinner=(
            "Vegetarian stir-fry with tofu",
            "Black bean and sweet potato bowl",
            "Eggplant parmesan with side salad",
        ),
        snacks=("Hummus with vegetables", "Trail mix", "Cheese and crackers"),
    ),
    DietaryPreference.vegan: MealCandidates(
        breakfast=(
            "Plant protein smoothie",
            "Chia pudding with fruits",
            "Oatmeal with plant milk and nuts",
        ),
        lunch=(
            "Buddha bowl with tahini dressing",
            "Lentil and vegetable curry",
            "Quinoa salad with chickpeas",
        ),
        dinner=(
            "Tofu and vegetable stir-fry",
            "Black bean tacos with avocado",
            "Stuffed bell peppers with quinoa",
        ),
        snacks=("Fruit and nut butter", "Roasted chickpeas", "Smoothie bowl"),
    ),
    DietaryPreference.keto: MealCandidates(
        breakfast=(
            "Eggs with avocado",
            "Keto coffee with MCT oil",
            "Cheese omelet with spinach",
        ),
        lunch=(
            "Grilled chicken salad",
            "Salmon with asparagus",
            "Beef with leafy greens",
        ),
        dinner=(
            "Steak with broccoli",
            "Pork chops with cauliflower",
            "Fish with zucchini noodles",
        ),
        snacks=("Nuts and seeds", "Cheese cubes", "Avocado with salt"),
    ),
    DietaryPreference.mediterranean: MealCandidates(
        breakfast=(
            "Greek yogurt with olive oil drizzle",
            "Whole grain toast with avocado",
            "Fruit and nut bowl",
        ),
        lunch=(
            "Mediterranean quinoa salad",
            "Grilled fish with vegetables",
            "Hummus and vegetable wrap",
        ),
        dinner=(
            "Baked salmon with herbs",
            "Chicken with roasted vegetables",
            "Lentil stew with whole grains",
        ),
        snacks=("Olives and cheese", "Fresh fruit", "Nuts and seeds"),
    ),
}

GOAL_SUPPLEMENTS: dict[FitnessGoal, tuple[str, ...]] = {
    FitnessGoal.muscle_gain: ("Whey protein powder", "Creatine monohydrate"),
    FitnessGoal.endurance: ("Electrolyte supplements",),
}

DIET_SUPPLEMENTS: dict[DietaryPreference, tuple[str, ...]] = {
    DietaryPreference.vegan: ("Vitamin B12", "Plant protein powder", "Iron"),
}


def get_calorie_adjustment(goal: str) -> int:
    return CALORIE_ADJUSTMENTS.get(goal, 0)


def get_macro_ratio(goal: str) -> MacroRatio:
    """Macro split for a goal. Unknown goals use the maintenance split."""
    ratio = MACRO_RATIOS.get(goal)
    if ratio is None:
        log.debug("Unknown fitness goal %r, using maintenance macro ratio", goal)
        return MACRO_RATIOS[FitnessGoal.maintenance]
    return ratio


def get_meal_candidates(preference: str) -> MealCandidates:
    """Meal candidates for a diet. Unknown preferences use omnivore."""
    candidates = MEAL_CANDIDATES.get(preference)
    if candidates is None:
        log.debug("Unknown dietary preference %r, using omnivore meals", preference)
        return MEAL_CANDIDATES[DietaryPreference.omnivore]
    return candidates

"""Profile, plan and progress contracts — Pydantic v2 models.

Enum member names equal their values, so table lookups accept either a
member or the raw string.
"""

from __future__ import annotations

from datetime import date
from enum import Enum

from pydantic import BaseModel, Field, field_validator


class Gender(str, Enum):
    male = "male"
    female = "female"


class FitnessGoal(str, Enum):
    fat_loss = "fat_loss"
    muscle_gain = "muscle_gain"
    maintenance = "maintenance"
    endurance = "endurance"
    strength = "strength"


class FitnessLevel(str, Enum):
    beginner = "beginner"
    intermediate = "intermediate"
    advanced = "advanced"


class EquipmentAccess(str, Enum):
    minimal = "minimal"
    home = "home"
    gym = "gym"


class DietaryPreference(str, Enum):
    omnivore = "omnivore"
    vegetarian = "vegetarian"
    vegan = "vegan"
    keto = "keto"
    mediterranean = "mediterranean"


class BmiCategory(str, Enum):
    underweight = "underweight"
    normal = "normal"
    overweight = "overweight"
    obese = "obese"


class ExerciseType(str, Enum):
    cardio = "cardio"
    strength = "strength"
    core = "core"


class EquipmentTier(str, Enum):
    bodyweight = "bodyweight"
    minimal = "minimal"
    home = "home"
    gym = "gym"


class DayKind(str, Enum):
    workout = "workout"
    rest = "rest"


class WorkoutDifficulty(str, Enum):
    too_easy = "too_easy"
    just_right = "just_right"
    challenging = "challenging"
    too_hard = "too_hard"


class AdherenceLevel(str, Enum):
    excellent = "excellent"
    good = "good"
    fair = "fair"
    poor = "poor"


def parse_difficulty(value: str | None) -> WorkoutDifficulty:
    """Case-insensitive; unknown or missing values read as just_right."""
    try:
        return WorkoutDifficulty((value or "").lower())
    except ValueError:
        return WorkoutDifficulty.just_right


def parse_adherence(value: str | None) -> AdherenceLevel:
    """Case-insensitive; unknown or missing values read as good."""
    try:
        return AdherenceLevel((value or "").lower())
    except ValueError:
        return AdherenceLevel.good


class ProfileContractError(ValueError):
    """Raised when a profile bypassed validation and would yield NaN/inf output."""


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------


class UserProfile(BaseModel):
    age: int = Field(gt=0)
    gender: Gender
    height_cm: int = Field(gt=0)
    weight_kg: float = Field(gt=0)
    fitness_goal: FitnessGoal
    fitness_level: FitnessLevel
    workout_days_per_week: int = Field(ge=3, le=7)
    session_duration_minutes: int = Field(gt=0)
    equipment_access: EquipmentAccess
    dietary_preference: DietaryPreference
    health_limitations: str | None = None

    model_config = {"frozen": True}


class ProgressEntry(BaseModel):
    entry_date: date
    current_weight_kg: float = Field(gt=0)
    workout_difficulty: WorkoutDifficulty = WorkoutDifficulty.just_right
    adherence_level: AdherenceLevel = AdherenceLevel.good
    notes: str | None = None

    model_config = {"frozen": True}

    # Clients send upper-case enum names ("TOO_EASY"); unknown values fall back.
    @field_validator("workout_difficulty", mode="before")
    @classmethod
    def _lenient_difficulty(cls, v):
        return parse_difficulty(v) if v is None or isinstance(v, str) else v

    @field_validator("adherence_level", mode="before")
    @classmethod
    def _lenient_adherence(cls, v):
        return parse_adherence(v) if v is None or isinstance(v, str) else v


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------


class HealthMetrics(BaseModel):
    bmi: float
    bmi_category: BmiCategory
    bmr: int
    tdee: int


class ExercisePrescription(BaseModel):
    name: str
    type: ExerciseType
    sets: int
    reps: str  # "N-M reps" or "N-M minutes"
    rest: str
    muscle: str | None = None


class ScheduleDay(BaseModel):
    day: str
    kind: DayKind
    exercises: list[ExercisePrescription] = Field(default_factory=list)
    activity: str | None = None  # rest days only
    duration_minutes: int = 0


class WorkoutSummary(BaseModel):
    goal: FitnessGoal
    level: FitnessLevel
    frequency: str
    duration: str
    equipment: EquipmentAccess


class WorkoutPlan(BaseModel):
    summary: WorkoutSummary
    schedule: list[ScheduleDay] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class NutritionSummary(BaseModel):
    calories: int
    goal: FitnessGoal
    diet_type: DietaryPreference


class MacroTarget(BaseModel):
    grams: int
    calories: int
    percentage: int


class Macros(BaseModel):
    protein: MacroTarget
    carbs: MacroTarget
    fats: MacroTarget


class MealSuggestion(BaseModel):
    title: str
    suggestion: str
    target_calories: int


class Meals(BaseModel):
    breakfast: MealSuggestion
    lunch: MealSuggestion
    dinner: MealSuggestion
    snacks: MealSuggestion


class Hydration(BaseModel):
    daily_liters: float
    notes: str = ""


class NutritionPlan(BaseModel):
    summary: NutritionSummary
    macros: Macros
    meals: Meals
    hydration: Hydration
    supplements: list[str] = Field(default_factory=list)
    notes: list[str] = Field(default_factory=list)


class PersonalizedPlan(BaseModel):
    """Top-level plan object handed to rendering and persistence layers."""

    health_metrics: HealthMetrics
    workout: WorkoutPlan
    nutrition: NutritionPlan


class AdaptationResult(BaseModel):
    plan: PersonalizedPlan
    changes: list[str] = Field(default_factory=list)


class ProgressSummary(BaseModel):
    weeks_tracked: int = 0
    current_weight_kg: float | None = None
    total_weight_change_kg: float | None = None
    average_adherence_pct: int = 0

"""Pure health metric functions — BMI, BMR (Mifflin-St Jeor), TDEE."""

from __future__ import annotations

import math

from biosync.engine.models import (
    BmiCategory,
    Gender,
    HealthMetrics,
    ProfileContractError,
    UserProfile,
)

# Keyed by workout days per week
ACTIVITY_MULTIPLIERS: dict[int, float] = {
    3: 1.375,
    4: 1.55,
    5: 1.725,
    6: 1.9,
    7: 1.9,
}
DEFAULT_ACTIVITY_MULTIPLIER = 1.55


def bmi(weight_kg: float, height_cm: float) -> float:
    """Unrounded body mass index. Raises ProfileContractError on non-positive height."""
    if height_cm <= 0:
        raise ProfileContractError(f"height_cm must be positive, got {height_cm!r}")
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def bmi_category(value: float) -> BmiCategory:
    if value < 18.5:
        return BmiCategory.underweight
    if value < 25:
        return BmiCategory.normal
    if value < 30:
        return BmiCategory.overweight
    return BmiCategory.obese


def bmr_mifflin_st_jeor(weight_kg: float, height_cm: float, age: int, gender: str) -> float:
    """Mifflin-St Jeor BMR. Anything other than male uses the female constant."""
    base = 10 * weight_kg + 6.25 * height_cm - 5 * age
    if gender == Gender.male:
        return base + 5
    return base - 161


def activity_multiplier(workout_days: int) -> float:
    return ACTIVITY_MULTIPLIERS.get(workout_days, DEFAULT_ACTIVITY_MULTIPLIER)


def round_half_up(value: float) -> int:
    """Round halves upward; round() would use banker's rounding."""
    return math.floor(value + 0.5)


def calculate_health_metrics(profile: UserProfile) -> HealthMetrics:
    raw_bmi = bmi(profile.weight_kg, profile.height_cm)
    raw_bmr = bmr_mifflin_st_jeor(profile.weight_kg, profile.height_cm, profile.age, profile.gender)
    raw_tdee = raw_bmr * activity_multiplier(profile.workout_days_per_week)

    return HealthMetrics(
        bmi=round_half_up(raw_bmi * 10) / 10,
        bmi_category=bmi_category(raw_bmi),
        bmr=round_half_up(raw_bmr),
        tdee=round_half_up(raw_tdee),
    )

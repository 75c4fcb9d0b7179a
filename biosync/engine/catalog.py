"""Static workout catalog — exercise templates, equipment extras, intensity, weekly patterns.

Templates are indexed by fitness level × goal. Every accessor applies a
documented fallback instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from biosync.engine.models import (
    EquipmentAccess,
    EquipmentTier,
    ExerciseType,
    FitnessGoal,
    FitnessLevel,
)

log = logging.getLogger(__name__)

WEEKDAYS: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

REST_DAY_ACTIVITY = "Rest day or light activity (walking, stretching)"

MINUTES_PER_EXERCISE = 8
MIN_EXERCISES_PER_DAY = 3


@dataclass(frozen=True, slots=True)
class Exercise:
    name: str
    type: ExerciseType
    primary_muscle: str
    equipment: EquipmentTier | None = None


@dataclass(frozen=True, slots=True)
class IntensitySetting:
    sets: tuple[int, int]
    reps: tuple[int, int]
    rest_seconds: int


def _ex(name: str, type_: str, muscle: str, equipment: EquipmentTier | None = None) -> Exercise:
    return Exercise(name=name, type=ExerciseType(type_), primary_muscle=muscle, equipment=equipment)


WORKOUT_TEMPLATES: dict[FitnessLevel, dict[FitnessGoal, tuple[Exercise, ...]]] = {
    FitnessLevel.beginner: {
        FitnessGoal.fat_loss: (
            _ex("Walking/Treadmill", "cardio", "full_body"),
            _ex("Bodyweight Squats", "strength", "legs"),
            _ex("Push-ups (Modified)", "strength", "chest"),
            _ex("Plank", "core", "core"),
            _ex("Jumping Jacks", "cardio", "full_body"),
        ),
        FitnessGoal.muscle_gain: (
            _ex("Bodyweight Squats", "strength", "legs"),
            _ex("Push-ups", "strength", "chest"),
            _ex("Lunges", "strength", "legs"),
            _ex("Pike Push-ups", "strength", "shoulders"),
            _ex("Glute Bridges", "strength", "glutes"),
        ),
        FitnessGoal.maintenance: (
            _ex("Brisk Walking", "cardio", "full_body"),
            _ex("Bodyweight Squats", "strength", "legs"),
            _ex("Wall Push-ups", "strength", "chest"),
            _ex("Standing Marches", "cardio", "core"),
        ),
        FitnessGoal.endurance: (
            _ex("Walking Intervals", "cardio", "full_body"),
            _ex("Step-ups", "cardio", "legs"),
            _ex("Arm Circles", "cardio", "shoulders"),
            _ex("Marching in Place", "cardio", "full_body"),
        ),
        FitnessGoal.strength: (
            _ex("Goblet Squats", "strength", "legs"),
            _ex("Push-ups", "strength", "chest"),
            _ex("Bent-over Rows", "strength", "back"),
            _ex("Overhead Press", "strength", "shoulders"),
        ),
    },
    FitnessLevel.intermediate: {
        FitnessGoal.fat_loss: (
            _ex("Running/Cycling", "cardio", "full_body"),
            _ex("Burpees", "cardio", "full_body"),
            _ex("Squats", "strength", "legs"),
            _ex("Push-ups", "strength", "chest"),
            _ex("Mountain Climbers", "cardio", "core"),
            _ex("Deadlifts", "strength", "back"),
        ),
        FitnessGoal.muscle_gain: (
            _ex("Squats", "strength", "legs"),
            _ex("Bench Press", "strength", "chest"),
            _ex("Deadlifts", "strength", "back"),
            _ex("Overhead Press", "strength", "shoulders"),
            _ex("Pull-ups", "strength", "back"),
            _ex("Dips", "strength", "triceps"),
        ),
        FitnessGoal.maintenance: (
            _ex("Moderate Cardio", "cardio", "full_body"),
            _ex("Squats", "strength", "legs"),
            _ex("Push-ups", "strength", "chest"),
            _ex("Rows", "strength", "back"),
            _ex("Plank Variations", "core", "core"),
        ),
        FitnessGoal.endurance: (
            _ex("Long Distance Running", "cardio", "full_body"),
            _ex("Cycling Intervals", "cardio", "legs"),
            _ex("Swimming", "cardio", "full_body"),
            _ex("High-Intensity Intervals", "cardio", "full_body"),
        ),
        FitnessGoal.strength: (
            _ex("Back Squats", "strength", "legs"),
            _ex("Deadlifts", "strength", "back"),
            _ex("Bench Press", "strength", "chest"),
            _ex("Overhead Press", "strength", "shoulders"),
            _ex("Barbell Rows", "strength", "back"),
        ),
    },
    FitnessLevel.advanced: {
        FitnessGoal.fat_loss: (
            _ex("HIIT Sprints", "cardio", "full_body"),
            _ex("Complex Movements", "strength", "full_body"),
            _ex("Plyometric Exercises", "cardio", "full_body"),
            _ex("Heavy Compound Lifts", "strength", "full_body"),
        ),
        FitnessGoal.muscle_gain: (
            _ex("Heavy Squats", "strength", "legs"),
            _ex("Heavy Deadlifts", "strength", "back"),
            _ex("Heavy Bench Press", "strength", "chest"),
            _ex("Weighted Pull-ups", "strength", "back"),
            _ex("Advanced Variations", "strength", "full_body"),
        ),
        FitnessGoal.maintenance: (
            _ex("Varied Training", "strength", "full_body"),
            _ex("Functional Movements", "strength", "full_body"),
            _ex("Sport-Specific Training", "cardio", "full_body"),
        ),
        FitnessGoal.endurance: (
            _ex("Ultra-Endurance Training", "cardio", "full_body"),
            _ex("Advanced Intervals", "cardio", "full_body"),
            _ex("Competition Preparation", "cardio", "full_body"),
        ),
        FitnessGoal.strength: (
            _ex("Powerlifting Training", "strength", "full_body"),
            _ex("Olympic Lifts", "strength", "full_body"),
            _ex("Advanced Periodization", "strength", "full_body"),
        ),
    },
}

# Home and gym append these to the template; minimal filters instead.
EQUIPMENT_EXTRAS: dict[EquipmentAccess, tuple[Exercise, ...]] = {
    EquipmentAccess.home: (
        _ex("Dumbbell Rows", "strength", "back", EquipmentTier.home),
        _ex("Dumbbell Press", "strength", "chest", EquipmentTier.home),
    ),
    EquipmentAccess.gym: (
        _ex("Barbell Squats", "strength", "legs", EquipmentTier.gym),
        _ex("Lat Pulldowns", "strength", "back", EquipmentTier.gym),
        _ex("Cable Exercises", "strength", "full_body", EquipmentTier.gym),
    ),
}

MINIMAL_TIERS = frozenset({EquipmentTier.bodyweight, EquipmentTier.minimal})

INTENSITY_SETTINGS: dict[FitnessLevel, IntensitySetting] = {
    FitnessLevel.beginner: IntensitySetting(sets=(2, 3), reps=(8, 12), rest_seconds=60),
    FitnessLevel.intermediate: IntensitySetting(sets=(3, 4), reps=(6, 10), rest_seconds=45),
    FitnessLevel.advanced: IntensitySetting(sets=(4, 5), reps=(4, 8), rest_seconds=30),
}

# Monday..Sunday, 1 = workout day
WEEKLY_PATTERNS: dict[int, tuple[int, ...]] = {
    3: (1, 0, 1, 0, 1, 0, 0),
    4: (1, 0, 1, 0, 1, 1, 0),
    5: (1, 1, 1, 0, 1, 1, 0),
    6: (1, 1, 1, 1, 1, 1, 0),
    7: (1, 1, 1, 1, 1, 1, 1),
}


def get_template(level: str, goal: str) -> tuple[Exercise, ...]:
    """Exercise template for level × goal. Unknown keys fall back to beginner / maintenance."""
    by_goal = WORKOUT_TEMPLATES.get(level)
    if by_goal is None:
        log.debug("Unknown fitness level %r, using beginner templates", level)
        by_goal = WORKOUT_TEMPLATES[FitnessLevel.beginner]
    template = by_goal.get(goal)
    if template is None:
        log.debug("Unknown fitness goal %r, using maintenance template", goal)
        template = by_goal[FitnessGoal.maintenance]
    return template


def filter_by_equipment(exercises: tuple[Exercise, ...], equipment: str) -> list[Exercise]:
    """Minimal keeps bodyweight/untagged exercises; home and gym append their extras.

    Unknown equipment returns the base list unchanged.
    """
    if equipment == EquipmentAccess.minimal:
        return [ex for ex in exercises if ex.equipment is None or ex.equipment in MINIMAL_TIERS]
    extras = EQUIPMENT_EXTRAS.get(equipment)
    if extras is None:
        log.debug("Unknown equipment access %r, keeping base exercises", equipment)
        return list(exercises)
    return list(exercises) + list(extras)


def get_intensity(level: str) -> IntensitySetting:
    setting = INTENSITY_SETTINGS.get(level)
    if setting is None:
        log.debug("Unknown fitness level %r, using beginner intensity", level)
        return INTENSITY_SETTINGS[FitnessLevel.beginner]
    return setting


def weekly_pattern(workout_days: int) -> tuple[int, ...]:
    """Workout/rest flags Monday..Sunday. Unknown day counts use the 3-day pattern."""
    pattern = WEEKLY_PATTERNS.get(workout_days)
    if pattern is None:
        log.debug("No weekly pattern for %r days, using 3-day pattern", workout_days)
        return WEEKLY_PATTERNS[3]
    return pattern

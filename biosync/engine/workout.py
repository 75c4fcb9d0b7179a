"""Workout planner — template lookup, equipment filter, weekly schedule, notes."""

from __future__ import annotations

import logging
import random

from biosync.engine import catalog
from biosync.engine.catalog import Exercise, IntensitySetting
from biosync.engine.models import (
    DayKind,
    ExercisePrescription,
    ExerciseType,
    HealthMetrics,
    ScheduleDay,
    UserProfile,
    WorkoutPlan,
    WorkoutSummary,
)

log = logging.getLogger(__name__)

WORKOUT_NOTES: tuple[str, ...] = (
    "💡 Start with lighter weights and focus on proper form",
    "📈 Gradually increase intensity as you progress",
    "💧 Stay hydrated throughout your workout",
    "🛌 Allow adequate rest between sessions",
)


def target_exercise_count(session_minutes: int) -> int:
    return max(catalog.MIN_EXERCISES_PER_DAY, session_minutes // catalog.MINUTES_PER_EXERCISE)


def prescribe(exercise: Exercise, setting: IntensitySetting, rng: random.Random) -> ExercisePrescription:
    """Sets = lower bound plus a random offset within the inclusive range."""
    lo_sets, hi_sets = setting.sets
    lo_reps, hi_reps = setting.reps
    unit = "minutes" if exercise.type == ExerciseType.cardio else "reps"
    return ExercisePrescription(
        name=exercise.name,
        type=exercise.type,
        sets=lo_sets + rng.randrange(hi_sets - lo_sets + 1),
        reps=f"{lo_reps}-{hi_reps} {unit}",
        rest=f"{setting.rest_seconds}s rest",
        muscle=exercise.primary_muscle,
    )


def select_day_exercises(
    exercises: list[Exercise],
    session_minutes: int,
    setting: IntensitySetting,
    rng: random.Random,
) -> list[ExercisePrescription]:
    # Truncates when the pool is shorter than the target; no cycling.
    selected = exercises[: target_exercise_count(session_minutes)]
    return [prescribe(ex, setting, rng) for ex in selected]


def build_weekly_schedule(
    exercises: list[Exercise],
    workout_days: int,
    session_minutes: int,
    level: str,
    rng: random.Random,
) -> list[ScheduleDay]:
    setting = catalog.get_intensity(level)
    pattern = catalog.weekly_pattern(workout_days)

    schedule: list[ScheduleDay] = []
    for day, is_workout in zip(catalog.WEEKDAYS, pattern):
        if is_workout:
            schedule.append(
                ScheduleDay(
                    day=day,
                    kind=DayKind.workout,
                    exercises=select_day_exercises(exercises, session_minutes, setting, rng),
                    duration_minutes=session_minutes,
                )
            )
        else:
            schedule.append(
                ScheduleDay(day=day, kind=DayKind.rest, activity=catalog.REST_DAY_ACTIVITY)
            )
    return schedule


def workout_notes(profile: UserProfile) -> list[str]:
    notes: list[str] = []
    if profile.health_limitations:
        notes.append(f"⚠️ Consider your health limitations: {profile.health_limitations}")
    notes.extend(WORKOUT_NOTES)
    return notes


def generate_workout_plan(
    profile: UserProfile,
    metrics: HealthMetrics,
    rng: random.Random | None = None,
) -> WorkoutPlan:
    """Build a 7-day plan. `metrics` is accepted for parity with the nutrition planner."""
    rng = rng or random.Random()
    template = catalog.get_template(profile.fitness_level, profile.fitness_goal)
    exercises = catalog.filter_by_equipment(template, profile.equipment_access)
    log.debug(
        "Workout pool for %s/%s/%s: %d exercises",
        profile.fitness_level.value,
        profile.fitness_goal.value,
        profile.equipment_access.value,
        len(exercises),
    )

    return WorkoutPlan(
        summary=WorkoutSummary(
            goal=profile.fitness_goal,
            level=profile.fitness_level,
            frequency=f"{profile.workout_days_per_week} days per week",
            duration=f"{profile.session_duration_minutes} minutes per session",
            equipment=profile.equipment_access,
        ),
        schedule=build_weekly_schedule(
            exercises,
            profile.workout_days_per_week,
            profile.session_duration_minutes,
            profile.fitness_level,
            rng,
        ),
        notes=workout_notes(profile),
    )

"""Plan adaptation — rule-based revision of a plan after a progress entry.

The engine keeps no state of its own. Weekly weight change is averaged over
the number of entries the caller supplies, so callers pass the full,
growing history on every call. The input plan is never mutated.
"""

from __future__ import annotations

import logging
from typing import Sequence

from biosync.engine.models import (
    AdaptationResult,
    AdherenceLevel,
    DayKind,
    FitnessGoal,
    PersonalizedPlan,
    ProgressEntry,
    UserProfile,
    WorkoutDifficulty,
    WorkoutPlan,
)

log = logging.getLogger(__name__)

MIN_SETS = 2
MAX_SETS = 6

FAT_LOSS_SLOW_THRESHOLD = -0.2  # kg/week; above this is too slow
FAT_LOSS_FAST_THRESHOLD = -1.0  # kg/week; below this is too fast
FAT_LOSS_CALORIE_STEP = 100
MUSCLE_GAIN_SLOW_THRESHOLD = 0.2
MUSCLE_GAIN_CALORIE_STEP = 150

INCREASED_INTENSITY = "Increased workout intensity"
REDUCED_INTENSITY = "Reduced workout intensity"
REDUCED_CALORIES = "Reduced daily calories"
INCREASED_CALORIES = "Increased daily calories"
ADHERENCE_ADVISORY = "Modified plan for better adherence"


def weekly_weight_change(
    baseline_weight_kg: float,
    current_weight_kg: float,
    history_length: int,
) -> float:
    """Average weekly change since the profile weight, one entry per week."""
    return (current_weight_kg - baseline_weight_kg) / max(1, history_length)


def adjust_sets(workout: WorkoutPlan, difficulty: str) -> list[str]:
    """Shift sets by one on every workout day, clamped to [MIN_SETS, MAX_SETS]."""
    if difficulty == WorkoutDifficulty.too_easy:
        step, reason = 1, INCREASED_INTENSITY
    elif difficulty == WorkoutDifficulty.too_hard:
        step, reason = -1, REDUCED_INTENSITY
    else:
        return []

    changes: list[str] = []
    for day in workout.schedule:
        if day.kind != DayKind.workout:
            continue
        for exercise in day.exercises:
            if exercise.sets:
                exercise.sets = min(max(exercise.sets + step, MIN_SETS), MAX_SETS)
                changes.append(reason)
    return changes


def calorie_delta(goal: str, weekly_change: float) -> tuple[int, str | None]:
    """Calorie adjustment and change reason for a goal; (0, None) when on track."""
    if goal == FitnessGoal.fat_loss:
        if weekly_change > FAT_LOSS_SLOW_THRESHOLD:
            return -FAT_LOSS_CALORIE_STEP, REDUCED_CALORIES
        if weekly_change < FAT_LOSS_FAST_THRESHOLD:
            return FAT_LOSS_CALORIE_STEP, INCREASED_CALORIES
    elif goal == FitnessGoal.muscle_gain:
        if weekly_change < MUSCLE_GAIN_SLOW_THRESHOLD:
            return MUSCLE_GAIN_CALORIE_STEP, INCREASED_CALORIES
    return 0, None


def _dedupe(items: list[str]) -> list[str]:
    return list(dict.fromkeys(items))


def adapt(
    current_plan: PersonalizedPlan,
    profile: UserProfile,
    history: Sequence[ProgressEntry],
    entry: ProgressEntry,
) -> AdaptationResult:
    """Return an adapted deep copy of `current_plan` and the de-duplicated change log."""
    plan = current_plan.model_copy(deep=True)
    changes = adjust_sets(plan.workout, entry.workout_difficulty)

    weekly = weekly_weight_change(profile.weight_kg, entry.current_weight_kg, len(history))
    delta, reason = calorie_delta(profile.fitness_goal, weekly)
    if reason is not None:
        plan.nutrition.summary.calories += delta
        changes.append(reason)

    if entry.adherence_level == AdherenceLevel.poor:
        changes.append(ADHERENCE_ADVISORY)

    changes = _dedupe(changes)
    log.debug(
        "Adapted plan: weekly change %.2f kg over %d entries, changes=%s",
        weekly,
        len(history),
        changes,
    )
    return AdaptationResult(plan=plan, changes=changes)


def needs_adaptation(
    base_plan: PersonalizedPlan,
    current_plan: PersonalizedPlan,
    profile: UserProfile,
    history: Sequence[ProgressEntry],
    entry: ProgressEntry,
) -> tuple[bool, list[str]]:
    """Dry run of `adapt` on `base_plan`, the plan `entry` was submitted against.

    Returns whether `current_plan` still lacks the adapted result, and the
    changes the entry calls for. Once a submit has stored the adapted plan the
    flag is False and the recommendations are the ones already applied.
    """
    result = adapt(base_plan, profile, history, entry)
    return result.plan != current_plan, result.changes

"""Plan generation entry point — metrics, workout and nutrition in one call."""

from __future__ import annotations

import random

from biosync.engine.metrics import calculate_health_metrics
from biosync.engine.models import PersonalizedPlan, UserProfile
from biosync.engine.nutrition import generate_nutrition_plan
from biosync.engine.workout import generate_workout_plan


def generate_personalized_plan(
    profile: UserProfile,
    rng: random.Random | None = None,
) -> PersonalizedPlan:
    """Workout sets are drawn before meal suggestions from the same rng."""
    rng = rng or random.Random()
    metrics = calculate_health_metrics(profile)
    return PersonalizedPlan(
        health_metrics=metrics,
        workout=generate_workout_plan(profile, metrics, rng),
        nutrition=generate_nutrition_plan(profile, metrics, rng),
    )

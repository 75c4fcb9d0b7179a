"""Progress analytics and motivational messages."""

from __future__ import annotations

import random
from typing import Sequence

from biosync.engine.models import (
    AdherenceLevel,
    ProgressEntry,
    ProgressSummary,
    UserProfile,
)

ADHERENCE_SCORES: dict[AdherenceLevel, int] = {
    AdherenceLevel.excellent: 95,
    AdherenceLevel.good: 80,
    AdherenceLevel.fair: 60,
    AdherenceLevel.poor: 40,
}

MOTIVATIONAL_QUOTES: tuple[str, ...] = (
    "Great job tracking your progress! Consistency is key to success. 🌟",
    "Every step forward is progress, no matter how small! Keep going! 💯",
    "Your dedication is inspiring! Results come to those who persist. 🔥",
    "Progress isn't always visible, but it's always happening. Stay strong! 💪",
    "You're building not just muscle, but discipline. Well done! 🏆",
)


def adherence_score(level: str) -> int:
    return ADHERENCE_SCORES.get(level, 0)


def average_adherence(history: Sequence[ProgressEntry]) -> int:
    if not history:
        return 0
    total = sum(adherence_score(e.adherence_level) for e in history)
    return int(total / len(history) + 0.5)


def summarize_progress(profile: UserProfile, history: Sequence[ProgressEntry]) -> ProgressSummary:
    """Weeks tracked, latest weight, change since the profile weight, average adherence."""
    if not history:
        return ProgressSummary()
    latest = history[-1]
    return ProgressSummary(
        weeks_tracked=len(history),
        current_weight_kg=latest.current_weight_kg,
        total_weight_change_kg=round(latest.current_weight_kg - profile.weight_kg, 1),
        average_adherence_pct=average_adherence(history),
    )


def motivational_message(
    kind: str,
    profile: UserProfile | None = None,
    rng: random.Random | None = None,
) -> tuple[str, str]:
    """Return (headline, body) for a dashboard event."""
    if kind == "welcome":
        return (
            "Welcome to BioSync! 🚀",
            "Start by creating your profile to receive your personalized fitness and nutrition plan.",
        )
    if kind == "plan_generated" and profile is not None:
        goal = profile.fitness_goal.replace("_", " ")
        return (
            "Your Plan is Ready! 💪",
            f"We've created a personalized {goal} plan just for you. "
            "Follow your schedule and track your progress for optimal results!",
        )
    if kind == "progress_updated":
        rng = rng or random.Random()
        return "Progress Updated! 📊", rng.choice(MOTIVATIONAL_QUOTES)
    return (
        "Keep Going! 💪",
        "Your fitness journey is unique. Trust the process and celebrate small wins!",
    )

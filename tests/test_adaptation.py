"""Tests for progress-driven plan adaptation."""

from __future__ import annotations

import random

import pytest

from biosync.engine.adaptation import (
    ADHERENCE_ADVISORY,
    INCREASED_CALORIES,
    INCREASED_INTENSITY,
    REDUCED_CALORIES,
    REDUCED_INTENSITY,
    adapt,
    calorie_delta,
    needs_adaptation,
    weekly_weight_change,
)
from biosync.engine.models import DayKind, PersonalizedPlan
from biosync.engine.plans import generate_personalized_plan

from tests.conftest import make_entry, make_profile


def _plan_with_sets(profile, sets: int) -> PersonalizedPlan:
    plan = generate_personalized_plan(profile, random.Random(0))
    for day in plan.workout.schedule:
        for ex in day.exercises:
            ex.sets = sets
    return plan


def _all_sets(plan: PersonalizedPlan) -> set[int]:
    return {ex.sets for day in plan.workout.schedule if day.kind == DayKind.workout for ex in day.exercises}


class TestWeeklyWeightChange:
    def test_divides_by_history_length(self):
        assert weekly_weight_change(80.0, 78.5, 2) == -0.75

    def test_empty_history_divides_by_one(self):
        assert weekly_weight_change(80.0, 79.0, 0) == -1.0


class TestCalorieDelta:
    def test_fat_loss_too_slow(self):
        assert calorie_delta("fat_loss", 0.0) == (-100, REDUCED_CALORIES)

    def test_fat_loss_too_fast(self):
        assert calorie_delta("fat_loss", -1.5) == (100, INCREASED_CALORIES)

    @pytest.mark.parametrize("change", [-0.2, -0.75, -1.0])
    def test_fat_loss_on_track(self, change):
        assert calorie_delta("fat_loss", change) == (0, None)

    def test_muscle_gain_too_slow(self):
        assert calorie_delta("muscle_gain", 0.1) == (150, INCREASED_CALORIES)

    def test_muscle_gain_on_track(self):
        assert calorie_delta("muscle_gain", 0.2) == (0, None)

    @pytest.mark.parametrize("goal", ["maintenance", "endurance", "strength", "unknown"])
    def test_other_goals_unchanged(self, goal):
        assert calorie_delta(goal, -3.0) == (0, None)


class TestWorkoutAdjustment:
    def test_too_easy_twice_from_three(self):
        profile = make_profile(fitness_goal="maintenance")
        plan = _plan_with_sets(profile, 3)
        entry = make_entry(difficulty="too_easy")
        first = adapt(plan, profile, [entry], entry)
        second = adapt(first.plan, profile, [entry, entry], entry)
        assert _all_sets(second.plan) == {5}

    def test_too_easy_clamped_at_six(self):
        profile = make_profile(fitness_goal="maintenance")
        plan = _plan_with_sets(profile, 6)
        entry = make_entry(difficulty="too_easy")
        assert _all_sets(adapt(plan, profile, [entry], entry).plan) == {6}

    def test_too_hard_clamped_at_two(self):
        profile = make_profile(fitness_goal="maintenance")
        plan = _plan_with_sets(profile, 2)
        entry = make_entry(difficulty="too_hard")
        result = adapt(plan, profile, [entry], entry)
        assert _all_sets(result.plan) == {2}
        assert result.changes == [REDUCED_INTENSITY]

    @pytest.mark.parametrize("difficulty", ["just_right", "challenging"])
    def test_neutral_difficulty_keeps_sets(self, difficulty):
        profile = make_profile(fitness_goal="maintenance")
        plan = _plan_with_sets(profile, 4)
        entry = make_entry(difficulty=difficulty)
        assert _all_sets(adapt(plan, profile, [entry], entry).plan) == {4}

    def test_change_reason_recorded_once(self):
        profile = make_profile(fitness_goal="maintenance")
        plan = _plan_with_sets(profile, 3)
        entry = make_entry(difficulty="too_easy")
        assert adapt(plan, profile, [entry], entry).changes == [INCREASED_INTENSITY]


class TestNutritionAdjustment:
    def test_weight_loss_on_track_no_change(self):
        profile = make_profile()
        plan = generate_personalized_plan(profile, random.Random(0))
        history = [make_entry(79.2), make_entry(78.5)]
        result = adapt(plan, profile, history, history[-1])
        assert result.plan.nutrition.summary.calories == 2571
        assert result.changes == []

    def test_fat_loss_stalled_reduces_calories(self):
        profile = make_profile()
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry(80.0)
        result = adapt(plan, profile, [entry], entry)
        assert result.plan.nutrition.summary.calories == 2471
        assert result.changes == [REDUCED_CALORIES]

    def test_fat_loss_too_fast_increases_calories(self):
        profile = make_profile()
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry(78.0)
        result = adapt(plan, profile, [entry], entry)
        assert result.plan.nutrition.summary.calories == 2671
        assert result.changes == [INCREASED_CALORIES]

    def test_muscle_gain_stalled_adds_150(self):
        profile = make_profile(fitness_goal="muscle_gain")
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry(80.0)
        result = adapt(plan, profile, [entry], entry)
        assert result.plan.nutrition.summary.calories == plan.nutrition.summary.calories + 150

    def test_repeated_adaptation_accumulates(self):
        profile = make_profile()
        plan = generate_personalized_plan(profile, random.Random(0))
        history = [make_entry(80.0)]
        first = adapt(plan, profile, history, history[-1])
        history.append(make_entry(80.0))
        second = adapt(first.plan, profile, history, history[-1])
        assert second.plan.nutrition.summary.calories == 2371


class TestAdherence:
    def test_poor_adds_advisory_only(self):
        profile = make_profile(fitness_goal="maintenance")
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry(adherence="poor")
        result = adapt(plan, profile, [entry], entry)
        assert result.changes == [ADHERENCE_ADVISORY]
        assert result.plan == plan

    def test_change_order(self):
        profile = make_profile()
        plan = _plan_with_sets(profile, 3)
        entry = make_entry(80.0, difficulty="too_easy", adherence="poor")
        result = adapt(plan, profile, [entry], entry)
        assert result.changes == [INCREASED_INTENSITY, REDUCED_CALORIES, ADHERENCE_ADVISORY]


class TestValueSemantics:
    def test_input_plan_untouched(self):
        profile = make_profile()
        plan = _plan_with_sets(profile, 3)
        snapshot = plan.model_copy(deep=True)
        entry = make_entry(80.0, difficulty="too_easy")
        result = adapt(plan, profile, [entry], entry)
        assert plan == snapshot
        assert result.plan != snapshot

    def test_neutral_entry_is_identity(self):
        profile = make_profile(fitness_goal="maintenance")
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry(difficulty="just_right", adherence="fair")
        result = adapt(plan, profile, [entry], entry)
        assert result.plan == plan
        assert result.plan is not plan
        assert result.changes == []


class TestNeedsAdaptation:
    def test_needed(self):
        profile = make_profile()
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry(80.0)
        assert needs_adaptation(plan, plan, profile, [entry], entry) == (True, [REDUCED_CALORIES])

    def test_already_applied(self):
        profile = make_profile()
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry(80.0, difficulty="too_easy")
        applied = adapt(plan, profile, [entry], entry).plan
        needed, recommendations = needs_adaptation(plan, applied, profile, [entry], entry)
        assert needed is False
        assert recommendations == [INCREASED_INTENSITY, REDUCED_CALORIES]

    def test_not_needed(self):
        profile = make_profile(fitness_goal="strength")
        plan = generate_personalized_plan(profile, random.Random(0))
        entry = make_entry()
        assert needs_adaptation(plan, plan, profile, [entry], entry) == (False, [])

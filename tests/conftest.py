"""Shared fixtures for the test suite."""

from __future__ import annotations

import random
from datetime import date
from typing import Any

import pytest
from httpx import ASGITransport, AsyncClient

from biosync.engine.models import ProgressEntry, UserProfile
from biosync.main import app
from biosync.store import SessionStore, get_rng, get_store


# ---------------------------------------------------------------------------
# Builders
# ---------------------------------------------------------------------------

REFERENCE_PROFILE: dict[str, Any] = {
    "age": 30,
    "gender": "male",
    "height_cm": 180,
    "weight_kg": 80.0,
    "fitness_goal": "fat_loss",
    "fitness_level": "intermediate",
    "workout_days_per_week": 5,
    "session_duration_minutes": 45,
    "equipment_access": "home",
    "dietary_preference": "omnivore",
}


def make_profile(**overrides: Any) -> UserProfile:
    """Reference profile (30y male, 180cm, 80kg, fat loss) with field overrides."""
    data = dict(REFERENCE_PROFILE)
    data.update(overrides)
    return UserProfile(**data)


def make_entry(
    weight_kg: float = 80.0,
    difficulty: str = "just_right",
    adherence: str = "good",
    entry_date: date | None = None,
) -> ProgressEntry:
    return ProgressEntry(
        entry_date=entry_date or date(2026, 2, 15),
        current_weight_kg=weight_kg,
        workout_difficulty=difficulty,
        adherence_level=adherence,
    )


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture()
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture()
def store() -> SessionStore:
    return SessionStore()


@pytest.fixture()
def override_deps(store):
    """Fresh store and a seeded rng per test, no shared state between tests."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_rng] = lambda: random.Random(7)
    yield store
    app.dependency_overrides.clear()


@pytest.fixture()
async def client(override_deps):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

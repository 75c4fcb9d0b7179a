"""In-memory session store — one UserSession per user, latest state wins.

Routers receive the store and an rng through FastAPI dependencies so tests
can override both.
"""

from __future__ import annotations

import random
import uuid
from dataclasses import dataclass, field

from biosync.config import settings
from biosync.engine.models import PersonalizedPlan, ProgressEntry, UserProfile


@dataclass(slots=True)
class UserSession:
    user_id: str
    profile: UserProfile
    plan: PersonalizedPlan
    history: list[ProgressEntry] = field(default_factory=list)
    # plan as it was before the latest entry was applied
    previous_plan: PersonalizedPlan | None = None


class SessionStore:
    def __init__(self) -> None:
        self._sessions: dict[str, UserSession] = {}

    def create(self, profile: UserProfile, plan: PersonalizedPlan) -> UserSession:
        session = UserSession(user_id=str(uuid.uuid4()), profile=profile, plan=plan)
        self._sessions[session.user_id] = session
        return session

    def get(self, user_id: str) -> UserSession | None:
        return self._sessions.get(user_id)

    def save(self, session: UserSession) -> None:
        self._sessions[session.user_id] = session

    def __len__(self) -> int:
        return len(self._sessions)


_store = SessionStore()


def get_store() -> SessionStore:
    return _store


def get_rng() -> random.Random:
    return random.Random(settings.random_seed)

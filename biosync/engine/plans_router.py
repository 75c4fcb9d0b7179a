"""Plans HTTP router — profile submission, plan lookup, metrics."""

from __future__ import annotations

import logging
import random

from fastapi import APIRouter, Depends, HTTPException

from biosync.auth import verify_api_key
from biosync.engine.metrics import calculate_health_metrics
from biosync.engine.models import HealthMetrics, PersonalizedPlan, UserProfile
from biosync.engine.plans import generate_personalized_plan
from biosync.engine.progress import motivational_message
from biosync.store import SessionStore, UserSession, get_rng, get_store

log = logging.getLogger(__name__)

router = APIRouter(prefix="/plans", tags=["plans"])


def require_session(store: SessionStore, user_id: str) -> UserSession:
    session = store.get(user_id)
    if session is None:
        raise HTTPException(status_code=404, detail=f"Unknown user: {user_id}")
    return session


@router.post("/users", status_code=201)
async def create_user_plan(
    profile: UserProfile,
    store: SessionStore = Depends(get_store),
    rng: random.Random = Depends(get_rng),
    _: str = Depends(verify_api_key),
) -> dict:
    plan = generate_personalized_plan(profile, rng)
    session = store.create(profile, plan)
    log.info(
        "Created plan for user %s (%s, %s)", session.user_id, profile.fitness_goal.value, profile.fitness_level.value
    )
    headline, body = motivational_message("plan_generated", profile)
    return {
        "user_id": session.user_id,
        "plan": plan.model_dump(mode="json"),
        "message": {"headline": headline, "body": body},
    }


@router.get("/users/{user_id}", response_model=PersonalizedPlan)
async def get_user_plan(
    user_id: str,
    store: SessionStore = Depends(get_store),
    _: str = Depends(verify_api_key),
) -> PersonalizedPlan:
    return require_session(store, user_id).plan


@router.post("/metrics", response_model=HealthMetrics)
async def health_metrics(
    profile: UserProfile,
    _: str = Depends(verify_api_key),
) -> HealthMetrics:
    return calculate_health_metrics(profile)

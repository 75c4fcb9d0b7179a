"""Progress HTTP router — entries, adaptation check, analytics."""

from __future__ import annotations

import logging
import random

from fastapi import APIRouter, Depends, HTTPException

from biosync.auth import verify_api_key
from biosync.engine.adaptation import adapt, needs_adaptation
from biosync.engine.models import ProgressEntry, ProgressSummary
from biosync.engine.plans_router import require_session
from biosync.engine.progress import motivational_message, summarize_progress
from biosync.store import SessionStore, get_rng, get_store

log = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


@router.post("/users/{user_id}/entries")
async def submit_progress(
    user_id: str,
    entry: ProgressEntry,
    store: SessionStore = Depends(get_store),
    rng: random.Random = Depends(get_rng),
    _: str = Depends(verify_api_key),
) -> dict:
    session = require_session(store, user_id)
    session.history.append(entry)
    result = adapt(session.plan, session.profile, session.history, entry)
    session.previous_plan, session.plan = session.plan, result.plan
    store.save(session)
    log.info("Progress for user %s: %d entries, changes=%s", user_id, len(session.history), result.changes)
    headline, body = motivational_message("progress_updated", rng=rng)
    return {
        **result.model_dump(mode="json"),
        "message": {"headline": headline, "body": body},
    }


@router.get("/users/{user_id}/adaptation-check")
async def adaptation_check(
    user_id: str,
    store: SessionStore = Depends(get_store),
    _: str = Depends(verify_api_key),
) -> dict:
    """Re-evaluate the latest entry against the plan it was submitted on, storing nothing."""
    session = require_session(store, user_id)
    if not session.history:
        raise HTTPException(status_code=404, detail=f"No progress entries for user: {user_id}")
    needed, recommendations = needs_adaptation(
        session.previous_plan or session.plan,
        session.plan,
        session.profile,
        session.history,
        session.history[-1],
    )
    return {"needs_adaptation": needed, "recommendations": recommendations}


@router.get("/users/{user_id}/analytics", response_model=ProgressSummary)
async def progress_analytics(
    user_id: str,
    store: SessionStore = Depends(get_store),
    _: str = Depends(verify_api_key),
) -> ProgressSummary:
    session = require_session(store, user_id)
    return summarize_progress(session.profile, session.history)

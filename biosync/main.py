import logging

from fastapi import FastAPI

from biosync.config import settings
from biosync.engine.plans_router import router as plans_router
from biosync.engine.progress_router import router as progress_router

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="BioSync", version="0.1.0")
app.include_router(plans_router)
app.include_router(progress_router)


@app.get("/")
async def root() -> dict:
    return {
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "plans": {
            "create": "/plans/users",
            "detail": "/plans/users/{user_id}",
            "metrics": "/plans/metrics",
        },
        "progress": {
            "entries": "/progress/users/{user_id}/entries",
            "adaptation_check": "/progress/users/{user_id}/adaptation-check",
            "analytics": "/progress/users/{user_id}/analytics",
        },
    }


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}

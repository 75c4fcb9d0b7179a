"""API key check shared by the plans and progress routers."""

import secrets

from fastapi import Header, HTTPException

from biosync.config import settings


def _presented_key(x_api_key: str | None, authorization: str | None) -> str | None:
    if x_api_key is not None:
        return x_api_key
    if authorization and authorization.startswith("Bearer "):
        return authorization[7:].strip()
    return None


async def verify_api_key(
    x_api_key: str | None = Header(default=None, alias="X-API-Key"),
    authorization: str | None = Header(default=None),
) -> str:
    """Accept X-API-Key or Authorization: Bearer.

    Open when BIOSYNC_API_KEY is unset; otherwise a mismatch is a 401.
    """
    if settings.api_key is None:
        return ""

    key = _presented_key(x_api_key, authorization)
    if key is None or not secrets.compare_digest(key, settings.api_key):
        raise HTTPException(status_code=401, detail="Invalid or missing API key")
    return key

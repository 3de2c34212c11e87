"""Liveness Probe — answers while the process is up, without touching the store."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/ping", response_class=PlainTextResponse)
async def ping():
    """Basic liveness probe."""
    return "pong"

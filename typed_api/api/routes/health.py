"""Liveness — GET / answers a plain-text greeting while the process is up."""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

router = APIRouter(tags=["health"])


@router.get("/", response_class=PlainTextResponse, description="Liveness check")
async def hello():
    return "Hello World"

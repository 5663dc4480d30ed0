"""Router do plugin — agrega os endpoints expostos ao kernel."""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.plugin.webhook import router as webhook_router

router = APIRouter()

router.include_router(webhook_router)

"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.plugin.router import router as plugin_router


def create_api_router() -> APIRouter:
    """Cria router principal com health check e webhook do plugin.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    api_router.include_router(health_router, tags=["health"])

    # O kernel chama a raiz do deployment
    api_router.include_router(plugin_router, tags=["plugin"])

    return api_router

"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (webhook do plugin, health)
- Validação inicial de request (método, headers)
- Delegação para connectors/coordinators
- Respostas HTTP apropriadas
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]

"""Testes do endpoint de health."""

from __future__ import annotations

import pytest

from api.routes.health.router import SERVICE_VERSION, health_check


@pytest.mark.asyncio
async def test_health_check_returns_healthy() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.version == SERVICE_VERSION
    assert response.service

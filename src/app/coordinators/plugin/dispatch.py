"""Despacho do payload verificado para o runner do plugin."""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.protocols.plugin_runner import PluginRunnerProtocol
    from config.settings.plugin import PluginEnv

logger = logging.getLogger(__name__)


async def dispatch_plugin_payload(
    *,
    payload: dict[str, Any],
    env: PluginEnv,
    runner: PluginRunnerProtocol,
) -> None:
    """Aguarda o runner com o payload mutado; sem timeout nem retry.

    Exceções do runner propagam para o handler da rota (500).

    Args:
        payload: Payload sem `signature`, com `settings` decodificadas
        env: Configuração repassada sem alterações
        runner: Collaborator `run`
    """
    started_at = time.perf_counter()
    await runner(payload, env)
    logger.info(
        "plugin_run_completed",
        extra={
            "event_name": payload.get("eventName", ""),
            "elapsed_ms": round((time.perf_counter() - started_at) * 1000, 2),
        },
    )

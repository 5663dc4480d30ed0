"""Contrato do collaborator `run` (processamento do payload verificado)."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from config.settings.plugin import PluginEnv


class PluginRunnerProtocol(Protocol):
    """Recebe o payload validado + env; retorna ao concluir ou levanta exceção."""

    async def __call__(self, payload: dict[str, Any], env: PluginEnv) -> object:
        ...

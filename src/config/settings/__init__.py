"""Agregador de settings do plugin gate.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.base import (
    BaseSettings,
    Environment,
    get_base_settings,
)
from config.settings.plugin import (
    PEM_FOOTER,
    PEM_HEADER,
    PUBLIC_KEY_ENV_VAR,
    PluginEnv,
    get_plugin_env,
)

__all__ = [
    "PEM_FOOTER",
    "PEM_HEADER",
    "PUBLIC_KEY_ENV_VAR",
    "BaseSettings",
    "Environment",
    "PluginEnv",
    "get_base_settings",
    "get_plugin_env",
]

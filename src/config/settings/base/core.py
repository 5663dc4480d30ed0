"""Settings base do plugin gate: ambiente, nome do serviço e nível de log."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]

_ENVIRONMENT_ALIASES: dict[str, Environment] = {
    "production": "production",
    "prod": "production",
    "staging": "staging",
    "stage": "staging",
}


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do serviço.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço reportado no health check
        log_level: Nível de log do root logger (LOG_LEVEL)
    """

    environment: Environment = "development"
    service_name: str = "plugin-gate"
    log_level: str = "INFO"

    @property
    def strict_validation(self) -> bool:
        """Settings inválidas impedem o boot fora de development."""
        return self.environment != "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        return errors


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    environment = os.getenv("ENVIRONMENT", "development").lower()
    return BaseSettings(
        environment=_ENVIRONMENT_ALIASES.get(environment, "development"),
        service_name=os.getenv("SERVICE_NAME", "plugin-gate"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()

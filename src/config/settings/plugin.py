"""Settings do plugin — chave pública do kernel e ambiente repassado ao runner.

O `PluginEnv` é a struct explícita de configuração entregue ao gate e,
sem alterações, ao collaborator `run`. Nada aqui é lido em tempo de request
a partir de estado global: a rota recebe o env via dependência.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType

PUBLIC_KEY_ENV_VAR = "UBIQUIBOT_PUBLIC_KEY"
PEM_HEADER = "-----BEGIN PUBLIC KEY-----"
PEM_FOOTER = "-----END PUBLIC KEY-----"


@dataclass(frozen=True)
class PluginEnv:
    """Configuração consumida pelo gate e repassada ao runner.

    Attributes:
        public_key_pem: Chave pública RSA (PEM/SPKI) usada na verificação
        expose_error_details: Ecoa o erro no corpo das respostas 500
        values: Snapshot opaco do ambiente do processo (repassado ao runner)
    """

    public_key_pem: str = ""
    expose_error_details: bool = True
    values: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))

    def get(self, key: str, default: str | None = None) -> str | None:
        """Lê uma variável do snapshot de ambiente."""
        return self.values.get(key, default)

    def validate(self) -> list[str]:
        """Valida configurações mínimas do plugin.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.public_key_pem:
            errors.append(f"{PUBLIC_KEY_ENV_VAR} não configurado")
        elif PEM_HEADER not in self.public_key_pem or PEM_FOOTER not in self.public_key_pem:
            errors.append(f"{PUBLIC_KEY_ENV_VAR} não está em formato PEM")

        return errors


def _parse_bool(raw: str | None, default: bool) -> bool:
    if raw is None or not raw.strip():
        return default
    return raw.strip().lower() in ("true", "1", "yes")


def _load_from_env() -> PluginEnv:
    """Carrega PluginEnv a partir de variáveis de ambiente."""
    # Chaves vindas de secrets costumam chegar com "\n" literal
    public_key = os.getenv(PUBLIC_KEY_ENV_VAR, "").replace("\\n", "\n")
    return PluginEnv(
        public_key_pem=public_key,
        expose_error_details=_parse_bool(os.getenv("PLUGIN_EXPOSE_ERROR_DETAILS"), True),
        values=MappingProxyType(dict(os.environ)),
    )


@lru_cache(maxsize=1)
def get_plugin_env() -> PluginEnv:
    """Retorna instância cacheada de PluginEnv.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()

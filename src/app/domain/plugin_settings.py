"""Schema das settings do plugin `/query` e decode com defaults.

As settings chegam do kernel dentro do payload assinado e são definidas
pelo dono do repositório na configuração do plugin.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class PluginSettings(BaseModel):
    """Configuração do plugin por repositório/organização.

    Campos desconhecidos são preservados (o kernel pode enviar chaves de
    versões mais novas do manifesto); tipos são checados sem coerção.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, strict=True)

    allow_public_query: bool = Field(
        default=True,
        alias="allowPublicQuery",
        description="Permite que qualquer usuário consulte dados de outro usuário",
    )


def default_settings() -> dict[str, Any]:
    """Settings com todos os defaults declarados no schema."""
    return PluginSettings().model_dump(by_alias=True)


def decode_settings(raw: Any) -> dict[str, Any]:
    """Aplica defaults do schema e valida as settings recebidas.

    Função pura: não lê configuração nem faz IO.

    Args:
        raw: Objeto `settings` do payload (None/ausente equivale a `{}`)

    Returns:
        Settings decodificadas, serializadas com os nomes do manifesto

    Raises:
        pydantic.ValidationError: Se as settings não respeitarem o schema
    """
    settings = PluginSettings.model_validate({} if raw is None else raw)
    return settings.model_dump(by_alias=True)

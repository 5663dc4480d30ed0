"""Runner padrão do plugin: interpreta o comando `/query @usuario`.

A consulta ao usuário e a resposta no GitHub pertencem ao serviço
downstream; este runner valida os inputs e identifica o comando.

Deployments que executam o comando de fato injetam o próprio runner
(`PluginRunnerProtocol`) sobrescrevendo a dependência
`app.bootstrap.get_plugin_runner`; este módulo é só o default.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from app.domain.plugin_inputs import PluginInputs

if TYPE_CHECKING:
    from config.settings.plugin import PluginEnv

logger = logging.getLogger(__name__)

SUPPORTED_EVENT = "issue_comment.created"

_QUERY_COMMAND = re.compile(r"^\s*/query\s+@?(?P<username>[A-Za-z0-9](?:[A-Za-z0-9-]{0,38}))\b")


@dataclass(frozen=True, slots=True)
class QueryCommand:
    """Comando `/query` extraído de um comentário."""

    username: str
    sender: str
    allow_public_query: bool


def parse_query_command(inputs: PluginInputs) -> QueryCommand | None:
    """Extrai o comando `/query` do comentário, se houver.

    Returns:
        QueryCommand ou None quando o evento/comentário não é um comando
    """
    if inputs.event_name != SUPPORTED_EVENT:
        return None

    match = _QUERY_COMMAND.match(inputs.comment_body)
    if match is None:
        return None

    sender = inputs.event_payload.get("sender")
    sender_login = sender.get("login", "") if isinstance(sender, dict) else ""
    return QueryCommand(
        username=match.group("username"),
        sender=sender_login,
        allow_public_query=inputs.settings.allow_public_query,
    )


async def run(payload: dict[str, Any], env: PluginEnv) -> QueryCommand | None:
    """Processa o payload verificado.

    Args:
        payload: Payload sem `signature`, com `settings` decodificadas
        env: Configuração do processo

    Returns:
        Comando identificado (ou None se o evento não for tratado)

    Raises:
        pydantic.ValidationError: Se os campos do protocolo forem inválidos
    """
    inputs = PluginInputs.model_validate(payload)
    command = parse_query_command(inputs)

    if command is None:
        logger.info(
            "plugin_event_ignored",
            extra={"event_name": inputs.event_name, "state_id": inputs.state_id},
        )
        return None

    logger.info(
        "query_command_received",
        extra={
            "event_name": inputs.event_name,
            "state_id": inputs.state_id,
            "allow_public_query": command.allow_public_query,
            "self_query": command.username.lower() == command.sender.lower(),
        },
    )
    return command

"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida settings e entrega
o runner concreto às rotas via dependências do FastAPI.

Uso:
    from app.bootstrap import initialize_app, get_plugin_runner

    initialize_app()
    runner = get_plugin_runner()
"""

from __future__ import annotations

import logging

from app.observability import get_correlation_id
from app.protocols.plugin_runner import PluginRunnerProtocol
from config.logging import configure_logging
from config.settings import get_base_settings, get_plugin_env

SERVICE_NAME = "plugin_gate"

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    configure_logging(
        level=get_base_settings().log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em DEBUG para testes."""
    configure_logging(
        level="DEBUG",
        service_name=f"{SERVICE_NAME}_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"plugin: {error}" for error in get_plugin_env().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if base.strict_validation:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


def get_plugin_runner() -> PluginRunnerProtocol:
    """Obtém o runner do plugin (dependência da rota de webhook)."""
    from app.use_cases.plugin import run

    return run

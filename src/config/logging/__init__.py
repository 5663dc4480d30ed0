"""Logging estruturado (JSON) do plugin gate.

Uso:
    from config.logging import configure_logging, get_logger

    # No bootstrap
    configure_logging(level="INFO", service_name="plugin_gate")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("plugin_dispatched", extra={"event_name": "issue_comment.created"})

Todo log carrega: asctime, level, logger, message, correlation_id, service.
Nunca logar o payload do webhook nem a assinatura.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import CorrelationIdFilter
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]

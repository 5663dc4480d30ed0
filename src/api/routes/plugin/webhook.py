"""Endpoint de webhook do plugin (chamado pelo kernel).

Fluxo (linear, sem estado entre requests):
1. Método POST e Content-Type `application/json` obrigatórios
2. Parse do JSON, remoção de `signature` e verificação RSA/SHA-256
3. Decode das `settings` com defaults do schema
4. Aguarda o runner com o payload mutado e o env
5. 200 com corpo `"OK"`

Qualquer erro não mapeado vira 500 com o erro no corpo.
"""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse

from api.connectors.plugin.webhook.receive import (
    ALLOWED_METHOD,
    InvalidContentTypeError,
    MethodNotAllowedError,
    SignatureVerificationFailedError,
    parse_webhook_request,
    validate_transport,
)
from app.bootstrap import get_plugin_runner
from app.coordinators.plugin import dispatch_plugin_payload
from app.domain.plugin_settings import decode_settings
from app.observability import (
    CORRELATION_ID_HEADER,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.protocols.plugin_runner import PluginRunnerProtocol
from config.settings import PluginEnv, get_plugin_env

logger = logging.getLogger(__name__)

router = APIRouter()

# Todos os métodos chegam ao handler para que o 405 saia no formato do gate
ROUTED_METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

INTERNAL_ERROR_DETAIL = "internal_error"


def _error_response(
    message: Any,
    status_code: int,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(content={"error": message}, status_code=status_code, headers=headers)


def handle_uncaught_error(exc: Exception, env: PluginEnv) -> JSONResponse:
    """Loga o erro e responde 500.

    Por padrão o corpo ecoa o erro para o chamador; com
    `PLUGIN_EXPOSE_ERROR_DETAILS=false` o corpo é genérico.
    """
    logger.exception(
        "webhook_unhandled_error",
        extra={
            "correlation_id": get_correlation_id(),
            "error_type": type(exc).__name__,
        },
    )
    detail = str(exc) if env.expose_error_details else INTERNAL_ERROR_DETAIL
    return _error_response(detail, status.HTTP_500_INTERNAL_SERVER_ERROR)


@router.api_route("/", methods=ROUTED_METHODS, response_model=None)
async def receive_webhook(
    request: Request,
    env: PluginEnv = Depends(get_plugin_env),
    runner: PluginRunnerProtocol = Depends(get_plugin_runner),
) -> JSONResponse:
    """Recebe o payload assinado do kernel e despacha para o runner.

    Returns:
        JSONResponse com "OK" (200) ou `{"error": ...}` (400/405/500).
    """
    token = set_correlation_id(request.headers.get(CORRELATION_ID_HEADER))

    try:
        validate_transport(request.method, request.headers.get("content-type"))

        raw_body = await request.body()
        payload = parse_webhook_request(raw_body, env.public_key_pem)
        payload["settings"] = decode_settings(payload.get("settings"))

        await dispatch_plugin_payload(payload=payload, env=env, runner=runner)
        return JSONResponse(content="OK", status_code=status.HTTP_200_OK)

    except MethodNotAllowedError as exc:
        return _error_response(
            str(exc),
            status.HTTP_405_METHOD_NOT_ALLOWED,
            headers={"Allow": ALLOWED_METHOD},
        )

    except InvalidContentTypeError as exc:
        return _error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    except SignatureVerificationFailedError as exc:
        logger.warning(
            "webhook_signature_invalid",
            extra={"correlation_id": get_correlation_id(), "reason": "signature_mismatch"},
        )
        return _error_response(str(exc), status.HTTP_400_BAD_REQUEST)

    except Exception as exc:
        return handle_uncaught_error(exc, env)

    finally:
        reset_correlation_id(token)

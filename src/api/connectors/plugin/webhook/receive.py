"""Validação de transporte, parse e verificação de assinatura do webhook.

Nenhuma função aqui loga o payload ou a assinatura.
"""

from __future__ import annotations

import json
from typing import Any

from app.infra.crypto import verify_signature

ALLOWED_METHOD = "POST"
JSON_CONTENT_TYPE = "application/json"
SIGNATURE_FIELD = "signature"


class WebhookRequestError(ValueError):
    """Erro base para falhas de webhook."""


class MethodNotAllowedError(WebhookRequestError):
    """Método HTTP diferente de POST (405)."""

    def __init__(self, method: str) -> None:
        super().__init__("Only POST requests are supported.")
        self.method = method


class InvalidContentTypeError(WebhookRequestError):
    """Content-Type diferente de application/json (400)."""

    def __init__(self, content_type: str | None) -> None:
        # Header ausente aparece como `null`, igual à interpolação do emissor
        rendered = "null" if content_type is None else content_type
        super().__init__(f"Error: {rendered} is not a valid content type")
        self.content_type = content_type


class SignatureVerificationFailedError(WebhookRequestError):
    """Assinatura não confere com a chave pública configurada (400)."""

    def __init__(self) -> None:
        super().__init__("Error: Signature verification failed")


class InvalidJsonError(WebhookRequestError):
    """Corpo não é JSON válido ou não é objeto.

    Não é mapeado para 4xx: segue para o handler de erros não capturados.
    """


def validate_transport(method: str, content_type: str | None) -> None:
    """Exige POST com Content-Type exatamente `application/json`.

    Raises:
        MethodNotAllowedError: Se o método não for POST
        InvalidContentTypeError: Se o Content-Type for outro (sem parâmetros)
    """
    if method != ALLOWED_METHOD:
        raise MethodNotAllowedError(method)
    if content_type != JSON_CONTENT_TYPE:
        raise InvalidContentTypeError(content_type)


def _reject_constant(name: str) -> Any:
    raise InvalidJsonError(f"invalid_json: {name} is not valid JSON")


def parse_json_payload(raw_body: bytes) -> dict[str, Any]:
    """Parseia o corpo bruto como objeto JSON.

    Raises:
        InvalidJsonError: Se o JSON estiver inválido ou não for objeto
    """
    try:
        payload = json.loads(raw_body, parse_constant=_reject_constant)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise InvalidJsonError(f"invalid_json: {exc}") from exc

    if not isinstance(payload, dict):
        raise InvalidJsonError("payload_not_object")

    return payload


def parse_webhook_request(raw_body: bytes, public_key_pem: str) -> dict[str, Any]:
    """Parseia o JSON, remove `signature` e verifica a assinatura.

    O payload retornado é o mesmo objeto parseado, já sem `signature`.

    Args:
        raw_body: Corpo bruto do request
        public_key_pem: Chave pública RSA (PEM) do kernel

    Raises:
        InvalidJsonError: Se o corpo não for um objeto JSON
        SignatureVerificationFailedError: Se a assinatura não conferir
        SignatureDecodeError: Se chave/assinatura forem malformadas

    Returns:
        Payload verificado
    """
    payload = parse_json_payload(raw_body)
    signature = payload.pop(SIGNATURE_FIELD, None)

    if not verify_signature(public_key_pem, payload, signature):
        raise SignatureVerificationFailedError()

    return payload

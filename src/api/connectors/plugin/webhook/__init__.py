"""Webhook do plugin: transporte, parse e assinatura."""

from .receive import (
    ALLOWED_METHOD,
    JSON_CONTENT_TYPE,
    InvalidContentTypeError,
    InvalidJsonError,
    MethodNotAllowedError,
    SignatureVerificationFailedError,
    WebhookRequestError,
    parse_json_payload,
    parse_webhook_request,
    validate_transport,
)

__all__ = [
    "ALLOWED_METHOD",
    "JSON_CONTENT_TYPE",
    "InvalidContentTypeError",
    "InvalidJsonError",
    "MethodNotAllowedError",
    "SignatureVerificationFailedError",
    "WebhookRequestError",
    "parse_json_payload",
    "parse_webhook_request",
    "validate_transport",
]

"""Verificação de assinatura RSASSA-PKCS1-v1_5/SHA-256 do payload do kernel."""

from __future__ import annotations

from typing import Any

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives.asymmetric import padding
from cryptography.hazmat.primitives.hashes import SHA256

from .errors import SignatureDecodeError
from .js_json import stringify
from .keys import decode_base64, load_public_key


def serialize_payload(payload: Any) -> bytes:
    """Serializa o payload assinado no formato do JSON.stringify, em UTF-8."""
    return stringify(payload).encode("utf-8")


def verify_signature(public_key_pem: str, payload: Any, signature: Any) -> bool:
    """Valida assinatura destacada sobre o payload (já sem o campo `signature`).

    Args:
        public_key_pem: Chave pública RSA em PEM
        payload: Objeto JSON assinado
        signature: Assinatura em base64

    Returns:
        True se a assinatura confere, False caso contrário

    Raises:
        SignatureDecodeError: Chave ou assinatura malformadas (não vira False)
    """
    if not isinstance(signature, str):
        raise SignatureDecodeError("Invalid signature: expected base64 string")

    public_key = load_public_key(public_key_pem)
    signature_bytes = decode_base64(signature, what="signature")
    data = serialize_payload(payload)

    try:
        public_key.verify(signature_bytes, data, padding.PKCS1v15(), SHA256())
    except InvalidSignature:
        return False
    return True

"""Importação da chave pública RSA (PEM → SPKI DER → RSAPublicKey)."""

from __future__ import annotations

import base64
import binascii
from functools import lru_cache

from cryptography.hazmat.primitives.asymmetric import rsa
from cryptography.hazmat.primitives.serialization import load_der_public_key

from config.settings.plugin import PEM_FOOTER, PEM_HEADER

from .errors import SignatureDecodeError


def decode_base64(raw_value: str, *, what: str) -> bytes:
    """Decodifica base64 padrão de forma estrita, tolerando padding ausente.

    Args:
        raw_value: Texto base64
        what: Rótulo usado na mensagem de erro ("public key", "signature")

    Raises:
        SignatureDecodeError: Se o valor não for base64 válido
    """
    value = "".join(raw_value.split())
    padded = value + ("=" * (-len(value) % 4))
    try:
        return base64.b64decode(padded, validate=True)
    except (ValueError, binascii.Error) as exc:
        raise SignatureDecodeError(f"Invalid base64 {what}: {exc}") from exc


def pem_to_der(public_key_pem: str) -> bytes:
    """Remove header/footer PEM e espaços, devolvendo o SPKI em DER."""
    body = public_key_pem.replace(PEM_HEADER, "").replace(PEM_FOOTER, "").strip()
    if not body:
        raise SignatureDecodeError("Invalid public key: empty PEM body")
    return decode_base64(body, what="public key")


@lru_cache(maxsize=8)
def load_public_key(public_key_pem: str) -> rsa.RSAPublicKey:
    """Importa chave pública RSA para verificação PKCS#1 v1.5/SHA-256.

    O resultado é cacheado por texto PEM: a chave deriva de configuração
    estática e o objeto importado é somente leitura.

    Args:
        public_key_pem: Chave pública em formato PEM (SubjectPublicKeyInfo)

    Returns:
        Objeto RSAPublicKey

    Raises:
        SignatureDecodeError: Se a chave for inválida ou não for RSA
    """
    der = pem_to_der(public_key_pem)
    try:
        public_key = load_der_public_key(der)
    except (ValueError, TypeError) as exc:
        raise SignatureDecodeError(f"Invalid public key: {exc}") from exc

    if not isinstance(public_key, rsa.RSAPublicKey):
        raise SignatureDecodeError(
            f"Invalid public key: expected RSA, got {type(public_key).__name__}"
        )
    return public_key

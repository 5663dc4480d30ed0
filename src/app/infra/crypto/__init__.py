"""Criptografia da borda do plugin: verificação da assinatura do kernel.

Localizado em app/infra/ para que rotas e coordinators dependam
da mesma implementação concreta.
"""

from .errors import SignatureDecodeError
from .js_json import stringify
from .keys import load_public_key, pem_to_der
from .signature import serialize_payload, verify_signature

__all__ = [
    "SignatureDecodeError",
    "load_public_key",
    "pem_to_der",
    "serialize_payload",
    "stringify",
    "verify_signature",
]

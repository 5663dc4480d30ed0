"""Configuração do pytest para o plugin gate."""

import base64
import json
import sys
from pathlib import Path

import pytest

# Adiciona src/ ao PYTHONPATH para permitir imports absolutos
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from cryptography.hazmat.primitives import serialization  # noqa: E402
from cryptography.hazmat.primitives.asymmetric import padding, rsa  # noqa: E402
from cryptography.hazmat.primitives.hashes import SHA256  # noqa: E402


@pytest.fixture(scope="session")
def private_key() -> rsa.RSAPrivateKey:
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def public_key_pem(private_key: rsa.RSAPrivateKey) -> str:
    return (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("utf-8")
    )


@pytest.fixture(scope="session")
def sign_text(private_key: rsa.RSAPrivateKey):
    """Assina o texto exato produzido pelo JSON.stringify do kernel."""

    def _sign(text: str) -> str:
        raw_signature = private_key.sign(text.encode("utf-8"), padding.PKCS1v15(), SHA256())
        return base64.b64encode(raw_signature).decode("ascii")

    return _sign


@pytest.fixture(scope="session")
def sign_payload(sign_text):
    """Assina o payload como o kernel: JSON compacto sem `signature`, base64."""

    def _sign(payload: dict[str, object]) -> str:
        return sign_text(json.dumps(payload, separators=(",", ":"), ensure_ascii=False))

    return _sign


@pytest.fixture(scope="session")
def js_signed_body(sign_text):
    """Corpo montado a partir do texto JS assinado, com `signature` no fim."""

    def _build(text: str) -> bytes:
        signature = sign_text(text)
        return (text[:-1] + f',"signature":"{signature}"}}').encode("utf-8")

    return _build


@pytest.fixture(scope="session")
def signed_body(sign_payload):
    """Monta o corpo do webhook com `signature` anexada ao payload."""

    def _build(payload: dict[str, object]) -> bytes:
        signed = {**payload, "signature": sign_payload(payload)}
        return json.dumps(signed, ensure_ascii=False).encode("utf-8")

    return _build


@pytest.fixture
def plugin_payload() -> dict[str, object]:
    return {
        "stateId": "state-1",
        "eventName": "issue_comment.created",
        "eventPayload": {
            "comment": {"body": "/query @octocat"},
            "sender": {"login": "monalisa"},
        },
        "settings": {},
        "authToken": "ghs_token",
        "ref": "refs/heads/main",
    }

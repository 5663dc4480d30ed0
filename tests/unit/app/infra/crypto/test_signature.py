"""Testes da verificação RSASSA-PKCS1-v1_5/SHA-256 do payload do kernel."""

from __future__ import annotations

import base64

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from app.infra.crypto import SignatureDecodeError, load_public_key, pem_to_der, verify_signature
from app.infra.crypto.signature import serialize_payload


def _tamper(signature: str) -> str:
    raw = bytearray(base64.b64decode(signature))
    raw[0] ^= 0x01
    return base64.b64encode(bytes(raw)).decode("ascii")


def test_serialize_payload_is_compact_and_keeps_order() -> None:
    payload = {"b": 1, "a": {"z": "ã", "y": [1, 2]}}

    assert serialize_payload(payload) == '{"b":1,"a":{"z":"ã","y":[1,2]}}'.encode()


def test_verify_signature_accepts_valid_signature(public_key_pem, sign_payload) -> None:
    payload = {"eventName": "issue_comment.created", "settings": {}}

    assert verify_signature(public_key_pem, payload, sign_payload(payload)) is True


def test_verify_signature_rejects_altered_signature(public_key_pem, sign_payload) -> None:
    payload = {"eventName": "issue_comment.created", "settings": {}}

    assert verify_signature(public_key_pem, payload, _tamper(sign_payload(payload))) is False


def test_verify_signature_rejects_altered_payload(public_key_pem, sign_payload) -> None:
    signature = sign_payload({"ref": "main"})

    assert verify_signature(public_key_pem, {"ref": "dev"}, signature) is False


def test_verify_signature_depends_on_key_order(public_key_pem, sign_payload) -> None:
    signature = sign_payload({"a": 1, "b": 2})

    assert verify_signature(public_key_pem, {"b": 2, "a": 1}, signature) is False


def test_verify_signature_invalid_base64_signature_raises(public_key_pem) -> None:
    with pytest.raises(SignatureDecodeError, match="Invalid base64 signature"):
        verify_signature(public_key_pem, {}, "%%%not-base64%%%")


def test_verify_signature_missing_signature_raises(public_key_pem) -> None:
    with pytest.raises(SignatureDecodeError, match="expected base64 string"):
        verify_signature(public_key_pem, {}, None)


def test_verify_signature_invalid_key_raises(sign_payload) -> None:
    pem = "-----BEGIN PUBLIC KEY-----\nAAAA\n-----END PUBLIC KEY-----"

    with pytest.raises(SignatureDecodeError, match="Invalid public key"):
        verify_signature(pem, {}, sign_payload({}))


def test_signature_decode_error_is_value_error() -> None:
    assert issubclass(SignatureDecodeError, ValueError)


def test_pem_to_der_strips_markers_and_whitespace(public_key_pem) -> None:
    body = "".join(
        line for line in public_key_pem.splitlines() if not line.startswith("-----")
    )

    assert pem_to_der(public_key_pem) == base64.b64decode(body)


def test_pem_to_der_empty_body_raises() -> None:
    with pytest.raises(SignatureDecodeError, match="empty PEM body"):
        pem_to_der("-----BEGIN PUBLIC KEY-----\n-----END PUBLIC KEY-----")


def test_load_public_key_rejects_non_rsa_key() -> None:
    ec_pem = (
        ec.generate_private_key(ec.SECP256R1())
        .public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode("utf-8")
    )

    with pytest.raises(SignatureDecodeError, match="expected RSA"):
        load_public_key(ec_pem)


def test_load_public_key_is_cached(public_key_pem) -> None:
    assert load_public_key(public_key_pem) is load_public_key(public_key_pem)

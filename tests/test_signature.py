import base64
import hashlib

import pytest
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding

from docseal.core.encrypt import encrypt_depth_1, encrypt_selected
from docseal.core.errors import InvalidSignatureEncoding, MissingData, MissingSignature
from docseal.core.signature import canonical_bytes, digest, sign, verify


def test_canonical_bytes():
    document = {"nice": "to meet you", "ça": [1, {"b": None, "a": True}]}
    assert canonical_bytes(document) == (
        '{"nice":"to meet you","ça":[1,{"b":null,"a":true}]}'.encode()
    )


def test_canonical_form_depends_on_key_order():
    assert canonical_bytes({"a": 1, "b": 2}) != canonical_bytes({"b": 2, "a": 1})


def test_digest_is_sha256_of_canonical_bytes():
    document = {"nice": "to meet you"}
    assert digest(document) == hashlib.sha256(b'{"nice":"to meet you"}').digest()


def test_signature_is_standard_pkcs1v15_sha256(key_pair):
    document = {"nice": "to meet you"}
    signature = base64.b64decode(sign(document, key_pair.private_key))

    assert len(signature) == 256
    # Raises InvalidSignature if not a plain RSASSA-PKCS1-v1_5 SHA-256 signature
    key_pair.public_key.verify(
        signature, canonical_bytes(document), padding.PKCS1v15(), hashes.SHA256()
    )


def test_signature_is_deterministic(key_pair):
    document = {"a": [1, 2, 3]}
    assert sign(document, key_pair.private_key) == sign(document, key_pair.private_key)


@pytest.mark.parametrize(
    "document",
    [{"nice": "to meet you"}, [], "text", None, 12, {"a": {"b": [1, 2.5, False]}}],
)
def test_sign_then_verify(document, key_pair):
    envelope = {"data": document, "signature": sign(document, key_pair.private_key)}
    assert verify(envelope, key_pair.public_key, key_pair.private_key) is True


def test_verify_changed_document(key_pair):
    signature = sign({"nice": "to meet you"}, key_pair.private_key)

    assert verify(
        {"data": {"nice": "to meet you"}, "signature": signature},
        key_pair.public_key,
        key_pair.private_key,
    )
    assert not verify(
        {"data": {"hi": "to meet you"}, "signature": signature},
        key_pair.public_key,
        key_pair.private_key,
    )
    assert not verify(
        {"data": {"nice": "to meet yoU"}, "signature": signature},
        key_pair.public_key,
        key_pair.private_key,
    )


def test_verify_reordered_document_fails(key_pair):
    signature = sign({"a": 1, "b": 2}, key_pair.private_key)
    envelope = {"data": {"b": 2, "a": 1}, "signature": signature}
    assert verify(envelope, key_pair.public_key, key_pair.private_key) is False


def test_verify_decrypts_before_hashing(key_pair):
    document = {"array": [{"bonjour": "heyo"}, "a doe a deer"], "nice": "to meet you"}
    signature = sign(document, key_pair.private_key)

    for encrypted in (
        encrypt_depth_1(document, key_pair.public_key),
        encrypt_selected(document, key_pair.public_key, {"bonjour"}),
    ):
        envelope = {"data": encrypted, "signature": signature}
        assert verify(envelope, key_pair.public_key, key_pair.private_key) is True


def test_verify_with_foreign_signature(key_pair, other_key_pair):
    document = {"nice": "to meet you"}
    envelope = {"data": document, "signature": sign(document, other_key_pair.private_key)}
    assert verify(envelope, key_pair.public_key, key_pair.private_key) is False


def test_verify_truncated_signature_is_mismatch(key_pair):
    envelope = {"data": {"a": 1}, "signature": base64.b64encode(b"short").decode()}
    assert verify(envelope, key_pair.public_key, key_pair.private_key) is False


@pytest.mark.parametrize(
    "envelope, error, message",
    [
        ({"data": "abcdefg"}, MissingSignature, "missing signature"),
        (["data", "signature"], MissingSignature, "missing signature"),
        ({"data": 1, "signature": 5}, InvalidSignatureEncoding, "signature must be a string"),
        (
            {"data": 1, "signature": "%%% not base64"},
            InvalidSignatureEncoding,
            "failed to decode signature",
        ),
        ({"signature": "aGVsbG8="}, MissingData, "missing data"),
    ],
)
def test_verify_malformed_envelope(envelope, error, message, key_pair):
    with pytest.raises(error) as excinfo:
        verify(envelope, key_pair.public_key, key_pair.private_key)
    assert str(excinfo.value) == message


def test_verify_null_data_is_present(key_pair):
    envelope = {"data": None, "signature": sign(None, key_pair.private_key)}
    assert verify(envelope, key_pair.public_key, key_pair.private_key) is True

import base64
from collections.abc import Set
from enum import StrEnum

from cryptography.hazmat.primitives.asymmetric import padding, rsa

from docseal.core.document import Document, dumps, unsupported
from docseal.core.errors import EncryptionFailed, NotAnObject
from docseal.shared import Logger

logger = Logger(__name__).get_logger()


class EncryptionPolicy(StrEnum):
    SELECTIVE = "selective"
    DEPTH_1 = "depth_1"  # legacy: every first-level value, unconditionally


def encrypt_value(value: Document, public_key: rsa.RSAPublicKey) -> str:
    """Encrypt the JSON form of ``value`` and base64 encode the ciphertext.

    A single RSA block is used, so the JSON form must fit in the key's
    PKCS#1 v1.5 payload (245 bytes for a 2048-bit key).
    """
    plaintext = dumps(value).encode("utf-8")
    try:
        ciphertext = public_key.encrypt(plaintext, padding.PKCS1v15())
    except ValueError as e:
        logger.warning("Failed to encrypt %d byte value: %s", len(plaintext), e)
        raise EncryptionFailed("failed to encrypt") from e
    return base64.b64encode(ciphertext).decode("ascii")


def encrypt_depth_1(document: Document, public_key: rsa.RSAPublicKey) -> Document:
    if not isinstance(document, dict):
        raise NotAnObject("data must be a json map on the first level")
    return {key: encrypt_value(value, public_key) for key, value in document.items()}


def encrypt_selected(
    document: Document, public_key: rsa.RSAPublicKey, fields: Set[str]
) -> Document:
    """Encrypt every mapping entry whose key is in ``fields``, at any depth.

    An encrypted entry is not descended into. Sequence elements are always
    descended into; selection only ever applies through a mapping key.
    """
    match document:
        case dict():
            return {
                key: (
                    encrypt_value(value, public_key)
                    if key in fields
                    else encrypt_selected(value, public_key, fields)
                )
                for key, value in document.items()
            }
        case list():
            return [encrypt_selected(item, public_key, fields) for item in document]
        case None | bool() | int() | float() | str():
            return document
        case _:
            unsupported(document)

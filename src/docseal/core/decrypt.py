"""Best-effort decryption of documents.

Nothing marks a string as encrypted. Every string held in a mapping is tried
against the private key, and anything that does not survive base64, RSA,
UTF-8 and JSON decoding in turn is taken to be plain text and kept as is.
"""

import base64
from dataclasses import dataclass

from cryptography.hazmat.primitives.asymmetric import padding, rsa

from docseal.core.document import Document, parse, unsupported
from docseal.core.errors import MalformedInput
from docseal.shared import Logger

logger = Logger(__name__).get_logger()


@dataclass(frozen=True, slots=True)
class Decrypted:
    # Wrapped so a decrypted JSON null is not mistaken for a failed attempt
    value: Document


def try_decrypt(text: str, private_key: rsa.RSAPrivateKey) -> Decrypted | None:
    try:
        ciphertext = base64.b64decode(text, validate=True)
        plaintext = private_key.decrypt(ciphertext, padding.PKCS1v15())
        return Decrypted(parse(plaintext.decode("utf-8")))
    except (ValueError, MalformedInput) as e:  # binascii and unicode errors included
        logger.debug("Left value as is, not decryptable: %s", e)
        return None


def _decrypt_entry(value: Document, private_key: rsa.RSAPrivateKey) -> Document:
    if isinstance(value, str):
        decrypted = try_decrypt(value, private_key)
        if decrypted is None:
            return value
        return detect_and_decrypt(decrypted.value, private_key)
    return detect_and_decrypt(value, private_key)


def detect_and_decrypt(document: Document, private_key: rsa.RSAPrivateKey) -> Document:
    """Return a copy of ``document`` with every decryptable mapping value restored."""
    match document:
        case dict():
            return {
                key: _decrypt_entry(value, private_key)
                for key, value in document.items()
            }
        case list():
            return [detect_and_decrypt(item, private_key) for item in document]
        case None | bool() | int() | float() | str():
            return document
        case _:
            unsupported(document)

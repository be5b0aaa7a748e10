import base64
import binascii

from cryptography.exceptions import InvalidSignature
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import padding, rsa, utils

from docseal.core.decrypt import detect_and_decrypt
from docseal.core.document import Document, dumps
from docseal.core.errors import (
    InvalidSignatureEncoding,
    MissingData,
    MissingSignature,
    SigningFailed,
)
from docseal.shared import Logger

logger = Logger(__name__).get_logger()


def canonical_bytes(document: Document) -> bytes:
    return dumps(document).encode("utf-8")


def digest(document: Document) -> bytes:
    hasher = hashes.Hash(hashes.SHA256())
    hasher.update(canonical_bytes(document))
    return hasher.finalize()


def sign(document: Document, private_key: rsa.RSAPrivateKey) -> str:
    """
    Signs the SHA-256 digest of the document's canonical form.
    Returns the base64-encoded PKCS#1 v1.5 signature.
    """
    try:
        signature = private_key.sign(
            digest(document), padding.PKCS1v15(), utils.Prehashed(hashes.SHA256())
        )
    except ValueError as e:
        raise SigningFailed("failed to sign") from e

    logger.debug("Document signed.")
    return base64.b64encode(signature).decode("ascii")


def verify(
    envelope: Document,
    public_key: rsa.RSAPublicKey,
    decryption_key: rsa.RSAPrivateKey,
) -> bool:
    """
    Verifies a ``{"data": ..., "signature": ...}`` envelope.

    NOTE: ``data`` is decrypted with ``decryption_key`` before it is hashed,
    so the signature covers the plaintext and a verifier must also hold the
    private key. This is not a standard detached signature check.

    Raises a ShapeError for a malformed envelope. A signature that does not
    match returns False.
    """
    if not isinstance(envelope, dict) or "signature" not in envelope:
        raise MissingSignature("missing signature")

    signature = envelope["signature"]
    if not isinstance(signature, str):
        raise InvalidSignatureEncoding("signature must be a string")
    try:
        signature_bytes = base64.b64decode(signature, validate=True)
    except binascii.Error as e:
        raise InvalidSignatureEncoding("failed to decode signature") from e

    if "data" not in envelope:
        raise MissingData("missing data")

    data = detect_and_decrypt(envelope["data"], decryption_key)

    try:
        public_key.verify(
            signature_bytes,
            digest(data),
            padding.PKCS1v15(),
            utils.Prehashed(hashes.SHA256()),
        )
    except InvalidSignature:
        logger.warning("Signature verification failed.")
        return False

    logger.info("Signature verification successful.")
    return True

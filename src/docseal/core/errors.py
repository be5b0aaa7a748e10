"""Failures raised by the document engine.

The engine never raises HTTP errors; the transport layer maps these onto
status codes. ``detect_and_decrypt`` is the one place where cryptographic and
encoding failures are swallowed instead of raised.
"""


class DocumentError(Exception):
    """Base class for every failure the caller can fix by changing its input."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class MalformedInput(DocumentError):
    """Input is not parseable as a document at all."""


class ShapeError(DocumentError):
    """Document parsed, but does not have the structure an operation needs."""


class NotAnObject(ShapeError): ...


class MissingField(ShapeError): ...


class WrongType(ShapeError): ...


class MissingSignature(ShapeError): ...


class MissingData(ShapeError): ...


class InvalidSignatureEncoding(ShapeError): ...


class CryptoError(DocumentError):
    """The underlying cipher or signature primitive reported a failure."""


class EncryptionFailed(CryptoError): ...


class SigningFailed(CryptoError): ...

from .serde_base import SerdeBase


class SignatureResponse(SerdeBase):
    signature: str  # Base64-encoded signature

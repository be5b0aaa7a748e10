from .document_body import DocumentBody, RequestDocument
from .serde_base import SerdeBase
from .signature import SignatureResponse

__all__ = [
    "DocumentBody",
    "RequestDocument",
    "SerdeBase",
    "SignatureResponse",
]

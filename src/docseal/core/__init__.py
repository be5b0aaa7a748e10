# Document engine: parsing, field encryption, opportunistic decryption,
# signing and verification. Nothing in here knows about HTTP.
from .document import Document, dumps, parse
from .engine import DocumentEngine
from .encrypt import EncryptionPolicy
from .keys import KeyPair, load_or_generate
from .selector import FieldSelector

__all__ = [
    "Document",
    "DocumentEngine",
    "EncryptionPolicy",
    "FieldSelector",
    "KeyPair",
    "dumps",
    "load_or_generate",
    "parse",
]

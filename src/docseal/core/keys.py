from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import rsa

from docseal.shared import Logger

logger = Logger(__name__).get_logger()

DEFAULT_KEY_SIZE = 2048
PUBLIC_EXPONENT = 65537


@dataclass(frozen=True)
class KeyPair:
    """RSA key pair shared read-only by every engine operation."""

    public_key: rsa.RSAPublicKey
    private_key: rsa.RSAPrivateKey

    @classmethod
    def generate(cls, bits: int = DEFAULT_KEY_SIZE) -> "KeyPair":
        private_key = rsa.generate_private_key(
            public_exponent=PUBLIC_EXPONENT, key_size=bits
        )
        return cls(public_key=private_key.public_key(), private_key=private_key)

    def public_pem(self) -> bytes:
        return self.public_key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )

    def private_pem(self) -> bytes:
        return self.private_key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )

    def is_matching(self) -> bool:
        return self.public_key.public_numbers() == self.private_key.public_key().public_numbers()


def _read_public_key(path: Path) -> rsa.RSAPublicKey | None:
    try:
        key = serialization.load_pem_public_key(path.read_bytes())
    except (OSError, ValueError, UnsupportedAlgorithm) as e:
        logger.debug("Could not load public key from %s: %s", path, e)
        return None
    return key if isinstance(key, rsa.RSAPublicKey) else None


def _read_private_key(path: Path) -> rsa.RSAPrivateKey | None:
    try:
        key = serialization.load_pem_private_key(path.read_bytes(), password=None)
    except (OSError, ValueError, TypeError, UnsupportedAlgorithm) as e:
        logger.debug("Could not load private key from %s: %s", path, e)
        return None
    return key if isinstance(key, rsa.RSAPrivateKey) else None


def load_or_generate(
    public_file: PathLike | str,
    private_file: PathLike | str,
    bits: int = DEFAULT_KEY_SIZE,
) -> KeyPair:
    """Load the key pair from its two PEM files.

    If either file is missing, unparsable, not RSA, or the two halves do
    not belong together, a fresh pair is generated and both files are
    overwritten.
    """
    public_path, private_path = Path(public_file), Path(private_file)

    public_key = _read_public_key(public_path)
    private_key = _read_private_key(private_path)

    if public_key is not None and private_key is not None:
        keys = KeyPair(public_key=public_key, private_key=private_key)
        if keys.is_matching():
            logger.info("Loaded key pair from %s and %s", public_path, private_path)
            return keys
        logger.warning("Public and private key files do not match.")

    logger.info("Generating a new %d-bit key pair", bits)
    keys = KeyPair.generate(bits)
    public_path.write_bytes(keys.public_pem())
    private_path.write_bytes(keys.private_pem())
    logger.info("Key pair written to %s and %s", public_path, private_path)
    return keys

from docseal.core import signature
from docseal.core.decrypt import detect_and_decrypt
from docseal.core.document import Document
from docseal.core.encrypt import EncryptionPolicy, encrypt_depth_1, encrypt_selected
from docseal.core.keys import KeyPair
from docseal.core.selector import FieldSelector
from docseal.shared import Logger

logger = Logger(__name__).get_logger()


class DocumentEngine:
    """Binds a key pair and a field selection to the document operations.

    The key pair is immutable and the selector carries its own locking, so one
    engine can serve every request concurrently.
    """

    def __init__(
        self,
        keys: KeyPair,
        selector: FieldSelector | None = None,
        policy: EncryptionPolicy | str = EncryptionPolicy.SELECTIVE,
    ):
        self.keys = keys
        self.selector = selector if selector is not None else FieldSelector()
        self.policy = EncryptionPolicy(policy)

    def encrypt(
        self, document: Document, policy: EncryptionPolicy | None = None
    ) -> Document:
        policy = EncryptionPolicy(policy or self.policy)
        logger.debug("Encrypting document with %s policy", policy)

        if policy is EncryptionPolicy.DEPTH_1:
            return encrypt_depth_1(document, self.keys.public_key)
        return encrypt_selected(
            document, self.keys.public_key, self.selector.snapshot()
        )

    def decrypt(self, document: Document) -> Document:
        return detect_and_decrypt(document, self.keys.private_key)

    def sign(self, document: Document) -> str:
        return signature.sign(document, self.keys.private_key)

    def verify(self, envelope: Document) -> bool:
        # Needs the private key as well, see signature.verify
        return signature.verify(
            envelope, self.keys.public_key, decryption_key=self.keys.private_key
        )

    def configure(self, document: Document):
        self.selector.set_fields(document)

from collections.abc import Iterable
from threading import Lock

from docseal.core.document import Document
from docseal.core.errors import MissingField, WrongType
from docseal.shared import Logger

logger = Logger(__name__).get_logger()

CONFIG_KEY = "fieldsToEncrypt"


class FieldSelector:
    """Field names eligible for selective encryption.

    The selection is held as an immutable snapshot. Writers build a new
    snapshot and swap the reference under a lock, so concurrent writers are
    serialized while readers never wait and never see a partial list.
    """

    def __init__(self, fields: Iterable[str] = ()):
        self.__lock = Lock()
        fields = tuple(fields)
        # Ordered names and their set, swapped together in one assignment
        self.__selection: tuple[tuple[str, ...], frozenset[str]] = (
            fields,
            frozenset(fields),
        )

    @property
    def fields(self) -> tuple[str, ...]:
        return self.__selection[0]

    def snapshot(self) -> frozenset[str]:
        return self.__selection[1]

    def __contains__(self, name: object) -> bool:
        return name in self.__selection[1]

    def replace(self, fields: Iterable[str]):
        new_fields = tuple(fields)
        with self.__lock:
            self.__selection = (new_fields, frozenset(new_fields))
        logger.info("Field selection replaced: %s", list(new_fields))

    def set_fields(self, document: Document):
        """Replace the selection from a ``{"fieldsToEncrypt": [...]}`` document."""
        if not isinstance(document, dict):
            raise WrongType("config must be a json map")
        if CONFIG_KEY not in document:
            raise MissingField(f"missing {CONFIG_KEY}")

        fields = document[CONFIG_KEY]
        if not isinstance(fields, list):
            raise WrongType(f"{CONFIG_KEY} must be an array")
        if not all(isinstance(field, str) for field in fields):
            raise WrongType(f"{CONFIG_KEY} must only contain strings")

        self.replace(fields)

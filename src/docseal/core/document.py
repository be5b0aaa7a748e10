"""JSON document model shared by every engine operation.

Mapping key order is preserved from parse to serialization, which makes the
serialized form usable as the canonical form for signatures.
"""

import json
import math
from typing import NoReturn

from .errors import MalformedInput

type Document = (
    None | bool | int | float | str | list[Document] | dict[str, Document]
)


# Traversals recurse in Python, a few frames per level
MAX_DEPTH = 128


def _reject_constant(name: str) -> NoReturn:
    raise ValueError(f"{name} is not a valid JSON value")


def _parse_float(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"number out of range: {text}")
    return value


def depth(document: Document) -> int:
    """Number of nested containers on the deepest path; 0 for a scalar."""
    deepest = 0
    stack = [(document, 1)]
    while stack:
        value, level = stack.pop()
        match value:
            case dict():
                children = value.values()
            case list():
                children = value
            case _:
                continue
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in children)
    return deepest


def parse(text: str | bytes) -> Document:
    """Parse JSON text into a document.

    Raises MalformedInput with the parser's position-specific message,
    e.g. ``Expecting value: line 1 column 1 (char 0)`` for an empty body,
    or when containers nest deeper than MAX_DEPTH.
    """
    try:
        document = json.loads(
            text, parse_constant=_reject_constant, parse_float=_parse_float
        )
    except RecursionError as e:
        raise MalformedInput("document is nested too deeply") from e
    except ValueError as e:  # JSONDecodeError and UnicodeDecodeError included
        raise MalformedInput(str(e)) from e

    if depth(document) > MAX_DEPTH:
        raise MalformedInput("document is nested too deeply")
    return document


def dumps(document: Document) -> str:
    """Compact JSON, non-ASCII kept verbatim, keys in insertion order."""
    return json.dumps(
        document, separators=(",", ":"), ensure_ascii=False, allow_nan=False
    )


def unsupported(value: object) -> NoReturn:
    raise TypeError(f"not a document value: {type(value).__name__}")

"""Parsed JSON documents returned by resource methods."""

import json
from collections.abc import Iterator
from typing import Any

from gitlab_rest.errors import DocumentTypeError, ParseError

OBJECT = "object"
ARRAY = "array"
STRING = "string"
NUMBER = "number"
BOOL = "bool"
NULL = "null"


def _kind_of(value: Any) -> str:
    # bool is checked before number since bool subclasses int
    if value is None:
        return NULL
    if isinstance(value, bool):
        return BOOL
    if isinstance(value, int | float):
        return NUMBER
    if isinstance(value, str):
        return STRING
    if isinstance(value, list):
        return ARRAY
    if isinstance(value, dict):
        return OBJECT
    raise DocumentTypeError(f"Unsupported JSON value of type {type(value).__name__}")


class Document:
    """A JSON value tagged with its kind.

    Indexing an object by key or an array by position returns another
    Document. The ``as_*`` accessors unwrap the value and raise
    DocumentTypeError when the kind does not match, so callers never get a
    silently wrong type back.

    Example:
        ```python
        users = client.users()
        users[0]["email"].as_str()
        ```
    """

    __slots__ = ("_value", "_kind")

    def __init__(self, value: Any) -> None:
        self._kind = _kind_of(value)
        self._value = value

    @classmethod
    def parse(cls, text: str) -> "Document":
        """Decode a JSON text into a Document.

        Raises:
            ParseError: If the text is empty or not valid JSON
        """
        if not text or not text.strip():
            raise ParseError("Expected a JSON body, got an empty response")
        try:
            return cls(json.loads(text))
        except json.JSONDecodeError as e:
            raise ParseError(f"Invalid JSON body: {e}") from e

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def value(self) -> Any:
        """The underlying Python value (dict, list, str, int, float, bool or None)."""
        return self._value

    def _expect(self, *kinds: str) -> None:
        if self._kind not in kinds:
            raise DocumentTypeError(f"Expected {' or '.join(kinds)}, got {self._kind}")

    def is_null(self) -> bool:
        return self._kind == NULL

    def as_dict(self) -> dict[str, Any]:
        self._expect(OBJECT)
        return self._value

    def as_list(self) -> list[Any]:
        self._expect(ARRAY)
        return self._value

    def as_str(self) -> str:
        self._expect(STRING)
        return self._value

    def as_int(self) -> int:
        self._expect(NUMBER)
        if isinstance(self._value, float):
            if not self._value.is_integer():
                raise DocumentTypeError(f"Expected an integer, got {self._value}")
            return int(self._value)
        return self._value

    def as_float(self) -> float:
        self._expect(NUMBER)
        return float(self._value)

    def as_bool(self) -> bool:
        self._expect(BOOL)
        return self._value

    def get(self, key: str, default: Any = None) -> "Document":
        """Return the member ``key`` of an object, or ``default`` wrapped as a Document."""
        self._expect(OBJECT)
        if key in self._value:
            return Document(self._value[key])
        return Document(default)

    def keys(self) -> list[str]:
        return list(self.as_dict().keys())

    def __getitem__(self, key: str | int) -> "Document":
        if isinstance(key, str):
            self._expect(OBJECT)
            try:
                return Document(self._value[key])
            except KeyError:
                raise KeyError(key) from None
        if isinstance(key, int) and not isinstance(key, bool):
            self._expect(ARRAY)
            return Document(self._value[key])
        raise DocumentTypeError(f"Document keys must be str or int, got {type(key).__name__}")

    def __contains__(self, item: Any) -> bool:
        self._expect(OBJECT, ARRAY)
        if self._kind == OBJECT:
            return item in self._value
        return any(Document(element) == item for element in self._value)

    def __len__(self) -> int:
        self._expect(OBJECT, ARRAY, STRING)
        return len(self._value)

    def __iter__(self) -> Iterator["Document"]:
        """Iterate array elements, or object keys wrapped as Documents."""
        self._expect(OBJECT, ARRAY)
        for element in self._value:
            yield Document(element)

    def __bool__(self) -> bool:
        return bool(self._value)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Document):
            return self._kind == other._kind and self._value == other._value
        return self._value == other

    # Equality compares against raw values and the wrapped value may be mutable
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Document({self._value!r})"

    def __str__(self) -> str:
        if self._kind == STRING:
            return self._value
        return json.dumps(self._value)

"""Encoding and decoding error taxonomies.

The two hierarchies are disjoint: :class:`JSONEncodingError` for the
outbound direction, :class:`JSONDecodingError` for the inbound one.
"""
from __future__ import annotations

from typing import Any


# ---------------------------------------------------------------------------
class JSONEncodingError(RuntimeError):
    """Raised when a value cannot be encoded into JSON."""
    pass


class UnencodableType(JSONEncodingError):
    def __init__(self, type_: Any):
        self.type_ = type_
        name = getattr(type_, "__qualname__", None) or repr(type_)
        super().__init__(f"Unencodable type: {name}")


class FailedToCreateFile(JSONEncodingError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Failed to create file at {path}")


class EncodingDepthExceeded(JSONEncodingError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Encoding nested deeper than {limit} levels")


# ---------------------------------------------------------------------------
class JSONDecodingError(RuntimeError):
    """Raised when JSON input does not have the expected shape."""
    pass


class MissingKey(JSONDecodingError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Missing key: {key!r}")


class InvalidURL(JSONDecodingError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Invalid URL: {value!r}")


class UnexpectedArrayElement(JSONDecodingError):
    def __init__(self, element: Any):
        self.element = element
        super().__init__(f"Unexpected array element: {element!r}")


class FileNotFound(JSONDecodingError):
    def __init__(self, path: str):
        self.path = path
        super().__init__(f"File not found: {path}")


class BadDictionary(JSONDecodingError):
    def __init__(self, key: str):
        self.key = key
        super().__init__(f"Dictionary at {key!r} has non-string values")


class DecodingDepthExceeded(JSONDecodingError):
    def __init__(self, limit: int):
        self.limit = limit
        super().__init__(f"Decoding nested deeper than {limit} levels")

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional
from urllib.parse import SplitResult, urlsplit

# RFC 3986 문자 집합 + 올바른 %HH 이스케이프만 허용
_URL_TEXT = re.compile(r"(?:[A-Za-z0-9\-._~:/?#\[\]@!$&'()*+,;=]|%[0-9A-Fa-f]{2})+")


@dataclass(frozen=True)
class URL:
    """A parsed URL reference that keeps its original text.

    Relative references are accepted; empty text, whitespace, characters
    outside RFC 3986 and broken percent escapes are not.
    """

    text: str
    parts: SplitResult = field(compare=False, repr=False)

    @classmethod
    def parse(cls, text: str) -> Optional["URL"]:
        if not _URL_TEXT.fullmatch(text):
            return None
        try:
            parts = urlsplit(text)
        except ValueError:  # e.g. unbalanced IPv6 brackets
            return None
        return cls(text, parts)

    @property
    def absolute_string(self) -> str:
        return self.text

    @property
    def scheme(self) -> str:
        return self.parts.scheme

    @property
    def host(self) -> Optional[str]:
        return self.parts.hostname

    def __str__(self) -> str:
        return self.text

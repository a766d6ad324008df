"""The book record shared by every layer of the service."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping


@dataclass(frozen=True)
class Book:
    """A book as stored and served; missing fields take their zero values."""

    id: str = ""
    title: str = ""
    author: str = ""
    pages: int = 0

    def is_empty(self) -> bool:
        """Return True when every field still holds its zero value."""
        return self == Book()

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON object form of the book."""
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "pages": self.pages,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Book":
        """Build a book from a decoded JSON object.

        Unknown keys are ignored and absent or null keys keep their zero
        value. A key holding a value of the wrong type raises ValueError.
        """
        if not isinstance(data, Mapping):
            raise ValueError("book must be a JSON object")
        fields: dict[str, Any] = {}
        for name in ("id", "title", "author"):
            value = data.get(name)
            if value is None:
                continue
            if not isinstance(value, str):
                raise ValueError(f"field {name!r} must be a string")
            fields[name] = value
        pages = data.get("pages")
        if pages is not None:
            if isinstance(pages, bool) or not isinstance(pages, int):
                raise ValueError("field 'pages' must be an integer")
            fields["pages"] = pages
        return cls(**fields)
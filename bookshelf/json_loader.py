"""Reading and writing the JSON file that holds the book collection."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Union

from .domain import Book

PathLike = Union[str, Path]

DEFAULT_BOOKS_PATH = Path("books.json")


def _load_array(path: PathLike) -> list:
    text = Path(path).read_text(encoding="utf-8")
    if not text.strip():
        return []
    data = json.loads(text)
    if not isinstance(data, list):
        raise ValueError(f"{path}: expected a JSON array of books")
    return data


def read_book_list(path: PathLike = DEFAULT_BOOKS_PATH) -> list[Book]:
    """Return the books in the file, in file order."""
    return [Book.from_dict(item) for item in _load_array(path)]


def read_book_map(path: PathLike = DEFAULT_BOOKS_PATH) -> dict[str, Book]:
    """Return the books in the file keyed by id; later entries win."""
    return {book.id: book for book in read_book_list(path)}


def write_book_list(path: PathLike, books: Iterable[Book]) -> None:
    """Replace the file's contents with the given books as a compact array."""
    payload = json.dumps(
        [book.to_dict() for book in books],
        separators=(",", ":"),
        ensure_ascii=False,
    )
    Path(path).write_text(payload, encoding="utf-8")
"""Storage back ends for books: an in-memory map and a JSON file."""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from dataclasses import replace
from pathlib import Path
from typing import Optional, Union

from .domain import Book
from .json_loader import read_book_list, write_book_list


class RepositoryError(Exception):
    """A repository could not complete an operation."""


class BookNotFoundError(RepositoryError, LookupError):
    """No book has the requested id."""

    def __init__(self, message: str = "book not found") -> None:
        super().__init__(message)


class Repository(ABC):
    """Operations every book store provides."""

    @abstractmethod
    def create_book(self, book: Book) -> Book:
        """Store the book under a fresh id and return the stored copy."""

    @abstractmethod
    def get_books(self) -> list[Book]:
        """Return every stored book."""

    @abstractmethod
    def get_by_id(self, book_id: str) -> Book:
        """Return the book with that id, or an empty Book if there is none."""

    @abstractmethod
    def remove_by_id(self, book_id: str) -> None:
        """Delete the book with that id; raise BookNotFoundError if absent."""

    @abstractmethod
    def update_by_id(self, book_id: str, book: Book) -> Book:
        """Replace the book with that id; raise BookNotFoundError if absent."""


def _new_id() -> str:
    return str(uuid.uuid4())


class MemoryRepository(Repository):
    """Books kept in a dict keyed by id."""

    def __init__(self, books: Optional[dict[str, Book]] = None) -> None:
        self._books = books if books is not None else {}

    def create_book(self, book: Book) -> Book:
        stored = replace(book, id=_new_id())
        self._books[stored.id] = stored
        return stored

    def get_books(self) -> list[Book]:
        return list(self._books.values())

    def get_by_id(self, book_id: str) -> Book:
        return self._books.get(book_id, Book())

    def remove_by_id(self, book_id: str) -> None:
        if book_id not in self._books:
            raise BookNotFoundError()
        del self._books[book_id]

    def update_by_id(self, book_id: str, book: Book) -> Book:
        if book_id not in self._books:
            raise BookNotFoundError()
        stored = replace(book, id=book_id)
        self._books[book_id] = stored
        return stored


class JsonRepository(Repository):
    """Books kept in a JSON file that is re-read on every operation."""

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def _save(self, books: list[Book], failure: str) -> None:
        try:
            write_book_list(self.path, books)
        except OSError as exc:
            raise RepositoryError(failure) from exc

    def _index_of(self, books: list[Book], book_id: str) -> int:
        for position, stored in enumerate(books):
            if stored.id == book_id:
                return position
        raise BookNotFoundError()

    def create_book(self, book: Book) -> Book:
        books = read_book_list(self.path)
        stored = replace(book, id=_new_id())
        books.append(stored)
        self._save(books, "error on save new book on repository")
        return stored

    def get_books(self) -> list[Book]:
        return read_book_list(self.path)

    def get_by_id(self, book_id: str) -> Book:
        return next(
            (stored for stored in read_book_list(self.path) if stored.id == book_id),
            Book(),
        )

    def remove_by_id(self, book_id: str) -> None:
        books = read_book_list(self.path)
        del books[self._index_of(books, book_id)]
        self._save(books, "error on remove book on repository")

    def update_by_id(self, book_id: str, book: Book) -> Book:
        books = read_book_list(self.path)
        del books[self._index_of(books, book_id)]
        stored = replace(book, id=book_id)
        books.append(stored)
        self._save(books, "error on remove book on repository")
        return stored
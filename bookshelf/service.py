"""Application service that sits between the HTTP layer and a repository."""

from __future__ import annotations

from .domain import Book
from .repository import Repository


class BookService:
    """Book use cases, delegated to a repository.

    Repository errors propagate unchanged to the caller.
    """

    def __init__(self, repository: Repository) -> None:
        self.repository = repository

    def create_book(self, book: Book) -> Book:
        """Store a new book and return it with its assigned id."""
        return self.repository.create_book(book)

    def get_books(self) -> list[Book]:
        """Return every stored book."""
        return self.repository.get_books()

    def get_by_id(self, book_id: str) -> Book:
        """Return the book with that id, or an empty Book if there is none."""
        return self.repository.get_by_id(book_id)

    def remove_by_id(self, book_id: str) -> None:
        """Delete the book with that id."""
        self.repository.remove_by_id(book_id)

    def update_by_id(self, book_id: str, book: Book) -> Book:
        """Replace the book with that id and return the stored copy."""
        return self.repository.update_by_id(book_id, book)
import pytest

from bookshelf.domain import Book
from bookshelf.repository import (
    BookNotFoundError,
    MemoryRepository,
    Repository,
    RepositoryError,
)
from bookshelf.service import BookService


class _BrokenRepository(Repository):
    def create_book(self, book):
        raise RepositoryError("error on save new book on repository")

    def get_books(self):
        raise RepositoryError("cannot list")

    def get_by_id(self, book_id):
        raise RepositoryError("cannot read")

    def remove_by_id(self, book_id):
        raise RepositoryError("error on remove book on repository")

    def update_by_id(self, book_id, book):
        raise RepositoryError("error on remove book on repository")


@pytest.fixture
def service():
    return BookService(MemoryRepository({}))


def test_create_assigns_id_and_keeps_fields(service):
    created = service.create_book(Book(title="Dune", author="Herbert", pages=412))
    assert created.id
    assert (created.title, created.author, created.pages) == ("Dune", "Herbert", 412)


def test_created_book_is_listed_and_fetchable(service):
    created = service.create_book(Book(title="Emma"))
    assert service.get_books() == [created]
    assert service.get_by_id(created.id) == created


def test_get_missing_returns_empty_book(service):
    assert service.get_by_id("missing").is_empty()


def test_remove_deletes_book(service):
    created = service.create_book(Book(title="Emma"))
    service.remove_by_id(created.id)
    assert service.get_books() == []
    assert service.get_by_id(created.id).is_empty()


def test_remove_missing_raises(service):
    with pytest.raises(BookNotFoundError):
        service.remove_by_id("missing")


def test_update_replaces_book_and_keeps_id(service):
    created = service.create_book(Book(title="Emma"))
    updated = service.update_by_id(created.id, Book(id="other", title="Persuasion"))
    assert updated.id == created.id
    assert service.get_by_id(created.id).title == "Persuasion"


def test_update_missing_raises(service):
    with pytest.raises(BookNotFoundError):
        service.update_by_id("missing", Book(title="x"))


def test_repository_errors_propagate():
    broken = BookService(_BrokenRepository())
    with pytest.raises(RepositoryError, match="error on save new book"):
        broken.create_book(Book())
    with pytest.raises(RepositoryError, match="cannot list"):
        broken.get_books()
    with pytest.raises(RepositoryError, match="cannot read"):
        broken.get_by_id("a")
    with pytest.raises(RepositoryError, match="error on remove book"):
        broken.remove_by_id("a")
    with pytest.raises(RepositoryError, match="error on remove book"):
        broken.update_by_id("a", Book())
import json

import pytest

from bookshelf.domain import Book
from bookshelf.json_loader import read_book_list, read_book_map, write_book_list

BOOKS = [
    Book(id="a", title="Dune", author="Herbert", pages=412),
    Book(id="b", title="Emma", author="Austen", pages=320),
]


def test_write_then_read_list_round_trip(tmp_path):
    path = tmp_path / "books.json"
    write_book_list(path, BOOKS)
    assert read_book_list(path) == BOOKS


def test_write_produces_compact_json_array(tmp_path):
    path = tmp_path / "books.json"
    write_book_list(path, BOOKS[:1])
    assert path.read_text(encoding="utf-8") == (
        '[{"id":"a","title":"Dune","author":"Herbert","pages":412}]'
    )


def test_write_empty_collection(tmp_path):
    path = tmp_path / "books.json"
    write_book_list(path, [])
    assert read_book_list(path) == []
    assert json.loads(path.read_text(encoding="utf-8")) == []


def test_read_map_keys_by_id(tmp_path):
    path = tmp_path / "books.json"
    write_book_list(path, BOOKS)
    assert read_book_map(path) == {"a": BOOKS[0], "b": BOOKS[1]}


def test_read_map_later_duplicate_wins(tmp_path):
    path = tmp_path / "books.json"
    newer = Book(id="a", title="Dune Messiah", author="Herbert", pages=256)
    write_book_list(path, [BOOKS[0], newer])
    assert read_book_map(path) == {"a": newer}


def test_read_blank_file_gives_no_books(tmp_path):
    path = tmp_path / "books.json"
    path.write_text("  \n", encoding="utf-8")
    assert read_book_list(path) == []
    assert read_book_map(path) == {}


def test_read_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_book_list(tmp_path / "absent.json")


def test_read_non_array_raises(tmp_path):
    path = tmp_path / "books.json"
    path.write_text('{"id": "a"}', encoding="utf-8")
    with pytest.raises(ValueError):
        read_book_list(path)


def test_non_ascii_text_survives(tmp_path):
    path = tmp_path / "books.json"
    book = Book(id="c", title="Cien años", author="García Márquez", pages=417)
    write_book_list(path, [book])
    assert "años" in path.read_text(encoding="utf-8")
    assert read_book_list(path) == [book]
"""HTTP routes for the book service and the command that serves them."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence, Union

from flask import Flask, jsonify, request

from .domain import Book
from .json_loader import DEFAULT_BOOKS_PATH, read_book_map
from .middleware import install_request_logger
from .repository import JsonRepository, MemoryRepository, Repository, RepositoryError
from .service import BookService

DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 8090


def _request_book() -> Optional[Book]:
    """Decode the request body as a book, or return None if it is not one."""
    try:
        data = json.loads(request.get_data(as_text=True))
        return Book() if data is None else Book.from_dict(data)
    except ValueError:
        return None


def _invalid_params():
    return jsonify(message="invalid params"), 400


def create_app(service: BookService) -> Flask:
    """Build the Flask application serving the book routes."""
    app = Flask("bookshelf")

    @app.get("/")
    def hello():
        return jsonify(message="API it works!")

    @app.get("/ping")
    def ping():
        return jsonify(message="pong")

    @app.post("/books")
    def create_book():
        book = _request_book()
        if book is None:
            return _invalid_params()
        try:
            created = service.create_book(book)
        except RepositoryError:
            return jsonify({}), 500
        return jsonify(created.to_dict())

    @app.get("/books")
    def get_books():
        try:
            books = service.get_books()
        except RepositoryError:
            return jsonify({}), 500
        return jsonify([book.to_dict() for book in books])

    @app.get("/books/<book_id>")
    def get_by_id(book_id: str):
        try:
            book = service.get_by_id(book_id)
        except RepositoryError:
            return jsonify({}), 500
        if book.is_empty():
            return jsonify(message="book not found"), 404
        return jsonify(book.to_dict())

    @app.delete("/books/<book_id>")
    def remove_by_id(book_id: str):
        try:
            service.remove_by_id(book_id)
        except RepositoryError as exc:
            return jsonify(message=str(exc)), 400
        return "", 204

    @app.put("/books/<book_id>")
    def update_by_id(book_id: str):
        book = _request_book()
        if book is None:
            return _invalid_params()
        try:
            updated = service.update_by_id(book_id, book)
        except RepositoryError as exc:
            return jsonify(message=str(exc)), 400
        return jsonify(updated.to_dict())

    return app


def build_repository(
    memory: bool = False, path: Union[str, Path] = DEFAULT_BOOKS_PATH
) -> Repository:
    """Return an in-memory repository, or one backed by the JSON file at path.

    The file is read once up front so that a missing or malformed file is
    reported before the server starts.
    """
    if memory:
        return MemoryRepository({})
    read_book_map(path)
    return JsonRepository(path)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Serve the book API."""
    parser = argparse.ArgumentParser(prog="bookshelf", description=main.__doc__)
    parser.add_argument("--host", default=DEFAULT_HOST)
    parser.add_argument("--port", type=int, default=DEFAULT_PORT)
    parser.add_argument(
        "--memory", action="store_true", help="keep books in memory only"
    )
    parser.add_argument(
        "--books", type=Path, default=DEFAULT_BOOKS_PATH, help="JSON file of books"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    try:
        repository = build_repository(args.memory, args.books)
    except (OSError, ValueError) as exc:
        print(f"error on read json file. : {exc}", file=sys.stderr)
        return 1

    app = install_request_logger(create_app(BookService(repository)))
    app.run(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(main())
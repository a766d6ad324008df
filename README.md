# bookshelf

A small HTTP service for keeping track of books, built on Flask. Each book
has an `id`, a `title`, an `author` and a number of `pages`. Books are kept
either in memory or in a JSON file on disk that holds an array of book
objects.

## Installation

```
pip install .
```

## Running the server

```
bookshelf
```

Options:

| Option          | Default      | Meaning                                        |
|-----------------|--------------|------------------------------------------------|
| `--host HOST`   | `0.0.0.0`    | Address to listen on                           |
| `--port PORT`   | `8090`       | Port to listen on                              |
| `--memory`      | off          | Keep books in memory only; nothing is saved    |
| `--books PATH`  | `books.json` | JSON file of books (ignored with `--memory`)   |

Without `--memory` the books file must exist and hold a JSON array of book
objects (an empty file counts as no books). It is read once at startup; if
it is missing or malformed, the command prints
`error on read json file. : ...` to standard error and exits with status 1.
After that the file is read again on every request and rewritten on every
change.

Every request is logged at INFO level on the `bookshelf.requests` logger
with its latency, status code and response body.

## Endpoints

| Method | Path          | Success                  | Failure                                              |
|--------|---------------|--------------------------|------------------------------------------------------|
| GET    | `/`           | `{"message": "API it works!"}` |                                                |
| GET    | `/ping`       | `{"message": "pong"}`    |                                                      |
| POST   | `/books`      | 200, the created book    | 400 `{"message": "invalid params"}`                  |
| GET    | `/books`      | 200, array of books      |                                                      |
| GET    | `/books/<id>` | 200, the book            | 404 `{"message": "book not found"}`                  |
| PUT    | `/books/<id>` | 200, the stored book     | 400 `{"message": "invalid params"}` or `{"message": "book not found"}` |
| DELETE | `/books/<id>` | 204, empty body          | 400 `{"message": "book not found"}`                  |

On create, the server assigns a new random UUID as the book's `id`; any `id`
in the request body is replaced. On update, the `id` in the path wins. A
request body is "invalid params" when it is not JSON, not a JSON object, or
has a field of the wrong type (`id`, `title`, `author` must be strings,
`pages` an integer). Missing fields take empty values and unknown fields are
ignored. In the JSON file store an updated book moves to the end of the list.
A storage failure while writing answers 500 with `{}` on create and 400 with
the error message on update or delete.

Example:

```
curl -X POST localhost:8090/books \
     -H 'Content-Type: application/json' \
     -d '{"title": "Dune", "author": "Frank Herbert", "pages": 412}'
```

## Using it as a library

```python
from bookshelf.domain import Book
from bookshelf.repository import MemoryRepository
from bookshelf.service import BookService
from bookshelf.server import create_app
from bookshelf.middleware import install_request_logger

service = BookService(MemoryRepository({}))
created = service.create_book(Book(title="Dune", author="Frank Herbert", pages=412))

app = install_request_logger(create_app(service))
```

Modules:

- `bookshelf.domain` — the frozen `Book` dataclass, with `is_empty()`,
  `to_dict()` and `Book.from_dict()`.
- `bookshelf.json_loader` — `read_book_list`, `read_book_map` and
  `write_book_list` for the JSON books file.
- `bookshelf.repository` — the abstract `Repository`, `MemoryRepository`
  (a dict keyed by id) and `JsonRepository` (a JSON file). Missing books
  raise `BookNotFoundError`, a subclass of `RepositoryError`; `get_by_id`
  returns an empty `Book` instead of raising.
- `bookshelf.service` — `BookService`, which passes each operation to a
  repository.
- `bookshelf.middleware` — `install_request_logger(app)`.
- `bookshelf.server` — `create_app(service)`, `build_repository(memory, path)`
  and `main(argv)`, the entry point of the `bookshelf` command.

## Limitations

There is no authentication, and the JSON file store does no locking, so
concurrent writers can overwrite each other's changes. Books kept with
`--memory` are lost when the server stops.

## Running the tests

```
pip install '.[test]'
pytest
```
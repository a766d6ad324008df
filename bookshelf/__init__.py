"""HTTP service for managing a collection of books, kept in memory or in a JSON file."""

__version__ = "0.1.0"
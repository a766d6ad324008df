"""Request logging for the Flask application."""

from __future__ import annotations

import logging
import time

from flask import Flask, Response, g

logger = logging.getLogger("bookshelf.requests")


def _format_latency(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.6f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.3f}ms"
    return f"{seconds * 1e6:.3f}µs"


def install_request_logger(app: Flask) -> Flask:
    """Log latency, status and response body of every request handled by app."""

    @app.before_request
    def _start_timer() -> None:
        g.request_started = time.perf_counter()
        g.example = "12345"

    @app.after_request
    def _log_response(response: Response) -> Response:
        started = g.get("request_started", time.perf_counter())
        logger.info("latency: %s", _format_latency(time.perf_counter() - started))
        logger.info("status: %d", response.status_code)
        body = "" if response.is_streamed else response.get_data(as_text=True)
        logger.info("response body: %s", body)
        return response

    return app
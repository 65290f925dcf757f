"""
Logging setup shared by the monolith and the microservices.

Records carry optional structured data in ``extra={"context": {...}}``.
The console gets a coloured one-line format in development and JSON lines
in production; the optional rotating files under ``logs/`` are
always JSON.
"""

import json
import logging
import logging.handlers
import sys
import time
import uuid
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional, Union

from flask import Flask, g, has_request_context, request
from sqlalchemy import event
from sqlalchemy.engine import Engine

LOG_DIR = Path(__file__).resolve().parents[2] / "logs"
CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

_query_timing_installed = False


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with the request id when inside a request."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "location": f"{record.module}:{record.funcName}:{record.lineno}",
        }
        if has_request_context() and "request_id" in g:
            payload["request_id"] = g.request_id
        context = getattr(record, "context", None)
        if context:
            payload["context"] = context
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


class ConsoleFormatter(logging.Formatter):
    LEVEL_COLOURS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Colour a copy; file handlers share the same record
        coloured = logging.makeLogRecord(record.__dict__)
        colour = self.LEVEL_COLOURS.get(record.levelname, "")
        coloured.levelname = f"{colour}{record.levelname:8}{self.RESET}"
        line = super().format(coloured)
        context = getattr(record, "context", None)
        return f"{line} {context}" if context else line


def _file_handler(path: Path, level: int) -> Optional[logging.Handler]:
    try:
        handler = logging.handlers.RotatingFileHandler(
            path, maxBytes=5 * 1024 * 1024, backupCount=3, encoding="utf-8"
        )
    except OSError as exc:
        logging.getLogger(__name__).warning(
            "Cannot open log file, continuing with console only",
            extra={"context": {"path": str(path), "error": str(exc)}},
        )
        return None
    handler.setLevel(level)
    handler.setFormatter(JSONFormatter())
    return handler


def _install_query_timing() -> None:
    global _query_timing_installed
    if _query_timing_installed:
        return

    @event.listens_for(Engine, "before_cursor_execute")
    def _start_timer(conn, cursor, statement, parameters, context, executemany):
        conn.info.setdefault("showcase_query_start", []).append(time.perf_counter())

    @event.listens_for(Engine, "after_cursor_execute")
    def _stop_timer(conn, cursor, statement, parameters, context, executemany):
        starts = conn.info.get("showcase_query_start")
        if not starts:
            return
        elapsed_ms = (time.perf_counter() - starts.pop()) * 1000
        logging.getLogger("showcase.sql").debug(
            "Query took %.2fms",
            elapsed_ms,
            extra={"context": {"statement": statement[:300], "duration_ms": round(elapsed_ms, 2)}},
        )

    _query_timing_installed = True


def setup_logging(
    app: Optional[Flask] = None,
    log_level: Union[int, str] = "INFO",
    enable_sql_echo: bool = False,
    log_to_file: bool = False,
    use_json_format: bool = False,
) -> None:
    """
    Replace the root handlers with the showcase handlers.

    Args:
        app: when given, request/response logging hooks are registered on it
        log_level: level name or number
        enable_sql_echo: log every SQL statement with its duration
        log_to_file: also write ``logs/app.log`` and ``logs/showcase_errors.log``
        use_json_format: JSON lines on the console instead of the coloured format
    """
    level = log_level if isinstance(log_level, int) else logging.getLevelName(str(log_level).upper())
    if not isinstance(level, int):
        level = logging.INFO

    root = logging.getLogger()
    root.setLevel(level)
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stdout)
    console.setLevel(level)
    console.setFormatter(
        JSONFormatter() if use_json_format else ConsoleFormatter(CONSOLE_FORMAT, "%H:%M:%S")
    )
    root.addHandler(console)

    if log_to_file:
        LOG_DIR.mkdir(exist_ok=True)
        for path, file_level in ((LOG_DIR / "app.log", level), (LOG_DIR / "showcase_errors.log", logging.ERROR)):
            handler = _file_handler(path, file_level)
            if handler is not None:
                root.addHandler(handler)

    if enable_sql_echo:
        logging.getLogger("showcase.sql").setLevel(logging.DEBUG)
        _install_query_timing()

    if app is not None:
        _register_request_logging(app)

    for noisy in ("werkzeug", "urllib3"):
        logging.getLogger(noisy).setLevel(logging.WARNING)

    logging.getLogger("showcase").info(
        "Logging ready",
        extra={
            "context": {
                "level": logging.getLevelName(level),
                "sql_echo": enable_sql_echo,
                "log_to_file": log_to_file,
                "json": use_json_format,
            }
        },
    )


def _register_request_logging(app: Flask) -> None:
    request_logger = logging.getLogger("showcase.http")

    @app.before_request
    def _start_request():
        g.request_started = time.perf_counter()
        g.request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        request_logger.info(
            "%s %s",
            request.method,
            request.path,
            extra={"context": {"remote_addr": request.remote_addr}},
        )

    @app.after_request
    def _finish_request(response):
        if "request_started" not in g:
            return response
        elapsed_ms = (time.perf_counter() - g.request_started) * 1000
        response.headers.setdefault("X-Request-ID", g.request_id)
        request_logger.info(
            "%s %s -> %s",
            request.method,
            request.path,
            response.status_code,
            extra={"context": {"status": response.status_code, "duration_ms": round(elapsed_ms, 2)}},
        )
        return response


def log_performance(operation: str, duration_ms: float, **context) -> None:
    """Log how long ``operation`` took, with any extra context."""
    context.update(operation=operation, duration_ms=round(duration_ms, 2))
    get_logger("showcase.performance").info(
        "%s took %.2fms", operation, duration_ms, extra={"context": context}
    )


def get_logger(name: str) -> logging.Logger:
    """
    Return the named logger.

    Example:
        logger = get_logger(__name__)
        logger.info("Order stored", extra={"context": {"order_id": "order-1"}})
    """
    return logging.getLogger(name)

"""File logging of handled HTTP requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta


@dataclass
class RequestLog:
    """What is recorded about one handled request."""

    access_time: datetime
    latency: timedelta
    client_ip: str
    method: str
    code: int
    path: str
    user_agent: str

    def __str__(self) -> str:
        return (
            f"{{{self.access_time.isoformat()} {self.latency.total_seconds()}s {self.client_ip} "
            f"{self.method} {self.code} {self.path} {self.user_agent}}}"
        )


class _TextFormatter(logging.Formatter):
    _LEVELS = {logging.INFO: "info", logging.WARNING: "warning", logging.CRITICAL: "fatal"}

    def format(self, record: logging.LogRecord) -> str:
        stamp = datetime.fromtimestamp(record.created).astimezone().isoformat(timespec="seconds")
        level = self._LEVELS.get(record.levelno, record.levelname.lower())
        message = record.getMessage().replace('"', '\\"')
        return f'time="{stamp}" level={level} msg="{message}"'


class RequestLogger:
    """Appends request logs to a file."""

    def __init__(self, file_path: str) -> None:
        self.file_path = file_path
        self._logger: logging.Logger | None = None
        self._handler: logging.Handler | None = None

    def init_logger(self) -> None:
        """Open the log file for appending, creating it if needed; raise OSError on failure."""
        handler = logging.FileHandler(self.file_path, mode="a", encoding="utf-8")
        handler.setFormatter(_TextFormatter())
        logger = logging.Logger("roomate.requests", level=logging.INFO)
        logger.propagate = False
        logger.addHandler(handler)
        self.close()
        self._logger = logger
        self._handler = handler

    def _require_logger(self) -> logging.Logger:
        if self._logger is None:
            raise RuntimeError("logger is not initialised; call init_logger first")
        return self._logger

    def log_info(self, request_log: RequestLog) -> None:
        """Write the request at info level."""
        self._require_logger().info("%s", request_log)

    def log_warn(self, request_log: RequestLog) -> None:
        """Write the request at warning level."""
        self._require_logger().warning("%s", request_log)

    def log_fatal(self, request_log: RequestLog) -> None:
        """Write the request at fatal level, then exit with status 1."""
        self._require_logger().critical("%s", request_log)
        self.close()
        raise SystemExit(1)

    def close(self) -> None:
        """Release the log file."""
        if self._handler is not None and self._logger is not None:
            self._logger.removeHandler(self._handler)
            self._handler.close()
        self._handler = None
        self._logger = None
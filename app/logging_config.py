"""
Custom logging configuration to suppress socket errors from client disconnections
and capture logs in memory for the logs endpoint.
"""
import logging
import traceback
from collections import deque
from datetime import datetime
from typing import List, Dict, Any
import threading

from app.config.settings import settings


# Thread-safe in-memory log buffer
class LogBuffer:
    """Thread-safe circular buffer for storing recent log entries"""

    def __init__(self, max_size: int = 1000):
        self.buffer = deque(maxlen=max_size)
        self.lock = threading.Lock()

    def add(self, record: Dict[str, Any]):
        with self.lock:
            self.buffer.append(record)

    def get_logs(self, count: int = 100) -> List[Dict[str, Any]]:
        with self.lock:
            logs = list(self.buffer)
            return logs[-count:] if count < len(logs) else logs

    def clear(self):
        with self.lock:
            self.buffer.clear()


# Global log buffer instance
log_buffer = LogBuffer(max_size=settings.LOG_BUFFER_SIZE)


class MemoryLogHandler(logging.Handler):
    """Custom handler that stores logs in memory"""

    def __init__(self, buffer: LogBuffer):
        super().__init__()
        self.buffer = buffer

    def emit(self, record):
        try:
            log_entry = {
                "timestamp": datetime.fromtimestamp(record.created).isoformat(),
                "level": record.levelname,
                "logger": record.name,
                "message": self.format(record),
                "module": record.module,
                "function": record.funcName,
                "line": record.lineno
            }

            # Pipeline stage that failed, attached via `extra=`
            stage = getattr(record, "stage", None)
            if stage:
                log_entry["stage"] = stage

            if record.exc_info:
                log_entry["exception"] = ''.join(traceback.format_exception(*record.exc_info))

            self.buffer.add(log_entry)
        except Exception:
            self.handleError(record)


class SupressSocketErrors(logging.Filter):
    """Filter to suppress socket.send() errors from client disconnections"""

    error_messages = (
        "socket.send() raised exception",
        "ConnectionResetError",
        "BrokenPipeError",
        "Connection reset by peer",
        "Broken pipe"
    )

    def filter(self, record):
        message = record.getMessage()
        return not any(error_msg in message for error_msg in self.error_messages)


_memory_handler = None

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _get_memory_handler() -> MemoryLogHandler:
    global _memory_handler
    if _memory_handler is None:
        _memory_handler = MemoryLogHandler(log_buffer)
        _memory_handler.setLevel(logging.DEBUG)
        _memory_handler.setFormatter(
            logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        )
        _memory_handler.addFilter(SupressSocketErrors())
    return _memory_handler


def configure_logging():
    """Apply custom logging filters and memory handler

    Safe to call again: the memory handler is attached at most once per logger.
    """
    memory_handler = _get_memory_handler()

    root_logger = logging.getLogger()
    if memory_handler not in root_logger.handlers:
        root_logger.addHandler(memory_handler)

    if root_logger.level == logging.NOTSET:
        root_logger.setLevel(logging.INFO)

    # uvicorn's LOGGING_CONFIG stops propagation at "uvicorn" and "uvicorn.access",
    # so those loggers need the memory handler themselves
    for name in UVICORN_LOGGERS:
        uvicorn_logger = logging.getLogger(name)
        if not any(isinstance(f, SupressSocketErrors) for f in uvicorn_logger.filters):
            uvicorn_logger.addFilter(SupressSocketErrors())
        if not uvicorn_logger.propagate and memory_handler not in uvicorn_logger.handlers:
            uvicorn_logger.addHandler(memory_handler)

    logging.getLogger("app").setLevel(logging.DEBUG)


def get_recent_logs(count: int = 100) -> List[Dict[str, Any]]:
    """Get the most recent log entries"""
    return log_buffer.get_logs(count)


def clear_logs():
    """Clear the log buffer"""
    log_buffer.clear()

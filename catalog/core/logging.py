import logging
import json
import sys
from datetime import datetime, timezone
from typing import List, Optional

# Attributes every LogRecord carries; anything else came in through `extra=`
_RESERVED_RECORD_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class JsonFormatter(logging.Formatter):
    """JSON log formatter"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
            "location": f"{record.pathname}:{record.lineno}",
            "function": record.funcName,
            "process": record.process,
            "thread": record.threadName,
        }

        context = {
            key: value for key, value in record.__dict__.items()
            if key not in _RESERVED_RECORD_ATTRS and not key.startswith("_")
        }
        if context:
            log_data["context"] = context

        if record.exc_info:
            log_data["exception"] = {
                "type": record.exc_info[0].__name__,
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info) if record.levelno >= logging.ERROR else None
            }
        elif record.exc_text:
            log_data["exception"] = {"message": record.exc_text}

        try:
            return json.dumps(log_data, ensure_ascii=False, default=str)
        except (TypeError, ValueError) as e:
            fallback_log = {
                "timestamp": datetime.now(timezone.utc).isoformat(),
                "level": "ERROR",
                "message": f"Failed to serialize log record: {e}. Original message: {record.getMessage()}",
                "logger": "JsonFormatter.Error",
            }
            return json.dumps(fallback_log)

def configure_logging(
    log_level: str = "INFO",
    json_logs: bool = True,
    log_file: Optional[str] = None
):
    """Configure application logging

    Args:
        log_level: level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: emit JSON lines instead of plain text
        log_file: optional log file path (console only when None)
    """
    log_level_int = getattr(logging, log_level.upper(), logging.INFO)

    # Drop existing handlers so repeated calls don't duplicate output
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    root_logger.setLevel(log_level_int)

    handlers: List[logging.Handler] = [logging.StreamHandler()]

    if log_file:
        try:
            handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
        except OSError as e:
            print(f"Warning: Could not create log file handler at {log_file}: {e}", file=sys.stderr)

    if json_logs:
        formatter = JsonFormatter()
    else:
        formatter = logging.Formatter(
            '%(asctime)s [%(levelname)-8s] %(name)s:%(lineno)d - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("asyncio").setLevel(logging.WARNING)

    logging.info(f"Logging configured: level={log_level}, json_logs={json_logs}, file={log_file or 'None'}")

"""Structured logging configuration for the Projects app"""
import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional


class JSONFormatter(logging.Formatter):
    """JSON formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            'timestamp': datetime.now(timezone.utc).isoformat(),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
            'module': record.module,
            'function': record.funcName,
            'line': record.lineno
        }

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        # Additional context fields
        for key in ['project_id', 'operation', 'duration_ms']:
            if hasattr(record, key):
                log_data[key] = getattr(record, key)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """Colored console formatter"""

    COLORS = {
        'DEBUG': '\033[36m',     # Cyan
        'INFO': '\033[32m',      # Green
        'WARNING': '\033[33m',   # Yellow
        'ERROR': '\033[31m',     # Red
        'CRITICAL': '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # The record is shared with the JSON handlers, restore levelname after formatting
        original = record.levelname
        color = self.COLORS.get(original, self.RESET)
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def setup_logging(
    log_dir: Optional[Path] = None,
    level: Optional[int] = None,
    json_output: Optional[bool] = None,
    console_output: bool = True
) -> logging.Logger:
    """
    Setup application logging

    Args:
        log_dir: Directory for log files (default: Config.LOG_DIR)
        level: Console logging level (default: Config.LOG_LEVEL)
        json_output: Enable JSON file logging (default: Config.JSON_LOGS)
        console_output: Enable console logging

    Returns:
        Configured root logger
    """
    from config import Config

    if log_dir is None:
        log_dir = Config.LOG_DIR
    if level is None:
        level = Config.get_log_level()
    if json_output is None:
        json_output = Config.JSON_LOGS

    # Root logger
    logger = logging.getLogger('projects')
    logger.setLevel(logging.DEBUG)
    logger.handlers.clear()
    logger.propagate = False

    # Console handler goes to stderr so it does not interleave with the menu
    if console_output:
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(level)
        console_formatter = ColoredFormatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

    # JSON file handlers
    if json_output:
        log_dir.mkdir(parents=True, exist_ok=True)

        json_file = log_dir / f'projects_{datetime.now():%Y%m%d}.log'
        file_handler = logging.FileHandler(json_file, encoding='utf-8')
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(JSONFormatter())
        logger.addHandler(file_handler)

        # Error-only file
        error_file = log_dir / f'errors_{datetime.now():%Y%m%d}.log'
        error_handler = logging.FileHandler(error_file, encoding='utf-8')
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(JSONFormatter())
        logger.addHandler(error_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Get a child logger with the given name"""
    return logging.getLogger(f'projects.{name}')


# Context manager for timing operations
class LogTimer:
    """Context manager for logging operation duration"""

    def __init__(self, logger: logging.Logger, operation: str, **extra):
        self.logger = logger
        self.operation = operation
        self.extra = extra
        self.start_time = None

    def __enter__(self):
        self.start_time = datetime.now()
        self.logger.debug(f"Starting: {self.operation}", extra=self.extra)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        duration_ms = (datetime.now() - self.start_time).total_seconds() * 1000
        extra = {**self.extra, 'duration_ms': round(duration_ms, 2), 'operation': self.operation}

        if exc_type:
            self.logger.info(
                f"Failed: {self.operation} ({duration_ms:.0f}ms): {exc_val}",
                extra=extra
            )
        else:
            self.logger.info(
                f"Completed: {self.operation} ({duration_ms:.0f}ms)",
                extra=extra
            )

        return False  # Don't suppress exceptions

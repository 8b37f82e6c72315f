"""
Logging setup for the peercert utility.
"""
import json
import logging
import logging.handlers
import sys
import traceback
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional


@dataclass
class LogEntry:
    """Structured log entry for JSON logging."""
    timestamp: str
    level: str
    logger_name: str
    message: str
    module: str
    function: str
    line_number: int
    thread_id: int
    process_id: int
    extra_data: Optional[Dict[str, Any]] = None
    exception_info: Optional[Dict[str, Any]] = None


class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for structured logging."""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON."""
        log_entry = LogEntry(
            timestamp=datetime.fromtimestamp(record.created).isoformat(),
            level=record.levelname,
            logger_name=record.name,
            message=record.getMessage(),
            module=record.module,
            function=record.funcName,
            line_number=record.lineno,
            thread_id=record.thread,
            process_id=record.process,
            extra_data=getattr(record, 'extra_data', None)
        )

        if record.exc_info:
            log_entry.exception_info = {
                'type': record.exc_info[0].__name__ if record.exc_info[0] else None,
                'message': str(record.exc_info[1]) if record.exc_info[1] else None,
                'traceback': traceback.format_exception(*record.exc_info)
            }

        return json.dumps(asdict(log_entry), default=str)


CONSOLE_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


class LoggingService:
    """Configures the root logger from the application config."""

    def __init__(self, config, console_stream=None):
        """Initialize logging service with configuration."""
        self.config = config
        self.console_stream = console_stream or sys.stderr
        self._setup_logging()
        self.logger = logging.getLogger(__name__)
        self.logger.debug("Logging service initialized")

    def _setup_logging(self):
        """Replace root handlers with a console handler and a rotating file handler."""
        log_dir = Path(self.config.log_file_path).parent
        log_dir.mkdir(parents=True, exist_ok=True)

        root_logger = logging.getLogger()
        for handler in root_logger.handlers[:]:
            root_logger.removeHandler(handler)

        log_level = getattr(logging, self.config.log_level.upper(), logging.INFO)
        root_logger.setLevel(log_level)

        console_formatter = logging.Formatter(CONSOLE_FORMAT)
        file_formatter = JSONFormatter() if self.config.enable_json_logging else console_formatter

        file_handler = logging.handlers.RotatingFileHandler(
            filename=self.config.log_file_path,
            maxBytes=10 * 1024 * 1024,  # 10MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setFormatter(file_formatter)
        file_handler.setLevel(log_level)

        console_handler = logging.StreamHandler(self.console_stream)
        console_handler.setFormatter(console_formatter)
        console_handler.setLevel(log_level)

        self._handlers = [file_handler, console_handler]
        for handler in self._handlers:
            root_logger.addHandler(handler)

    def log_with_context(self, level: str, message: str, **context):
        """Log message with additional context data."""
        logger = logging.getLogger('peercert')
        log_method = getattr(logger, level.lower(), logger.info)
        log_method(message, extra={'extra_data': context})

    def shutdown(self):
        """Flush and detach the handlers installed by this service."""
        root_logger = logging.getLogger()
        for handler in self._handlers:
            handler.flush()
            root_logger.removeHandler(handler)
            handler.close()

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict

from .config import Config
from .exceptions import LoggerError

LOGGER_NAME = "daizy"

class Logger:
    """Configures the ``daizy`` logger that every client module logs under."""

    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, config: Config):
        """Initialize logger with configuration"""
        self.config = config

        if LOGGER_NAME in self._loggers:
            self.logger = self._loggers[LOGGER_NAME]
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
                handler.close()
        else:
            self.logger = logging.getLogger(LOGGER_NAME)
            self._loggers[LOGGER_NAME] = self.logger

        self.logger.setLevel(self._get_log_level())

        self.formatter = logging.Formatter(
            self.config.get("logging.format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

        log_file = self.config.get("logging.file")
        if log_file:
            path = Path(log_file)
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
                handler = RotatingFileHandler(
                    str(path),
                    maxBytes=self.config.get("logging.max_size", 1024 * 1024),
                    backupCount=self.config.get("logging.backup_count", 3)
                )
            except OSError as e:
                raise LoggerError(f"Failed to setup log file: {str(e)}", details={"path": str(path)}) from e
            handler.setFormatter(self.formatter)
            self.logger.addHandler(handler)

        if self.config.get("logging.console_output", False):
            console_handler = logging.StreamHandler()
            console_handler.setFormatter(self.formatter)
            self.logger.addHandler(console_handler)

    def _get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        level_name = str(self.config.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise LoggerError(f"Invalid log level: {level_name}")
        return level

    def debug(self, message: str, *args: Any) -> None:
        """Log debug message"""
        self.logger.debug(message, *args)

    def info(self, message: str, *args: Any) -> None:
        """Log info message"""
        self.logger.info(message, *args)

    def warning(self, message: str, *args: Any) -> None:
        """Log warning message"""
        self.logger.warning(message, *args)

    def error(self, message: str, *args: Any) -> None:
        """Log error message"""
        self.logger.error(message, *args)

from typing import Any, Dict, Optional

class DaizyError(Exception):
    """Base exception class for all Daizy client exceptions"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

class ValidationError(DaizyError):
    """Raised when client arguments fail validation"""
    pass

class ConfigError(DaizyError):
    """Raised when there is a configuration error"""
    pass

class LoggerError(DaizyError):
    """Raised when there is a logging error"""
    pass

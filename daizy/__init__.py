"""
Python client for the Daizy API.
"""

from .api import *  # noqa: F401,F403
from .api import __all__ as _api_all
from .core.exceptions import DaizyError, ValidationError, ConfigError, LoggerError

__version__ = "0.1.0"

__all__ = list(_api_all) + ['DaizyError', 'ValidationError', 'ConfigError', 'LoggerError']

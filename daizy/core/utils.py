from typing import Any, Dict, Optional
import yarl
from .exceptions import ValidationError

def require_string(value: Optional[str], message: str) -> str:
    """Return value unchanged, or raise ValidationError if it is empty."""
    if not value or not isinstance(value, str):
        raise ValidationError(message)
    return value

def validate_base_url(value: str) -> yarl.URL:
    """Parse a service host and check that it is an absolute URL."""
    try:
        url = yarl.URL(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid base URL: {value!r}") from e
    if not url.is_absolute():
        raise ValidationError(f"Base URL must be absolute: {value!r}")
    return url

def validate_timeout(value: Any) -> float:
    """Validate a timeout given in seconds."""
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value <= 0:
        raise ValidationError(f"Timeout must be a positive number of seconds: {value!r}")
    return float(value)

def convert_value(value: str) -> Any:
    """Convert string value to appropriate type"""
    if value.lower() == "true":
        return True
    if value.lower() == "false":
        return False

    try:
        if '.' in value:
            return float(value)
        return int(value)
    except ValueError:
        return value

def merge_dicts(dict1: Dict[str, Any], dict2: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge two dictionaries."""
    result = dict1.copy()

    for key, value in dict2.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value

    return result

def typed_value(data: Dict[str, Any], key: str, expected: type, default: Any) -> Any:
    """
    Read ``key`` from a decoded JSON object, checking its type.

    A missing key yields ``default``. ``bool`` is not accepted where an
    ``int`` is expected.

    Raises:
        ValueError: if the value is present but of another type
    """
    if key not in data:
        return default
    value = data[key]
    if not isinstance(value, expected) or (expected is int and isinstance(value, bool)):
        raise ValueError(
            f"field {key!r} must be of type {expected.__name__}, got {type(value).__name__}"
        )
    return value

# daizy/api/errors.py
# Created: 2026-10-19 10:12:41
# Author: Daizy

from typing import Any, Dict, List, Optional
from dataclasses import dataclass

from ..core.exceptions import DaizyError
from ..core.utils import typed_value

class APIError(DaizyError):
    """Base exception for API-related errors"""
    pass

class RequestError(APIError):
    """Raised when the HTTP round trip itself fails"""
    pass

class DecodeError(APIError):
    """Raised when a response body does not have the expected JSON shape"""
    pass

@dataclass
class FieldError:
    """A single field-level entry of an error response"""
    field: str
    type: str
    message: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FieldError":
        return cls(
            field=typed_value(data, "field", str, ""),
            type=typed_value(data, "type", str, ""),
            message=typed_value(data, "message", str, "")
        )

class ResponseError(APIError):
    """
    Raised when the service answers with a non-200 status.

    The message of the exception is the message of the first field error.
    ``status`` holds the HTTP status code the response arrived with.
    """

    def __init__(self, status: int, errors: List[FieldError], success: bool = False):
        if not errors:
            raise ValueError("ResponseError requires at least one field error")
        super().__init__(errors[0].message, details={"status": status})
        self.status = status
        self.errors = list(errors)
        self.success = success

    @classmethod
    def from_payload(cls, payload: Any, status: int) -> "ResponseError":
        """
        Build from a decoded error body of the form
        ``{"success": bool, "errors": [{"field", "type", "message"}, ...]}``.

        Raises:
            ValueError: if the payload does not have that shape or lists no errors
        """
        if not isinstance(payload, dict):
            raise ValueError("error response is not a JSON object")
        entries: Optional[Any] = payload.get("errors")
        if not isinstance(entries, list) or not all(isinstance(e, dict) for e in entries):
            raise ValueError("error response has no list of errors")
        return cls(
            status=status,
            errors=[FieldError.from_dict(e) for e in entries],
            success=typed_value(payload, "success", bool, False)
        )

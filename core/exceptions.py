"""
Custom exception classes for robust error handling
"""
from typing import Any, Dict, List, Optional
from fastapi import status


class BaseCustomException(Exception):
    """Base custom exception class"""

    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(BaseCustomException):
    """Raised when request data is missing or malformed"""

    error_code = "VALIDATION_ERROR"

    def __init__(self, message: str, field: str = None, details: Optional[Dict[str, Any]] = None):
        if field:
            details = details or {}
            details["field"] = field

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details
        )


class MissingFieldsError(ValidationError):
    """Raised when required fields are absent from a request body"""

    def __init__(self, missing: List[str], details: Optional[Dict[str, Any]] = None):
        details = details or {}
        details["missing"] = list(missing)
        super().__init__(
            message=f"Missing required fields: {', '.join(missing)}",
            details=details
        )
        self.missing = list(missing)


class ResourceNotFoundError(BaseCustomException):
    """Raised when a requested resource is not found"""

    error_code = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str, details: Optional[Dict[str, Any]] = None):
        details = details or {}
        details.setdefault("resource", resource)
        details.setdefault("id", identifier)
        super().__init__(
            message=f"{resource} not found",
            status_code=status.HTTP_404_NOT_FOUND,
            details=details
        )


class ConflictError(BaseCustomException):
    """Raised when an operation would break a uniqueness or reference constraint"""

    error_code = "CONFLICT"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details
        )

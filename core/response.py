"""
Standardized API response envelope for consistent data structure
"""
from typing import Any, Dict, Optional


def success_response(
    data: Any = None,
    message: Optional[str] = None
) -> Dict[str, Any]:
    """Create a success response"""
    body = {
        "success": True,
        "data": data,
    }
    if message:
        body["message"] = message
    return body


def error_response(
    message: str,
    error_code: Optional[str] = None,
    details: Optional[Dict[str, Any]] = None
) -> Dict[str, Any]:
    """Create an error response"""
    error = {"message": message}
    if error_code:
        error["code"] = error_code
    if details:
        error["details"] = details
    return {
        "success": False,
        "error": error,
    }

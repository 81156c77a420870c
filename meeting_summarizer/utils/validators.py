"""
Validation utilities for the Meeting Summarizer application
"""

from typing import Any, Dict, List

from fastapi.exceptions import RequestValidationError


def format_validation_errors(exc: RequestValidationError) -> List[Dict[str, Any]]:
    """Flatten pydantic errors into field / message / rule entries"""
    error_details = []
    for error in exc.errors():
        error_details.append({
            "field": " -> ".join(str(x) for x in error["loc"]),
            "message": error["msg"],
            "type": error["type"]
        })
    return error_details

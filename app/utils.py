"""Utility functions for the API."""

from fastapi import HTTPException

from .config import get_max_code_bytes
from .schemas import ErrorDetail
from .services import CheckerService

checker_svc = CheckerService()

# OpenAPI documentation of the errors raised by validate_code
CODE_ERROR_RESPONSES = {
    400: {"model": ErrorDetail, "description": "Empty script"},
    413: {"model": ErrorDetail, "description": "Script larger than MAX_CODE_BYTES"},
}


def validate_code(code: str) -> str:
    """Reject empty or oversized scripts before they reach the engine."""
    if not code or not code.strip():
        raise HTTPException(400, "code is required")
    limit = get_max_code_bytes()
    if len(code.encode("utf-8", errors="replace")) > limit:
        raise HTTPException(413, f"code exceeds {limit} bytes")
    return code

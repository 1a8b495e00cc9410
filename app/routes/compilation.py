"""Compilation simulator route."""

from fastapi import APIRouter

from ..schemas import CompilationRequest, CompilationResponse
from ..utils import CODE_ERROR_RESPONSES, checker_svc, validate_code

router = APIRouter()


@router.post("/test", response_model=CompilationResponse, responses=CODE_ERROR_RESPONSES)
def compile_check(req: CompilationRequest) -> CompilationResponse:
    """Whitelist-based static compilation test."""
    return checker_svc.test_compilation(validate_code(req.code))

"""Audit route (rule-based checks, optional Brush auto-fix)."""

from fastapi import APIRouter

from ..config import get_strict_default
from ..schemas import AuditRequest, AuditResponse
from ..utils import CODE_ERROR_RESPONSES, checker_svc, validate_code

router = APIRouter()


@router.post("/audit", response_model=AuditResponse, responses=CODE_ERROR_RESPONSES)
def audit(req: AuditRequest) -> AuditResponse:
    """Audit a script. Issues always describe the submitted code, not fixed_code."""
    code = validate_code(req.code)
    strict = get_strict_default() if req.strict is None else req.strict
    return checker_svc.audit(code, strict=strict, auto_fix=req.auto_fix)

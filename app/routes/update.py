"""Update route (deterministic modernization)."""

from fastapi import APIRouter

from ..schemas import UpdateRequest, UpdateResponse
from ..utils import CODE_ERROR_RESPONSES, checker_svc, validate_code

router = APIRouter()


@router.post("/update", response_model=UpdateResponse, responses=CODE_ERROR_RESPONSES)
def update(req: UpdateRequest) -> UpdateResponse:
    """Fix namespace, usings, NT7 drawing calls and CalculateOnBarClose."""
    return checker_svc.update(validate_code(req.code), req.script_type)

"""Pydantic request/response models."""

from typing import List, Optional

from pydantic import BaseModel, Field


# --- Request ---


class AuditRequest(BaseModel):
    """Request body for POST /audit."""

    code: str = Field(..., description="NinjaScript source to audit")
    strict: Optional[bool] = Field(default=None, description="Treat warnings as failures")
    auto_fix: bool = Field(default=False, description="Return Brush serialization fixes")


class CompilationRequest(BaseModel):
    """Request body for POST /test."""

    code: str = Field(..., description="NinjaScript source to check")


class UpdateRequest(BaseModel):
    """Request body for POST /update."""

    code: str = Field(..., description="NinjaScript source to modernize")
    script_type: Optional[str] = Field(default=None, description="indicator or strategy; detected when omitted")


# --- Issue (response) ---


class IssueOut(BaseModel):
    """Single audit issue."""

    check: str
    severity: str = Field(..., description="ERROR, WARNING, or INFO")
    line: int = Field(..., description="1-based line, 0 for file-level issues")
    message: str
    auto_fixable: bool = False


class CompilationMessageOut(BaseModel):
    """Single compilation error or warning."""

    severity: str
    line: int
    message: str


class CodeChangeOut(BaseModel):
    """One modernization applied by the updater."""

    description: str
    before: str
    after: str


# --- Responses ---


class AuditResponse(BaseModel):
    """Response for POST /audit."""

    status: str = Field(..., description="pass, warn or fail")
    issues: List[IssueOut] = Field(default_factory=list)
    fixed_code: Optional[str] = Field(default=None, description="Repaired source when auto_fix applied")
    summary: dict = Field(default_factory=dict, description="Issue count per check")
    report: str = Field(default="", description="Markdown report")


class CompilationResponse(BaseModel):
    """Response for POST /test."""

    status: str = Field(..., description="pass, warn or fail")
    errors: List[CompilationMessageOut] = Field(default_factory=list)
    warnings: List[CompilationMessageOut] = Field(default_factory=list)
    report: str = Field(default="", description="Markdown report")


class UpdateResponse(BaseModel):
    """Response for POST /update."""

    code: str
    script_type: str
    changes: List[CodeChangeOut] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response for GET /health."""

    status: str = "ok"
    version: str
    platform: str


class ErrorDetail(BaseModel):
    """Error response detail."""

    detail: str = Field(..., description="Error message")

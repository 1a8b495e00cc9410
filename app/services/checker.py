"""Checker service: wraps ninjascript_checker and maps to API models."""

from typing import Optional

from ninjascript_checker import (
    CompilationSimulator,
    DEFAULT_TABLES,
    PlatformTables,
    ReportGenerator,
    ScriptAuditor,
    update_code,
)
from ninjascript_checker.issue import CompilationMessage, Issue

from ..schemas import (
    AuditResponse,
    CodeChangeOut,
    CompilationMessageOut,
    CompilationResponse,
    IssueOut,
    UpdateResponse,
)


def _issue_to_out(i: Issue) -> IssueOut:
    return IssueOut(
        check=i.check,
        severity=i.severity.value,
        line=i.line,
        message=i.message,
        auto_fixable=i.auto_fixable,
    )


def _message_to_out(m: CompilationMessage) -> CompilationMessageOut:
    return CompilationMessageOut(severity=m.severity.value, line=m.line, message=m.message)


class CheckerService:
    """Wraps the auditor, compilation simulator and updater for use by the API."""

    def __init__(self, tables: Optional[PlatformTables] = None):
        self.tables = tables or DEFAULT_TABLES
        self.auditor = ScriptAuditor(tables=self.tables)
        self.simulator = CompilationSimulator(self.tables)

    def audit(self, code: str, strict: bool = False, auto_fix: bool = False) -> AuditResponse:
        """Run the audit suite on raw code."""
        result = self.auditor.audit(code, strict=strict, auto_fix=auto_fix)
        return AuditResponse(
            status=result.status.value,
            issues=[_issue_to_out(i) for i in result.issues],
            fixed_code=result.fixed_code,
            summary=ReportGenerator.generate_summary(result.issues),
            report=ReportGenerator.generate_audit_report(result),
        )

    def test_compilation(self, code: str) -> CompilationResponse:
        """Run the compilation simulator on raw code."""
        result = self.simulator.run(code)
        return CompilationResponse(
            status=result.status.value,
            errors=[_message_to_out(m) for m in result.errors],
            warnings=[_message_to_out(m) for m in result.warnings],
            report=ReportGenerator.generate_compilation_report(result),
        )

    def update(self, code: str, script_type: Optional[str] = None) -> UpdateResponse:
        """Modernize raw code."""
        result = update_code(code, script_type)
        return UpdateResponse(
            code=result.code,
            script_type=result.script_type,
            changes=[
                CodeChangeOut(description=c.description, before=c.before, after=c.after)
                for c in result.changes
            ],
        )

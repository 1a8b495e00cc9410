"""
Report generation for the NinjaScript checker.
"""

from typing import Dict, List

from .issue import AuditResult, CompilationMessage, CompilationResult, Issue, Status

_STATUS_LABELS = {
    Status.PASS: "PASS",
    Status.WARN: "WARNINGS",
    Status.FAIL: "FAIL",
}


def _location(line: int) -> str:
    return f"Line {line}: " if line > 0 else ""


class ReportGenerator:
    """Generate reports from audit and compilation results."""

    @staticmethod
    def generate_audit_report(result: AuditResult) -> str:
        """Generate a Markdown audit report."""
        errors, warnings, infos = result.errors, result.warnings, result.infos
        report = ["# NinjaScript Audit Report", ""]
        report.append(f"**Status**: {_STATUS_LABELS[result.status]}")
        report.append(
            f"**Errors**: {len(errors)} | **Warnings**: {len(warnings)} | **Info**: {len(infos)}"
        )
        report.append("")

        if not result.issues:
            report.append("No issues found. The script follows the platform conventions.")
        for title, group in (
            ("Errors (must be fixed)", errors),
            ("Warnings", warnings),
            ("Information", infos),
        ):
            if not group:
                continue
            report.append(f"## {title}")
            report.append("")
            for issue in group:
                entry = f"- **[{issue.check}]** {_location(issue.line)}{issue.message}"
                if issue.auto_fixable:
                    entry += " *(auto-fixable)*"
                report.append(entry)
            report.append("")

        if result.fixed_code is not None:
            report.append("## Automatically fixed code")
            report.append("")
            report.append("```csharp")
            report.append(result.fixed_code)
            report.append("```")

        return "\n".join(report).rstrip() + "\n"

    @staticmethod
    def generate_compilation_report(result: CompilationResult) -> str:
        """Generate a Markdown report for the compilation simulator."""
        report = ["# Static Compilation Test", ""]
        report.append(f"**Status**: {_STATUS_LABELS[result.status]}")
        report.append(f"**Errors**: {len(result.errors)} | **Warnings**: {len(result.warnings)}")
        report.append("")

        for title, group in (
            ("Compilation errors", result.errors),
            ("Warnings", result.warnings),
        ):
            if not group:
                continue
            report.append(f"## {title}")
            report.append("")
            for message in group:
                report.append(ReportGenerator._compilation_entry(message))
            report.append("")

        if result.status == Status.PASS:
            report.append("The script passes static analysis and is ready to compile.")

        return "\n".join(report).rstrip() + "\n"

    @staticmethod
    def _compilation_entry(message: CompilationMessage) -> str:
        line = f"**Line {message.line}**: " if message.line > 0 else ""
        return f"- {line}{message.message}"

    @staticmethod
    def generate_summary(issues: List[Issue]) -> Dict[str, int]:
        """Generate a summary count by check."""
        summary: Dict[str, int] = {}
        for issue in issues:
            summary[issue.check] = summary.get(issue.check, 0) + 1
        return summary

"""
Main checker class that coordinates all checkers.
"""

import logging
from typing import List, Optional, Sequence

from .checker_base import BaseChecker
from .checkers import (
    AlertChecker, AntiDoublonChecker, BrushChecker, MemoryChecker,
    MultiTimeframeChecker, PanelChecker, PropertyChecker, StructureChecker,
    SyntaxChecker,
)
from .fixer import fix_brush_serialization, fixable_subjects
from .issue import AuditResult, Issue, Severity, compute_status
from .platform import DEFAULT_TABLES, PlatformTables
from .utils import SourceIndex

logger = logging.getLogger(__name__)

INTERNAL_CHECK = "internal"


def default_checkers(tables: PlatformTables) -> List[BaseChecker]:
    """The audit suite, in report order."""
    return [
        SyntaxChecker(tables),
        StructureChecker(tables),
        BrushChecker(tables),
        AntiDoublonChecker(tables),
        PropertyChecker(tables),
        MultiTimeframeChecker(tables),
        MemoryChecker(tables),
        AlertChecker(tables),
        PanelChecker(tables),
    ]


class ScriptAuditor:
    """Runs the registered checkers over one script and merges their issues.

    Checkers run in registration order and their issues are appended in that
    order, so reports are stable for a given input.
    """

    def __init__(
        self,
        checkers: Optional[Sequence[BaseChecker]] = None,
        tables: Optional[PlatformTables] = None,
    ):
        self.tables = tables or DEFAULT_TABLES
        self.checkers: List[BaseChecker] = (
            list(checkers) if checkers is not None else default_checkers(self.tables)
        )

    def audit(self, code: str, strict: bool = False, auto_fix: bool = False) -> AuditResult:
        """Audit a script.

        With ``auto_fix`` the returned ``fixed_code`` carries the Brush
        serialization repairs; ``issues`` still describe the original text.
        """
        source = SourceIndex(code)
        issues: List[Issue] = []
        for checker in self.checkers:
            issues.extend(self._run_checker(checker, source))

        status = compute_status(issues, strict=strict)

        fixed_code: Optional[str] = None
        if auto_fix and fixable_subjects(issues):
            fixed_code = fix_brush_serialization(code, issues)

        logger.debug(
            "Audit finished: status=%s, %d issue(s), fixed=%s",
            status.value, len(issues), fixed_code is not None,
        )
        return AuditResult(status=status, issues=issues, fixed_code=fixed_code)

    def _run_checker(self, checker: BaseChecker, source: SourceIndex) -> List[Issue]:
        """Run one checker; a crash becomes an ERROR issue instead of propagating."""
        try:
            found = checker.check(source)
        except Exception as e:
            logger.exception("Checker %s failed", checker.name)
            return [Issue(
                INTERNAL_CHECK, Severity.ERROR, 0,
                f"Checker {checker.name} failed: {e}",
            )]
        logger.debug("Checker %s: %d issue(s)", checker.name, len(found))
        return found


def audit(code: str, strict: bool = False, auto_fix: bool = False) -> AuditResult:
    """Audit a script with the default checker suite."""
    return ScriptAuditor().audit(code, strict=strict, auto_fix=auto_fix)

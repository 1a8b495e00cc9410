"""
Base checker class for NinjaScript rule violations.
"""

from typing import List, Optional

from .issue import Issue, Severity
from .platform import DEFAULT_TABLES, PlatformTables
from .utils import SourceIndex


class BaseChecker:
    """Base class for all checkers.

    A checker is registered once and reused: everything it learns about a
    script lives in the ``SourceIndex`` and the issue list of one call.
    """

    #: Identifier stamped on every issue this checker raises.
    name: str = "base"

    def __init__(self, tables: Optional[PlatformTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def check(self, source: SourceIndex) -> List[Issue]:
        """Run checks on the given script."""
        issues: List[Issue] = []
        self._run_checks(source, issues)
        return issues

    def _run_checks(self, source: SourceIndex, issues: List[Issue]) -> None:
        """Override in subclasses to implement specific checks."""
        pass

    def _add_issue(
        self,
        issues: List[Issue],
        severity: Severity,
        line: int,
        message: str,
        auto_fixable: bool = False,
        subject: Optional[str] = None,
    ) -> None:
        """Add an issue to the list."""
        issues.append(Issue(self.name, severity, line, message, auto_fixable, subject))

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"

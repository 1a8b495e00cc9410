"""
Issue data models for the NinjaScript checker.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class Severity(Enum):
    """Issue severity levels."""
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


class Status(Enum):
    """Overall verdict of an audit or compilation pass."""
    PASS = "pass"
    WARN = "warn"
    FAIL = "fail"


@dataclass(frozen=True)
class Issue:
    """A single rule violation raised by one checker.

    ``line`` is 1-based, or 0 when the issue concerns the whole file.
    ``subject`` names the property an issue is about, when there is one.
    """
    check: str
    severity: Severity
    line: int
    message: str
    auto_fixable: bool = False
    subject: Optional[str] = None


@dataclass
class AuditResult:
    """Outcome of one audit call."""
    status: Status
    issues: List[Issue] = field(default_factory=list)
    fixed_code: Optional[str] = None

    @property
    def errors(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def infos(self) -> List[Issue]:
        return [i for i in self.issues if i.severity == Severity.INFO]


@dataclass(frozen=True)
class CompilationMessage:
    """An error or warning reported by the compilation simulator."""
    severity: Severity
    line: int
    message: str


@dataclass
class CompilationResult:
    """Outcome of one compilation-simulator call."""
    status: Status
    errors: List[CompilationMessage] = field(default_factory=list)
    warnings: List[CompilationMessage] = field(default_factory=list)


def compute_status(issues: List[Issue], strict: bool = False) -> Status:
    """Derive the audit verdict from an issue list.

    Any ERROR fails. Warnings give ``warn``, or ``fail`` in strict mode.
    INFO issues never change the verdict.
    """
    if any(i.severity == Severity.ERROR for i in issues):
        return Status.FAIL
    if any(i.severity == Severity.WARNING for i in issues):
        return Status.FAIL if strict else Status.WARN
    return Status.PASS

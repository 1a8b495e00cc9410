"""
Class skeleton, lifecycle dispatch, namespace and signal-name consistency.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity
from ..utils import CLASS_DECLARATION, NAMESPACE_DECLARATION

_ON_STATE_CHANGE = re.compile(r"protected\s+override\s+void\s+OnStateChange\s*\(\s*\)")
_ON_BAR_UPDATE = re.compile(r"protected\s+override\s+void\s+OnBarUpdate\s*\(\s*\)")
_STATE_BRANCH = r"State\s*==\s*State\.{}\b"
_SERIES_NEW = re.compile(r"new\s+Series\s*<")

_ENTRY_CALL = re.compile(r"\bEnter(?:Long|Short)\w*\s*\(")
_ENTRY_SIGNAL = re.compile(r"\bEnter(?:Long|Short)\w*\s*\([^;]*?\"([^\"]+)\"")
_RISK_SIGNAL = re.compile(r"\b(SetStopLoss|SetProfitTarget|SetTrailStop)\s*\(\s*\"([^\"]+)\"")
_POSITION_MANAGEMENT = re.compile(r"breakEven|entryPrice|Position\.MarketPosition")


class StructureChecker(BaseChecker):
    """Required class/lifecycle skeleton and packaging contracts."""

    name = "structure"

    def _run_checks(self, source, issues):
        code = source.code
        match = CLASS_DECLARATION.search(code)
        if not match:
            self._add_issue(
                issues, Severity.ERROR, 0,
                "No public class deriving from Indicator or Strategy found",
            )
            return
        base_class = match.group(2)

        self._check_lifecycle(source, issues)
        self._check_defaults(code, issues)
        self._check_namespace(source, base_class, issues)
        if base_class == "Strategy":
            self._check_signals(source, issues)

    def _check_lifecycle(self, source, issues):
        code = source.code
        if not _ON_STATE_CHANGE.search(code):
            self._add_issue(issues, Severity.ERROR, 0, "OnStateChange() method is missing")
        else:
            for state in ("SetDefaults", "Configure"):
                if not re.search(_STATE_BRANCH.format(state), code):
                    self._add_issue(
                        issues, Severity.ERROR, 0,
                        f"OnStateChange() does not handle State.{state}",
                    )
            if not re.search(_STATE_BRANCH.format("DataLoaded"), code) and self._builds_indicators(source):
                self._add_issue(
                    issues, Severity.WARNING, 0,
                    "Indicators or series are created but OnStateChange() has no State.DataLoaded branch",
                )
        if not _ON_BAR_UPDATE.search(code):
            self._add_issue(issues, Severity.ERROR, 0, "OnBarUpdate() method is missing")

    def _builds_indicators(self, source):
        if _SERIES_NEW.search(source.sanitized):
            return True
        names = "|".join(re.escape(ind) for ind in self.tables.indicators)
        return re.search(r"=\s*(?:" + names + r")\s*\(", source.sanitized) is not None

    def _check_defaults(self, code, issues):
        if not re.search(r"\bName\s*=\s*\"", code):
            self._add_issue(issues, Severity.WARNING, 0, "Name is not set in State.SetDefaults")
        if not re.search(r"\bDescription\s*=\s*[@$]*\"", code):
            self._add_issue(issues, Severity.WARNING, 0, "Description is not set in State.SetDefaults")
        if not re.search(r"\bCalculate\s*=\s*Calculate\.\w+", code):
            self._add_issue(
                issues, Severity.WARNING, 0,
                "Calculate mode is not set (defaults to Calculate.OnBarClose)",
            )

    def _check_namespace(self, source, base_class, issues):
        match = NAMESPACE_DECLARATION.search(source.sanitized)
        if not match:
            self._add_issue(issues, Severity.ERROR, 0, "No namespace declared")
            return
        namespace = source.code[match.start(1):match.end(1)]
        expected = self.tables.namespace_for(base_class)
        if expected and expected not in namespace.split("."):
            self._add_issue(
                issues, Severity.ERROR, source.line_of(match.start()),
                f"Namespace {namespace} does not match base class {base_class} "
                f"(expected a namespace containing {expected})",
            )

    def _check_signals(self, source, issues):
        """Stop-loss and profit-target names must refer to an entry signal."""
        code = source.code
        if not _ENTRY_CALL.search(source.sanitized):
            self._add_issue(
                issues, Severity.WARNING, 0,
                "Strategy never calls EnterLong/EnterShort",
            )

        entry_signals = {
            m.group(1) for m in _ENTRY_SIGNAL.finditer(code)
            if not self._in_literal(source, m.start())
        }
        for m in _RISK_SIGNAL.finditer(code):
            if self._in_literal(source, m.start()):
                continue
            method, signal = m.group(1), m.group(2)
            if signal not in entry_signals:
                self._add_issue(
                    issues, Severity.ERROR, source.line_of(m.start()),
                    f'{method} signal "{signal}" does not match any EnterLong/EnterShort signal name',
                )

        if _POSITION_MANAGEMENT.search(source.sanitized) and "OnExecutionUpdate" not in source.sanitized:
            self._add_issue(
                issues, Severity.WARNING, 0,
                "Position management detected but OnExecutionUpdate() is not overridden",
            )

    @staticmethod
    def _in_literal(source, offset):
        return source.sanitized[offset] != source.code[offset]

"""
Multi-series (multi-timeframe) safety checks.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity
from ..utils import PHASE_BAR_UPDATE, PHASE_CONFIGURE

_ADD_DATA_SERIES = re.compile(r"(?<![\w.])AddDataSeries\s*\(")
_SERIES_INDEX_REF = re.compile(
    r"\b(BarsArray|Closes|Opens|Highs|Lows|Medians|Typicals|Volumes|Times|CurrentBars)\s*\[\s*(\d+)\s*\]"
    r"|\bBarsInProgress\s*==\s*(\d+)"
)
_BARS_IN_PROGRESS = re.compile(r"\bBarsInProgress\b")
GUARD_WINDOW = 15


class MultiTimeframeChecker(BaseChecker):
    """AddDataSeries placement, BarsInProgress guard, per-series bar counts."""

    name = "multi_timeframe"

    def _run_checks(self, source, issues):
        calls = list(_ADD_DATA_SERIES.finditer(source.sanitized))
        if not calls:
            return
        count = len(calls)

        self._check_placement(source, calls, issues)
        self._check_progress_guard(source, count, issues)
        self._check_bar_counts(source, count, issues)
        self._check_index_range(source, count, issues)

    def _check_placement(self, source, calls, issues):
        for m in calls:
            phase = source.phase_at(m.start())
            if phase == PHASE_CONFIGURE:
                continue
            where = "OnBarUpdate()" if phase == PHASE_BAR_UPDATE else "outside State.Configure"
            self._add_issue(
                issues, Severity.ERROR, source.line_of(m.start()),
                f"AddDataSeries() called in {where}; it must be called in State.Configure",
            )

    def _check_progress_guard(self, source, count, issues):
        """Secondary series also call OnBarUpdate: it must filter early."""
        body = source.method_body("OnBarUpdate")
        if body is None:
            return
        open_line = source.line_of(body[0])
        head = "\n".join(source.sanitized_lines[open_line - 1:open_line - 1 + GUARD_WINDOW])
        if _BARS_IN_PROGRESS.search(head):
            return
        self._add_issue(
            issues, Severity.ERROR, open_line,
            f"{count} AddDataSeries() call(s) but OnBarUpdate() does not start with a "
            f"BarsInProgress check; secondary series will run the primary logic",
        )

    def _check_bar_counts(self, source, count, issues):
        for idx in range(1, count + 1):
            if re.search(r"\bCurrentBars\s*\[\s*" + str(idx) + r"\s*\]", source.sanitized):
                continue
            self._add_issue(
                issues, Severity.WARNING, 0,
                f"No CurrentBars[{idx}] check; secondary series {idx} may not have enough bars",
            )

    def _check_index_range(self, source, count, issues):
        for m in _SERIES_INDEX_REF.finditer(source.sanitized):
            idx = int(m.group(2) or m.group(3))
            if idx <= count:
                continue
            ref = m.group(0)
            self._add_issue(
                issues, Severity.ERROR, source.line_of(m.start()),
                f"{ref} refers to series {idx} but only {count} AddDataSeries() call(s) exist",
            )

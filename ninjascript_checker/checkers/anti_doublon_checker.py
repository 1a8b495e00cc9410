"""
Duplicate-signal guard for scripts that update on every tick.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity

_PER_TICK = re.compile(r"\bCalculate\s*=\s*Calculate\.(?:OnEachTick|OnPriceChange)\b")
_SIGNAL = re.compile(
    r"\bDraw\.(?:Arrow(?:Up|Down)|Triangle(?:Up|Down)|Diamond|Dot|Square|Text)\s*\("
    r"|(?<![\w.])Alert\s*\("
    r"|\bEnter(?:Long|Short)\w*\s*\("
)
_TRACKER = r"\w*[lL]ast\w*"
_TRACKING_ASSIGNMENT = re.compile(r"\b" + _TRACKER + r"\s*=\s*(?:-?\d+|CurrentBar)\b")
_BAR_GUARD = re.compile(
    r"CurrentBar\s*(?:!=|>)\s*" + _TRACKER
    + r"|\b" + _TRACKER + r"\s*(?:!=|<)\s*CurrentBar\b"
)
GUARD_LOOKBACK = 5


class AntiDoublonChecker(BaseChecker):
    """OnEachTick signals need a last-bar tracker and a CurrentBar guard."""

    name = "anti_doublon"

    def _run_checks(self, source, issues):
        text = source.sanitized
        if not _PER_TICK.search(text):
            return
        if not _SIGNAL.search(text):
            return
        if _TRACKING_ASSIGNMENT.search(text) and _BAR_GUARD.search(text):
            return

        localized = False
        for i, line in enumerate(source.sanitized_lines, 1):
            if not _SIGNAL.search(line):
                continue
            context = "\n".join(source.sanitized_lines[max(0, i - 1 - GUARD_LOOKBACK):i])
            if _BAR_GUARD.search(context):
                continue
            self._add_issue(
                issues, Severity.WARNING, i,
                "Signal emitted on every tick without a last-bar guard; "
                "the same signal may fire several times per bar",
            )
            localized = True

        if not localized:
            self._add_issue(
                issues, Severity.WARNING, 0,
                "Calculate.OnEachTick is used but no last-bar tracking variable and "
                "CurrentBar guard were found; signals may be duplicated",
            )

"""
Alert() calls must be gated on the realtime state.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity

_ALERT_CALL = re.compile(r"(?<![\w.])Alert\s*\(")
_REALTIME = re.compile(r"\bState\s*\.\s*Realtime\b")
REALTIME_LOOKBACK = 5


class AlertChecker(BaseChecker):
    """Alerts fired during historical replay are noise."""

    name = "alert_realtime"

    def _run_checks(self, source, issues):
        for m in _ALERT_CALL.finditer(source.sanitized):
            line = source.line_of(m.start())
            start = max(0, line - 1 - REALTIME_LOOKBACK)
            context = "\n".join(source.sanitized_lines[start:line])
            if _REALTIME.search(context):
                continue
            self._add_issue(
                issues, Severity.WARNING, line,
                "Alert() without a State.Realtime check will fire during backtests",
            )

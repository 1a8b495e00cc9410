"""
Visibility of the Draw.TextFixed status panel.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity

_TEXT_FIXED = re.compile(r"\bDraw\.TextFixed\s*\(")
_EARLY_RETURN = re.compile(r"\breturn\s*;")
MAX_EARLY_RETURNS = 2


class PanelChecker(BaseChecker):
    """Informational hints about the on-chart status panel."""

    name = "panel_visibility"

    def _run_checks(self, source, issues):
        text = source.sanitized
        if not _TEXT_FIXED.search(text):
            self._add_issue(
                issues, Severity.INFO, 0,
                "No Draw.TextFixed status panel; one is recommended to show live state",
            )
            return

        body = source.method_body("OnBarUpdate")
        if body is None:
            return
        panel = _TEXT_FIXED.search(text, body[0], body[1])
        if not panel:
            return
        returns = len(_EARLY_RETURN.findall(text, body[0], panel.start()))
        if returns > MAX_EARLY_RETURNS:
            self._add_issue(
                issues, Severity.INFO, source.line_of(panel.start()),
                f"Draw.TextFixed panel comes after {returns} return statements in "
                f"OnBarUpdate(); it may not be drawn in some conditions",
            )

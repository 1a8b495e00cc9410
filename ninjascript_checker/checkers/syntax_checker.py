"""
Brace, parenthesis, bracket and #region balance checks.
"""

from ..checker_base import BaseChecker
from ..issue import Severity

_PAIRS = (
    ("{", "}", "brace"),
    ("(", ")", "parenthesis"),
    ("[", "]", "bracket"),
)


class SyntaxChecker(BaseChecker):
    """Delimiter and region nesting on sanitized text."""

    name = "syntax"

    def _run_checks(self, source, issues):
        self._check_delimiters(source, issues)
        self._check_regions(source, issues)

    def _check_delimiters(self, source, issues):
        """Report stray closers as they occur and unclosed openers at EOF."""
        counts = {opener: 0 for opener, _, _ in _PAIRS}
        closers = {closer: (opener, label) for opener, closer, label in _PAIRS}
        for i, line in enumerate(source.sanitized_lines, 1):
            for ch in line:
                if ch in counts:
                    counts[ch] += 1
                elif ch in closers:
                    opener, label = closers[ch]
                    counts[opener] -= 1
                    if counts[opener] < 0:
                        self._add_issue(
                            issues, Severity.ERROR, i,
                            f"Unmatched closing {label} '{ch}'",
                        )
                        counts[opener] = 0

        last = source.line_count
        for opener, closer, label in _PAIRS:
            if counts[opener] > 0:
                self._add_issue(
                    issues, Severity.ERROR, last,
                    f"{counts[opener]} unclosed {label}(s) '{opener}' at end of file",
                )

    def _check_regions(self, source, issues):
        """#region markers are cosmetic: imbalance is only a warning."""
        depth = 0
        for i, line in enumerate(source.sanitized_lines, 1):
            stripped = line.strip()
            if stripped.startswith("#endregion"):
                depth -= 1
                if depth < 0:
                    self._add_issue(
                        issues, Severity.WARNING, i,
                        "#endregion without matching #region",
                    )
                    depth = 0
            elif stripped.startswith("#region"):
                depth += 1
        if depth > 0:
            self._add_issue(
                issues, Severity.WARNING, source.line_count,
                f"{depth} #region without #endregion",
            )

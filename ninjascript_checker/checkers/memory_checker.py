"""
Resource checks: object creation phase, unbounded lists, draw tag reuse.
"""

import re
from typing import Optional, Tuple

from ..checker_base import BaseChecker
from ..issue import Severity
from ..utils import (
    PHASE_BAR_UPDATE,
    PHASE_CONFIGURE,
    PHASE_DATA_LOADED,
    PHASE_SET_DEFAULTS,
)

_SERIES_NEW = re.compile(r"\bnew\s+Series\s*<\s*(\w+)\s*>\s*\(\s*this\b")
_LIST_DECL = re.compile(r"\bList\s*<[^;=(){}]+?>\s+(\w+)\s*[;=,)]")
# No trailing \s*: the tag literal is blank in sanitized text
_DRAW_WITH_TAG = re.compile(r"\bDraw\.(\w+)\s*\(\s*this\s*,")
_TAG_LITERAL = re.compile(r"[$@]*\"([^\"]*)\"")
_UNIQUE_TAG_TOKEN = re.compile(
    r"CurrentBar|Times?\s*\[|count|tagN|\+\+|index|idx",
    re.IGNORECASE,
)

_PHASE_LABELS = {
    PHASE_SET_DEFAULTS: "State.SetDefaults",
    PHASE_CONFIGURE: "State.Configure",
    PHASE_BAR_UPDATE: "OnBarUpdate()",
    None: "a field initializer",
}


def split_first_argument(sanitized: str, start: int) -> Tuple[int, int]:
    """Span of the call argument starting at ``start`` (up to , or ) at depth 0)."""
    depth = 0
    pos = start
    while pos < len(sanitized):
        ch = sanitized[pos]
        if ch in "([{":
            depth += 1
        elif ch in ")]}":
            if depth == 0:
                break
            depth -= 1
        elif ch in ",;" and depth == 0:
            break
        pos += 1
    return start, pos


class MemoryChecker(BaseChecker):
    """Patterns that compile but fail or degrade at runtime."""

    name = "memory"

    def _run_checks(self, source, issues):
        self._check_series_creation(source, issues)
        self._check_indicator_creation(source, issues)
        self._check_list_growth(source, issues)
        self._check_draw_tags(source, issues)

    def _check_series_creation(self, source, issues):
        """new Series<T>(this) is only valid once data is loaded."""
        for m in _SERIES_NEW.finditer(source.sanitized):
            phase = source.phase_at(m.start())
            if phase == PHASE_DATA_LOADED:
                continue
            self._add_issue(
                issues, Severity.ERROR, source.line_of(m.start()),
                f"new Series<{m.group(1)}>(this) created in {_PHASE_LABELS[phase]}; "
                f"it must be created in State.DataLoaded",
            )

    def _check_indicator_creation(self, source, issues):
        """Indicator factories return null before State.DataLoaded."""
        names = "|".join(re.escape(ind) for ind in self.tables.indicators)
        pattern = re.compile(r"(?<![=!<>])=\s*(" + names + r")\s*\(")
        for m in pattern.finditer(source.sanitized):
            phase = source.phase_at(m.start())
            if phase not in (PHASE_SET_DEFAULTS, PHASE_CONFIGURE, None):
                continue
            self._add_issue(
                issues, Severity.ERROR, source.line_of(m.start()),
                f"Indicator {m.group(1)}() created in {_PHASE_LABELS[phase]}; "
                f"it must be created in State.DataLoaded",
            )

    def _check_list_growth(self, source, issues):
        """Lists that are appended to but never trimmed grow with the chart."""
        text = source.sanitized
        seen = set()
        for m in _LIST_DECL.finditer(text):
            var = m.group(1)
            if var in seen:
                continue
            seen.add(var)
            name = re.escape(var)
            if not re.search(r"\b" + name + r"\s*\.\s*(?:Add|AddRange|Insert)\s*\(", text):
                continue
            bounded = re.search(
                r"\b" + name + r"\s*\.\s*(?:Clear|RemoveAt|RemoveRange|RemoveAll|Remove)\s*\("
                r"|\b" + name + r"\s*\.\s*Count\s*(?:>=?|==)",
                text,
            )
            if not bounded:
                self._add_issue(
                    issues, Severity.WARNING, source.line_of(m.start(1)),
                    f'List "{var}" grows without bound (no Clear/RemoveAt/Count check); '
                    f"memory use will climb on long charts",
                )

    def _check_draw_tags(self, source, issues):
        """Per-bar drawings need a tag that changes from bar to bar.

        The tag counts as varying when the call's line, or the tag argument
        when it spans several lines, mentions a per-bar token.
        """
        code = source.code
        for m in _DRAW_WITH_TAG.finditer(source.sanitized):
            method = m.group(1)
            if method not in self.tables.per_bar_draw_methods:
                continue
            pos = m.end()
            while pos < len(code) and code[pos].isspace():
                pos += 1
            start, end = split_first_argument(source.sanitized, pos)
            tag_expr = code[start:end]
            literal = _TAG_LITERAL.match(tag_expr)
            if not literal:
                continue
            line = source.line_of(m.start())
            code_part = source.sanitized_lines[line - 1] + "\n" + source.sanitized[start:end]
            tag = self._static_tag(tag_expr, code_part, literal)
            if tag is None or tag in self.tables.fixed_draw_tags:
                continue
            self._add_issue(
                issues, Severity.ERROR, line,
                f'Draw.{method} uses static tag "{tag}"; each bar overwrites the previous '
                f'drawing. Use "{tag}" + CurrentBar',
            )

    @staticmethod
    def _static_tag(tag_expr: str, code_part: str, literal) -> Optional[str]:
        """The literal tag if no code around it varies per bar."""
        if _UNIQUE_TAG_TOKEN.search(code_part):
            return None
        # Interpolated tag such as $"buy{CurrentBar}"
        if tag_expr.lstrip("@").startswith("$") and "{" in literal.group(1):
            return None
        return literal.group(1)


"""
Deterministic repair of Brush serialization issues.

The fixer is one-shot: it rewrites the text for the issues it is given and
returns it. It does not re-audit the result.
"""

import logging
import re
from typing import Iterable, List

from .checkers.brush_checker import BrushChecker, companion_pattern, has_xml_ignore
from .issue import Issue
from .utils import SourceIndex, find_matching_brace

logger = logging.getLogger(__name__)

_INITIALIZER = re.compile(r"[ \t]*=[^;{}]*;")

COMPANION_TEMPLATE = (
    "{nl}{nl}{indent}[Browsable(false)]"
    "{nl}{indent}public string {prop}Serializable"
    "{nl}{indent}{{"
    "{nl}{indent}    get {{ return Serialize.BrushToString({prop}); }}"
    "{nl}{indent}    set {{ {prop} = Serialize.StringToBrush(value); }}"
    "{nl}{indent}}}"
)


def fixable_subjects(issues: Iterable[Issue]) -> List[str]:
    """Brush properties named by auto-fixable issues, in first-seen order."""
    subjects: List[str] = []
    for issue in issues:
        if issue.check != BrushChecker.name or not issue.auto_fixable or not issue.subject:
            continue
        if issue.subject not in subjects:
            subjects.append(issue.subject)
    return subjects


def fix_brush_serialization(code: str, issues: Iterable[Issue]) -> str:
    """Insert missing [XmlIgnore] markers and string companions."""
    fixed = code
    newline = "\r\n" if "\r\n" in code else "\n"
    for prop in fixable_subjects(issues):
        fixed = _add_xml_ignore(fixed, prop, newline)
        fixed = _add_companion(fixed, prop, newline)
    return fixed


def _declaration(source: SourceIndex, prop: str):
    return re.search(r"public\s+Brush\s+" + re.escape(prop) + r"\s*\{", source.sanitized)


def _indent_of(source: SourceIndex, line: int) -> str:
    text = source.lines[line - 1]
    return text[:len(text) - len(text.lstrip(" \t"))]


def _add_xml_ignore(code: str, prop: str, newline: str) -> str:
    source = SourceIndex(code)
    m = _declaration(source, prop)
    if not m:
        logger.debug("Brush property %s not found, skipping [XmlIgnore]", prop)
        return code
    line = source.line_of(m.start())
    if has_xml_ignore(source.sanitized_lines, line):
        return code
    indent = _indent_of(source, line)
    pos = source.line_start(line)
    return code[:pos] + indent + "[XmlIgnore]" + newline + code[pos:]


def _add_companion(code: str, prop: str, newline: str) -> str:
    source = SourceIndex(code)
    if companion_pattern(prop).search(source.sanitized):
        return code
    m = _declaration(source, prop)
    if not m:
        logger.debug("Brush property %s not found, skipping companion", prop)
        return code
    end = find_matching_brace(source.sanitized, m.end() - 1)
    if end >= len(code):
        return code
    # Auto-property initializer: "{ get; set; } = Brushes.Red;"
    initializer = _INITIALIZER.match(source.sanitized, end + 1)
    if initializer:
        end = initializer.end() - 1
    indent = _indent_of(source, source.line_of(m.start()))
    companion = COMPANION_TEMPLATE.format(nl=newline, indent=indent, prop=prop)
    return code[:end + 1] + companion + code[end + 1:]

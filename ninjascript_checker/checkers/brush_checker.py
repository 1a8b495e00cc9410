"""
Serialization safety of public Brush properties.

A Brush cannot be XML-serialized by the platform: the property must carry
[XmlIgnore] and be mirrored by a string companion named ``<Name>Serializable``
that converts with Serialize.BrushToString / Serialize.StringToBrush.
"""

import re
from typing import List

from ..checker_base import BaseChecker
from ..issue import Severity
from ..utils import find_matching_brace

BRUSH_PROPERTY = re.compile(r"public\s+Brush\s+(\w+)\s*\{")
COMPANION_SUFFIX = "Serializable"
ATTRIBUTE_LOOKBACK = 5

_MEMBER_END = re.compile(r"[;}]\s*$")
# [XmlIgnore], [Display(...), XmlIgnore] or a continuation line of an attribute list
_XML_IGNORE = re.compile(r"(?:^\s*|[\[,]\s*)(?:\w+\.)*XmlIgnore\b")


def companion_pattern(prop: str):
    return re.compile(r"public\s+string\s+" + re.escape(prop + COMPANION_SUFFIX) + r"\s*\{")


def has_xml_ignore(sanitized_lines: List[str], line: int) -> bool:
    """True if the attribute block above a 1-based declaration line has [XmlIgnore]."""
    if _XML_IGNORE.search(sanitized_lines[line - 1]):
        return True
    for idx in range(line - 2, max(-1, line - 2 - ATTRIBUTE_LOOKBACK), -1):
        text = sanitized_lines[idx]
        if _XML_IGNORE.search(text):
            return True
        if _MEMBER_END.search(text):
            break
    return False


def companion_converts(sanitized: str, prop: str) -> bool:
    """True if the body of ``<prop>Serializable`` converts both ways for ``prop``."""
    m = companion_pattern(prop).search(sanitized)
    if not m:
        return False
    body = sanitized[m.end() - 1:find_matching_brace(sanitized, m.end() - 1) + 1]
    name = re.escape(prop)
    to_string = re.search(r"Serialize\.BrushToString\s*\(\s*" + name + r"\s*\)", body)
    to_brush = re.search(
        r"\b" + name + r"\s*=\s*Serialize\.StringToBrush\s*\(\s*value\s*\)", body
    )
    return bool(to_string and to_brush)


class BrushChecker(BaseChecker):
    """[XmlIgnore] + string companion for every public Brush property."""

    name = "brush_serialization"

    def _run_checks(self, source, issues):
        for m in BRUSH_PROPERTY.finditer(source.sanitized):
            prop = m.group(1)
            if prop.endswith(COMPANION_SUFFIX):
                continue
            line = source.line_of(m.start())

            if not has_xml_ignore(source.sanitized_lines, line):
                self._add_issue(
                    issues, Severity.ERROR, line,
                    f'Brush property "{prop}" lacks [XmlIgnore]; saving or loading the '
                    f"workspace will fail",
                    auto_fixable=True, subject=prop,
                )

            if not companion_pattern(prop).search(source.sanitized):
                self._add_issue(
                    issues, Severity.ERROR, line,
                    f'Brush property "{prop}" has no "{prop}{COMPANION_SUFFIX}" string '
                    f"companion; its value will not be serialized",
                    auto_fixable=True, subject=prop,
                )
            elif not companion_converts(source.sanitized, prop):
                self._add_issue(
                    issues, Severity.ERROR, line,
                    f'Companion "{prop}{COMPANION_SUFFIX}" must use '
                    f"Serialize.BrushToString({prop}) and Serialize.StringToBrush(value)",
                    subject=prop,
                )

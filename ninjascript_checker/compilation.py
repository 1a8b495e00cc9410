"""
Static compilation simulator.

A second pass over the raw script that checks symbol references against the
closed whitelists of ``PlatformTables``. It overlaps with the structural
checks on purpose: membership in a whitelist catches typos that the looser
presence searches of the audit accept.
"""

import logging
import re
from typing import List, Optional

from .issue import CompilationMessage, CompilationResult, Severity, Status
from .platform import DEFAULT_TABLES, PlatformTables
from .utils import CLASS_DECLARATION, NAMESPACE_DECLARATION, SourceIndex

logger = logging.getLogger(__name__)

_DRAW_CALL = re.compile(r"\bDraw\.(\w+)\s*\(")
_STATE_REF = re.compile(r"(?<![\w.])State\.(\w+)")
_PRINT_CALL = re.compile(r"(?<![\w.])Print\s*\(")
_SERIES_TYPE = re.compile(r"\bSeries\s*<\s*(\w+)\s*>")
_RANGE_ON_BOOL = re.compile(r"\[\s*Range\s*\([^)]*\)\s*\](?:\s*\[[^\]]*\])*\s*public\s+bool\s+(\w+)")


class CompilationSimulator:
    """Whitelist-based reference checks producing a compile-like verdict."""

    def __init__(self, tables: Optional[PlatformTables] = None):
        self.tables = tables or DEFAULT_TABLES

    def run(self, code: str) -> CompilationResult:
        source = SourceIndex(code)
        errors: List[CompilationMessage] = []
        warnings: List[CompilationMessage] = []

        self._check_class_structure(source, errors)
        self._check_series_types(source, warnings)
        self._check_draw_methods(source, errors)
        self._check_states(source, errors)
        self._check_property_types(source, warnings)
        self._check_debug_output(source, warnings)
        self._check_required_elements(source, errors, warnings)

        if errors:
            status = Status.FAIL
        elif warnings:
            status = Status.WARN
        else:
            status = Status.PASS
        logger.debug(
            "Compilation pass on %s tables: %d error(s), %d warning(s)",
            self.tables.version, len(errors), len(warnings),
        )
        return CompilationResult(status=status, errors=errors, warnings=warnings)

    @staticmethod
    def _error(line: int, message: str) -> CompilationMessage:
        return CompilationMessage(Severity.ERROR, line, message)

    @staticmethod
    def _warning(line: int, message: str) -> CompilationMessage:
        return CompilationMessage(Severity.WARNING, line, message)

    def _check_class_structure(self, source, errors):
        classes = list(CLASS_DECLARATION.finditer(source.sanitized))
        if not classes:
            errors.append(self._error(0, "No Indicator/Strategy class found"))
        elif len(classes) > 1:
            errors.append(self._error(
                source.line_of(classes[1].start()),
                "Several Indicator/Strategy classes in the same file",
            ))
        if not NAMESPACE_DECLARATION.search(source.sanitized):
            errors.append(self._error(0, "Missing namespace"))
        if not re.search(r"protected\s+override\s+void\s+OnStateChange\b", source.sanitized):
            errors.append(self._error(0, "OnStateChange() is missing"))
        if not re.search(r"protected\s+override\s+void\s+OnBarUpdate\b", source.sanitized):
            errors.append(self._error(0, "OnBarUpdate() is missing"))

    def _check_series_types(self, source, warnings):
        for m in _SERIES_TYPE.finditer(source.sanitized):
            value_type = m.group(1)
            if value_type in self.tables.series_types:
                continue
            warnings.append(self._warning(
                source.line_of(m.start()),
                f"Series<{value_type}> is an unusual series type (expected double, bool or int)",
            ))

    def _check_draw_methods(self, source, errors):
        for m in _DRAW_CALL.finditer(source.sanitized):
            method = m.group(1)
            if method in self.tables.draw_methods:
                continue
            errors.append(self._error(
                source.line_of(m.start()),
                f"Draw.{method} is not a known drawing method",
            ))

    def _check_states(self, source, errors):
        valid = ", ".join(self.tables.states)
        for m in _STATE_REF.finditer(source.sanitized):
            state = m.group(1)
            if state in self.tables.states:
                continue
            errors.append(self._error(
                source.line_of(m.start()),
                f"State.{state} is not a valid state (valid: {valid})",
            ))

    def _check_property_types(self, source, warnings):
        for m in _RANGE_ON_BOOL.finditer(source.sanitized):
            warnings.append(self._warning(
                source.line_of(m.start()),
                f'[Range] used on bool property "{m.group(1)}" has no effect',
            ))

    def _check_debug_output(self, source, warnings):
        reported = set()
        for m in _PRINT_CALL.finditer(source.sanitized):
            line = source.line_of(m.start())
            if line in reported:
                continue
            reported.add(line)
            warnings.append(self._warning(
                line, "Print() call found; remove debug output before release",
            ))

    def _check_required_elements(self, source, errors, warnings):
        for namespace in self.tables.required_usings:
            pattern = r"\busing\s+" + re.escape(namespace) + r"\s*;"
            if not re.search(pattern, source.sanitized):
                errors.append(self._error(0, f"using {namespace}; is missing"))

        match = CLASS_DECLARATION.search(source.sanitized)
        if match and match.group(2) == "Indicator" and not re.search(r"\bIsOverlay\s*=", source.sanitized):
            warnings.append(self._warning(
                0,
                "IsOverlay is not set; it defaults to false (separate panel). "
                "Set it to true to draw on the price chart",
            ))


def test_compilation(code: str, tables: Optional[PlatformTables] = None) -> CompilationResult:
    """Run the compilation simulator with the given (or default) tables."""
    return CompilationSimulator(tables).run(code)

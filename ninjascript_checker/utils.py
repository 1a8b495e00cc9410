"""
Utility functions for the NinjaScript checker.
"""

import bisect
import re
from typing import Dict, List, Optional, Tuple

LINE_TERMINATORS = ("\n", "\r")

# Lifecycle markers used to decide which phase a statement textually belongs to.
PHASE_SET_DEFAULTS = "SetDefaults"
PHASE_CONFIGURE = "Configure"
PHASE_DATA_LOADED = "DataLoaded"
PHASE_BAR_UPDATE = "OnBarUpdate"

_PHASE_PATTERNS = {
    PHASE_SET_DEFAULTS: re.compile(r"\bState\s*\.\s*SetDefaults\b"),
    PHASE_CONFIGURE: re.compile(r"\bState\s*\.\s*Configure\b"),
    PHASE_DATA_LOADED: re.compile(r"\bState\s*\.\s*DataLoaded\b"),
    PHASE_BAR_UPDATE: re.compile(r"\bvoid\s+OnBarUpdate\s*\("),
}

CLASS_DECLARATION = re.compile(
    r"public\s+(?:(?:partial|sealed|abstract)\s+)*class\s+(\w+)\s*:\s*(Indicator|Strategy)\b"
)
NAMESPACE_DECLARATION = re.compile(r"\bnamespace\s+([\w.]+)")


def _blank(ch: str) -> str:
    return ch if ch in LINE_TERMINATORS else " "


def sanitize(code: str) -> str:
    """Blank out comments and string/char literals, keeping the layout.

    Every character consumed by a comment or literal becomes a space, except
    line terminators which are copied through. The result has the same length
    and the same line breaks as ``code``, so offsets and line numbers computed
    on it are valid for the original text.
    """
    out: List[str] = []
    n = len(code)
    i = 0
    while i < n:
        ch = code[i]
        nxt = code[i + 1] if i + 1 < n else ""

        # Line comment: up to, not including, the line terminator
        if ch == "/" and nxt == "/":
            while i < n and code[i] not in LINE_TERMINATORS:
                out.append(" ")
                i += 1
            continue

        # Block comment, possibly unterminated at EOF
        if ch == "/" and nxt == "*":
            out.append("  ")
            i += 2
            while i < n:
                if code[i] == "*" and i + 1 < n and code[i + 1] == "/":
                    out.append("  ")
                    i += 2
                    break
                out.append(_blank(code[i]))
                i += 1
            continue

        # Verbatim strings: @"..", $@"..", @$".."
        prefix = 0
        if ch == "@" and nxt == '"':
            prefix = 1
        elif ch in "@$" and nxt in "@$" and nxt != ch and i + 2 < n and code[i + 2] == '"':
            prefix = 2
        if prefix:
            out.append(" " * (prefix + 1))
            i += prefix + 1
            while i < n:
                if code[i] == '"':
                    if i + 1 < n and code[i + 1] == '"':
                        out.append("  ")
                        i += 2
                        continue
                    out.append(" ")
                    i += 1
                    break
                out.append(_blank(code[i]))
                i += 1
            continue

        # Ordinary and interpolated strings, char literals
        if ch in ('"', "'") or (ch == "$" and nxt == '"'):
            if ch == "$":
                out.append(" ")
                i += 1
                ch = '"'
            out.append(" ")
            i += 1
            while i < n and code[i] not in LINE_TERMINATORS:
                if code[i] == "\\":
                    out.append(" ")
                    i += 1
                    if i < n and code[i] not in LINE_TERMINATORS:
                        out.append(" ")
                        i += 1
                    continue
                out.append(" ")
                i += 1
                if code[i - 1] == ch:
                    break
            continue

        out.append(ch)
        i += 1

    return "".join(out)


def find_matching_brace(text: str, open_pos: int) -> int:
    """Offset of the brace closing the one at ``open_pos``, or ``len(text)``.

    ``text`` must be sanitized so braces in literals are not counted.
    """
    depth = 0
    for pos in range(open_pos, len(text)):
        ch = text[pos]
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return pos
    return len(text)


class SourceIndex:
    """Read-only view of one script shared by all checkers of an audit.

    Holds the raw text, its sanitized twin, both split into lines, and the
    offsets of line breaks and lifecycle markers, all computed once.
    """

    def __init__(self, code: str):
        if not isinstance(code, str):
            raise TypeError(f"source must be str, not {type(code).__name__}")
        self.code = code
        self.sanitized = sanitize(code)
        self.lines = code.split("\n")
        self.sanitized_lines = self.sanitized.split("\n")
        self._newlines = [m.start() for m in re.finditer("\n", code)]
        self._phase_offsets: Dict[str, List[int]] = {
            phase: [m.start() for m in pattern.finditer(self.sanitized)]
            for phase, pattern in _PHASE_PATTERNS.items()
        }
        self._methods: Dict[str, Optional[Tuple[int, int]]] = {}

    @property
    def line_count(self) -> int:
        return len(self.lines)

    def line_of(self, offset: int) -> int:
        """1-based line number of a character offset."""
        return bisect.bisect_left(self._newlines, offset) + 1

    def line_start(self, line: int) -> int:
        """Offset of the first character of a 1-based line."""
        if line <= 1:
            return 0
        return self._newlines[min(line, len(self._newlines) + 1) - 2] + 1

    def last_marker(self, phase: str, offset: int) -> int:
        """Offset of the last ``phase`` marker before ``offset``, or -1."""
        offsets = self._phase_offsets[phase]
        idx = bisect.bisect_left(offsets, offset)
        return offsets[idx - 1] if idx else -1

    def phase_at(self, offset: int) -> Optional[str]:
        """Lifecycle phase whose marker most recently precedes ``offset``."""
        best = None
        best_pos = -1
        for phase in self._phase_offsets:
            pos = self.last_marker(phase, offset)
            if pos > best_pos:
                best, best_pos = phase, pos
        return best

    def method_body(self, name: str) -> Optional[Tuple[int, int]]:
        """(open brace, close brace) offsets of an override method, if declared."""
        if name not in self._methods:
            pattern = re.compile(r"\boverride\s+void\s+" + re.escape(name) + r"\s*\(\s*\)")
            span = None
            m = pattern.search(self.sanitized)
            if m:
                open_pos = self.sanitized.find("{", m.end())
                if open_pos != -1:
                    span = (open_pos, find_matching_brace(self.sanitized, open_pos))
            self._methods[name] = span
        return self._methods[name]

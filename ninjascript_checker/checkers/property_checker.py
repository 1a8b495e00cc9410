"""
Declarative metadata on user-configurable properties.
"""

import re

from ..checker_base import BaseChecker
from ..issue import Severity

NUMERIC_TYPES = ("int", "double", "float", "decimal", "long")
PLAIN_TYPES = ("bool", "string")
_AUTO_PROPERTY = re.compile(
    r"public\s+(" + "|".join(NUMERIC_TYPES + PLAIN_TYPES + ("Brush", "TimeSpan")) + r")\s+(\w+)"
    r"\s*\{\s*get\s*;\s*set\s*;\s*\}"
)
_MEMBER_END = re.compile(r"[;}]\s*$")
ATTRIBUTE_LOOKBACK = 8


class PropertyChecker(BaseChecker):
    """[NinjaScriptProperty], [Display] and [Range] on public auto-properties."""

    name = "properties"

    def _run_checks(self, source, issues):
        for m in _AUTO_PROPERTY.finditer(source.sanitized):
            prop_type, prop = m.group(1), m.group(2)
            if prop.endswith("Serializable"):
                continue
            line = source.line_of(m.start())
            attributes = self._attribute_block(source, line)

            if prop_type != "Brush":
                if "[NinjaScriptProperty" not in attributes:
                    self._add_issue(
                        issues, Severity.WARNING, line,
                        f'Property "{prop}" lacks [NinjaScriptProperty]; users cannot configure it',
                        subject=prop,
                    )
                if not re.search(r"\[\s*Display\s*\(", attributes):
                    self._add_issue(
                        issues, Severity.WARNING, line,
                        f'Property "{prop}" lacks [Display]; it has no name or order in the UI',
                        subject=prop,
                    )

            has_range = re.search(r"\bRange\s*\(", attributes) is not None
            if prop_type in NUMERIC_TYPES and not has_range:
                self._add_issue(
                    issues, Severity.WARNING, line,
                    f'Numeric property "{prop}" ({prop_type}) lacks [Range]; input is not validated',
                    subject=prop,
                )
            elif prop_type in PLAIN_TYPES and has_range:
                self._add_issue(
                    issues, Severity.WARNING, line,
                    f'[Range] on {prop_type} property "{prop}" has no effect',
                    subject=prop,
                )

    @staticmethod
    def _attribute_block(source, line):
        """Attribute lines directly above a declaration, stopping at the previous member."""
        block = [source.sanitized_lines[line - 1].split("public", 1)[0]]
        for idx in range(line - 2, max(-1, line - 2 - ATTRIBUTE_LOOKBACK), -1):
            text = source.sanitized_lines[idx]
            if _MEMBER_END.search(text) or text.strip().startswith("#region"):
                break
            block.append(text)
        return "\n".join(reversed(block))

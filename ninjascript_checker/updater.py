"""
Deterministic modernization of NinjaScript source.

Brings older or hand-written scripts in line with the platform packaging:
namespace, using directives, NinjaTrader 7 drawing calls and the legacy
CalculateOnBarClose flag.
"""

import re
from dataclasses import dataclass, field
from typing import List, Optional

from .utils import NAMESPACE_DECLARATION, sanitize

STRATEGY = "strategy"
INDICATOR = "indicator"

EXPECTED_NAMESPACES = {
    INDICATOR: "NinjaTrader.NinjaScript.Indicators",
    STRATEGY: "NinjaTrader.NinjaScript.Strategies",
}

REQUIRED_USINGS = (
    "System",
    "System.ComponentModel",
    "System.ComponentModel.DataAnnotations",
    "System.Windows.Media",
    "NinjaTrader.Cbi",
    "NinjaTrader.Data",
    "NinjaTrader.Gui.NinjaScript",
    "NinjaTrader.Gui.Tools",
    "NinjaTrader.NinjaScript",
    "NinjaTrader.NinjaScript.DrawingTools",
    "NinjaTrader.NinjaScript.Indicators",
)

# NinjaTrader 7 drawing helpers and their NinjaTrader 8 replacement
DEPRECATED_DRAW_METHODS = {
    "DrawArrowUp": "Draw.ArrowUp",
    "DrawArrowDown": "Draw.ArrowDown",
    "DrawText": "Draw.Text",
    "DrawTextFixed": "Draw.TextFixed",
    "DrawLine": "Draw.Line",
    "DrawRectangle": "Draw.Rectangle",
    "DrawTriangleUp": "Draw.TriangleUp",
    "DrawTriangleDown": "Draw.TriangleDown",
    "DrawDot": "Draw.Dot",
    "DrawDiamond": "Draw.Diamond",
    "DrawSquare": "Draw.Square",
    "DrawRegion": "Draw.Region",
    "DrawHorizontalLine": "Draw.HorizontalLine",
    "DrawVerticalLine": "Draw.VerticalLine",
    "DrawRay": "Draw.Ray",
}


@dataclass(frozen=True)
class CodeChange:
    """One rewrite applied by the updater."""
    description: str
    before: str
    after: str


@dataclass
class UpdateResult:
    """Updated code and the list of applied changes."""
    code: str
    script_type: str
    changes: List[CodeChange] = field(default_factory=list)


def detect_type(code: str) -> str:
    """Strategy if the class derives from Strategy, indicator otherwise."""
    return STRATEGY if re.search(r":\s*Strategy\b", sanitize(code)) else INDICATOR


def update_code(code: str, script_type: Optional[str] = None) -> UpdateResult:
    """Apply all modernization passes, in order."""
    kind = (script_type or "").strip().lower()
    if kind not in EXPECTED_NAMESPACES:
        kind = detect_type(code)
    changes: List[CodeChange] = []
    updated = _fix_namespace(code, kind, changes)
    updated = _fix_usings(updated, changes)
    updated = _fix_deprecated_methods(updated, changes)
    updated = _fix_calculate_property(updated, changes)
    return UpdateResult(code=updated, script_type=kind, changes=changes)


def _fix_namespace(code: str, kind: str, changes: List[CodeChange]) -> str:
    expected = EXPECTED_NAMESPACES[kind]
    match = NAMESPACE_DECLARATION.search(sanitize(code))
    if not match:
        return code
    current = code[match.start(1):match.end(1)]
    if current == expected:
        return code
    changes.append(CodeChange("Namespace corrected", current, expected))
    return code[:match.start(1)] + expected + code[match.end(1):]


def _required_usings(code: str) -> List[str]:
    usings = list(REQUIRED_USINGS)
    if re.search(r"\bBrush\b", code):
        usings += ["System.Xml.Serialization", "NinjaTrader.Gui"]
    if re.search(r"\bList\s*<", code):
        usings.append("System.Collections.Generic")
    if re.search(r"\.(?:Select|Where|OrderBy|OrderByDescending|Any|Sum|Average)\s*\(", code):
        usings.append("System.Linq")
    return usings


def _fix_usings(code: str, changes: List[CodeChange]) -> str:
    stripped = sanitize(code)
    missing = [
        u for u in _required_usings(stripped)
        if not re.search(r"\busing\s+" + re.escape(u) + r"\s*;", stripped)
    ]
    if not missing:
        return code

    namespace = NAMESPACE_DECLARATION.search(stripped)
    end_region = re.search(r"^[ \t]*#endregion", stripped, re.MULTILINE)
    if end_region and (namespace is None or end_region.start() < namespace.start()):
        insert_at = end_region.start()
    elif namespace:
        insert_at = stripped.rfind("\n", 0, namespace.start()) + 1
    else:
        insert_at = 0

    newline = "\r\n" if "\r\n" in code else "\n"
    block = "".join(f"using {u};{newline}" for u in missing)
    changes.append(CodeChange(
        f"{len(missing)} using directive(s) added",
        "",
        ", ".join(f"using {u};" for u in missing),
    ))
    return code[:insert_at] + block + code[insert_at:]


def _fix_deprecated_methods(code: str, changes: List[CodeChange]) -> str:
    updated = code
    for old, replacement in DEPRECATED_DRAW_METHODS.items():
        pattern = re.compile(r"(?<![\w.])" + old + r"(?=\s*\()")
        # Offsets from the sanitized twin keep calls inside literals untouched
        hits = list(pattern.finditer(sanitize(updated)))
        if not hits:
            continue
        changes.append(CodeChange("Deprecated drawing method replaced", f"{old}(", f"{replacement}("))
        for m in reversed(hits):
            updated = updated[:m.start()] + replacement + updated[m.end():]
    return updated


def _fix_calculate_property(code: str, changes: List[CodeChange]) -> str:
    updated = code
    for flag, mode in (("true", "OnBarClose"), ("false", "OnEachTick")):
        pattern = re.compile(r"\bCalculateOnBarClose\s*=\s*" + flag + r"\s*;")
        hits = list(pattern.finditer(sanitize(updated)))
        if not hits:
            continue
        after = f"Calculate = Calculate.{mode};"
        changes.append(CodeChange("Calculate property modernized", f"CalculateOnBarClose = {flag}", after))
        for m in reversed(hits):
            updated = updated[:m.start()] + after + updated[m.end():]
    return updated

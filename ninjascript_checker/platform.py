"""
Closed symbol tables describing one version of the NinjaScript platform.

Checkers and the compilation simulator read these tables instead of holding
their own lists, so supporting another platform release is a data change.
"""

from dataclasses import dataclass
from typing import FrozenSet, Tuple


@dataclass(frozen=True)
class PlatformTables:
    """Whitelists and known names for a platform release."""
    version: str
    indicators: Tuple[str, ...]
    draw_methods: FrozenSet[str]
    per_bar_draw_methods: FrozenSet[str]
    fixed_draw_tags: FrozenSet[str]
    states: Tuple[str, ...]
    required_usings: Tuple[str, ...]
    series_types: FrozenSet[str]
    base_namespaces: Tuple[Tuple[str, str], ...]

    def namespace_for(self, base_class: str) -> str:
        """Namespace segment the platform expects for a base class."""
        return dict(self.base_namespaces).get(base_class, "")


NT8_TABLES = PlatformTables(
    version="NT8",
    indicators=(
        "RSI", "MACD", "SMA", "EMA", "ATR", "Swing", "Bollinger", "Stochastics",
        "VWAP", "ADX", "CCI", "TEMA", "WMA", "HMA", "DEMA", "OBV", "MFI", "VOL",
        "DM", "DonchianChannel", "KeltnerChannel", "ParabolicSAR", "WilliamsR",
        "Momentum", "ROC", "StdDev", "LinReg", "MAX", "MIN", "SUM",
    ),
    draw_methods=frozenset({
        "ArrowUp", "ArrowDown", "Text", "TextFixed", "Line", "HorizontalLine",
        "VerticalLine", "Rectangle", "Region", "TriangleUp", "TriangleDown",
        "Diamond", "Dot", "Square", "Ray", "Arc", "Ellipse", "ExtendedLine",
        "AndrewsPitchfork", "FibonacciCircle", "FibonacciExtensions",
        "FibonacciRetracements", "FibonacciTimeExtensions", "GannFan",
        "RegressionChannel", "TrendChannel",
    }),
    per_bar_draw_methods=frozenset({
        "ArrowUp", "ArrowDown", "Text", "TriangleUp", "TriangleDown",
        "Diamond", "Dot", "Square",
    }),
    fixed_draw_tags=frozenset({"infoPanel", "info", "status", "waiting", "panel", "dashboard"}),
    states=(
        "SetDefaults", "Configure", "Active", "DataLoaded", "Historical",
        "Transition", "Realtime", "Terminated", "Finalized",
    ),
    required_usings=("System",),
    series_types=frozenset({"double", "bool", "int", "float", "long", "DateTime"}),
    base_namespaces=(("Indicator", "Indicators"), ("Strategy", "Strategies")),
)

DEFAULT_TABLES = NT8_TABLES

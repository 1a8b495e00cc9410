"""
Checkers package for NinjaScript rule violations.
"""

from .syntax_checker import SyntaxChecker
from .structure_checker import StructureChecker
from .brush_checker import BrushChecker
from .anti_doublon_checker import AntiDoublonChecker
from .property_checker import PropertyChecker
from .mtf_checker import MultiTimeframeChecker
from .memory_checker import MemoryChecker
from .alert_checker import AlertChecker
from .panel_checker import PanelChecker

__all__ = [
    'SyntaxChecker',
    'StructureChecker',
    'BrushChecker',
    'AntiDoublonChecker',
    'PropertyChecker',
    'MultiTimeframeChecker',
    'MemoryChecker',
    'AlertChecker',
    'PanelChecker',
]

"""
Static verification engine for NinjaTrader 8 NinjaScript files.
"""

from .compilation import CompilationSimulator, test_compilation
from .issue import (
    AuditResult,
    CompilationMessage,
    CompilationResult,
    Issue,
    Severity,
    Status,
)
from .main_checker import ScriptAuditor, audit
from .platform import DEFAULT_TABLES, NT8_TABLES, PlatformTables
from .reporter import ReportGenerator
from .updater import update_code

__version__ = "0.1.0"

__all__ = [
    "AuditResult",
    "CompilationMessage",
    "CompilationResult",
    "CompilationSimulator",
    "DEFAULT_TABLES",
    "Issue",
    "NT8_TABLES",
    "PlatformTables",
    "ReportGenerator",
    "ScriptAuditor",
    "Severity",
    "Status",
    "audit",
    "test_compilation",
    "update_code",
]

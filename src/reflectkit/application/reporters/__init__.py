"""Reporters for scan results.

Output is str, not print(). Caller decides destination.
"""

from reflectkit.application.reporters.console import ConsoleConfig, ConsoleReporter
from reflectkit.application.reporters.protocol import ReporterProtocol

__all__ = [
    "ConsoleConfig",
    "ConsoleReporter",
    "ReporterProtocol",
]

"""
CipherStep Output Module
=========================

Console display and report generation for CipherStep results.
"""

from cipherstep.output.console import CipherConsoleOutput
from cipherstep.output.report import CipherReportGenerator

__all__ = [
    "CipherConsoleOutput",
    "CipherReportGenerator",
]

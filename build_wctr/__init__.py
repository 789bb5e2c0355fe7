"""
Build WCTR - wall-clock time responsibility analysis for parallel build logs
"""

__version__ = "1.0.0"

from .core.analyzer import WctrAnalyzer
from .core.errors import LogAnalysisError
from .core.types import AnalysisConfig, Attribution, TaskInterval

__all__ = ["WctrAnalyzer", "LogAnalysisError", "AnalysisConfig", "Attribution", "TaskInterval"]

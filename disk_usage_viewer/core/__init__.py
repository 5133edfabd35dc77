"""Core analysis functionality."""

from .analyzer import UsageAnalyzer, RootAccessError, analyze_disk_usage
from .sizer import DirectorySizer
from .models import Entry, UsageResult, OSInfo

__all__ = ["UsageAnalyzer", "RootAccessError", "analyze_disk_usage", "DirectorySizer",
           "Entry", "UsageResult", "OSInfo"]

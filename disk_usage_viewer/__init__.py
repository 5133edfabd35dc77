"""
Disk Usage Viewer - Reports disk space consumption for directory trees.

This package computes per-entry sizes for a directory, aggregates a total and
returns a breakdown sorted by size, expanded to a requested depth.
"""

__version__ = "1.0.0"

from .core.analyzer import UsageAnalyzer, RootAccessError, analyze_disk_usage
from .core.models import Entry, UsageResult
from .utils.formatters import format_size

__all__ = ["UsageAnalyzer", "RootAccessError", "analyze_disk_usage", "Entry", "UsageResult", "format_size"]

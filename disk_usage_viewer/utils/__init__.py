"""Utility modules for disk usage reporting."""

from .formatters import format_size, truncate_string, render_usage_report
from .paths import normalize_path, default_path, get_windows_drives, get_os_info

__all__ = ["format_size", "truncate_string", "render_usage_report",
           "normalize_path", "default_path", "get_windows_drives", "get_os_info"]

"""Transport independent request handling."""

from .handler import handle_analyze, handle_os_info, handle_drives, parse_depth, resolve_request

__all__ = ["handle_analyze", "handle_os_info", "handle_drives", "parse_depth", "resolve_request"]

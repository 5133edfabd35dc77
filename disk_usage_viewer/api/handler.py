"""Request handling for disk usage queries.

Maps query style parameters (``path``, ``depth``) onto an analysis call and
returns ``(status, payload)`` pairs whose payloads are ready for JSON
serialization. The functions do not depend on any transport.
"""

import logging
from typing import Any, Dict, Mapping, Optional, Tuple

from ..core.analyzer import UsageAnalyzer, RootAccessError
from ..utils.paths import (
    WINDOWS, current_os_family, default_path, normalize_path, get_os_info, get_windows_drives
)

HTTP_OK = 200
HTTP_BAD_REQUEST = 400

logger = logging.getLogger(__name__)

Response = Tuple[int, Dict[str, Any]]


def parse_depth(raw: Any, default: int = 1, max_depth: int = 5) -> int:
    """Parse a requested breakdown depth.

    Values that are missing, not integers or outside ``1..max_depth`` fall
    back to ``default``.

    Args:
        raw: Raw parameter value, usually a string.
        default: Depth used when ``raw`` is unusable.
        max_depth: Largest accepted depth.

    Returns:
        Depth in the range ``1..max_depth``.
    """
    if raw is None or raw == '':
        return default
    try:
        depth = int(raw)
    except (TypeError, ValueError):
        return default
    if 0 < depth <= max_depth:
        return depth
    return default


def resolve_request(params: Mapping[str, Any], default_depth: int = 1, max_depth: int = 5,
                    os_family: Optional[str] = None) -> Tuple[str, int]:
    """Resolve the analysis root and depth of a request.

    A missing ``path`` means the default root of the OS family.
    """
    path = params.get('path') or default_path(os_family)
    path = normalize_path(path, os_family)
    depth = parse_depth(params.get('depth'), default=default_depth, max_depth=max_depth)
    return path, depth


def handle_analyze(params: Mapping[str, Any], analyzer: Optional[UsageAnalyzer] = None,
                   default_depth: int = 1, max_depth: int = 5,
                   os_family: Optional[str] = None) -> Response:
    """Handle a disk usage analysis request.

    Args:
        params: Request parameters; ``path`` and ``depth`` are read.
        analyzer: Analyzer to use; a default one is created when omitted.
        default_depth: Depth used when none (or an invalid one) is requested.
        max_depth: Largest accepted depth.
        os_family: Path family used for normalization; defaults to the host.

    Returns:
        ``(200, result)`` on success, ``(400, {"error": message})`` when the
        root path cannot be accessed.
    """
    path, depth = resolve_request(params, default_depth, max_depth, os_family)

    analyzer = analyzer or UsageAnalyzer()

    try:
        result = analyzer.analyze(path, depth)
    except RootAccessError as e:
        logger.warning(f"Analysis request for {path} failed: {e.reason}")
        return HTTP_BAD_REQUEST, {'error': e.reason}

    return HTTP_OK, result.to_dict()


def handle_os_info() -> Response:
    """Describe the host operating system."""
    return HTTP_OK, get_os_info().to_dict()


def handle_drives() -> Response:
    """List the available Windows drive roots (empty elsewhere)."""
    drives = get_windows_drives() if current_os_family() == WINDOWS else []
    return HTTP_OK, {'drives': drives}

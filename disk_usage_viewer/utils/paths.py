"""Operating system specific path handling."""

import ntpath
import os
import platform
import posixpath
import string
from typing import List, Optional

from ..core.models import OSInfo

WINDOWS = 'windows'
POSIX = 'posix'
FALLBACK_DRIVE = 'C:'


def current_os_family() -> str:
    """Return the path family of the running interpreter."""
    return WINDOWS if os.name == 'nt' else POSIX


def _current_drive(cwd: Optional[str] = None) -> str:
    if cwd is None:
        try:
            cwd = os.getcwd()
        except OSError:
            return FALLBACK_DRIVE
    if len(cwd) >= 2 and cwd[1] == ':':
        return cwd[:2]
    return FALLBACK_DRIVE


def default_path(os_family: Optional[str] = None, cwd: Optional[str] = None) -> str:
    """Get the default analysis root for an OS family.

    Args:
        os_family: ``"windows"`` or ``"posix"``; defaults to the host family.
        cwd: Working directory used to pick the Windows drive.

    Returns:
        ``/`` on POSIX systems, the current drive root on Windows.
    """
    os_family = os_family or current_os_family()
    if os_family == WINDOWS:
        return _current_drive(cwd) + '\\'
    return '/'


def normalize_path(path: str, os_family: Optional[str] = None, cwd: Optional[str] = None) -> str:
    """Normalize a user supplied path into the absolute form of an OS family.

    Args:
        path: Path as typed by the user.
        os_family: ``"windows"`` or ``"posix"``; defaults to the host family.
        cwd: Working directory used to pick the Windows drive.

    Returns:
        Cleaned absolute path string.
    """
    os_family = os_family or current_os_family()
    path = (path or '').strip()

    if os_family == WINDOWS:
        path = path.replace('/', '\\')
        if path in ('', '\\'):
            return default_path(WINDOWS, cwd)

        has_drive = len(path) >= 2 and path[1] == ':'
        if not has_drive:
            drive = _current_drive(cwd)
            if path.startswith('\\'):
                path = drive + path
            else:
                path = drive + '\\' + path
        return ntpath.normpath(path)

    if not path:
        return '/'
    if not path.startswith('/'):
        path = '/' + path
    normalized = posixpath.normpath(path)
    # normpath preserves a leading double slash
    if normalized.startswith('//'):
        normalized = '/' + normalized.lstrip('/')
    return normalized


def get_windows_drives() -> List[str]:
    """Return the drive roots that exist on this machine."""
    drives = []
    for letter in string.ascii_uppercase:
        drive = f"{letter}:\\"
        if os.path.exists(drive):
            drives.append(drive)
    return drives


def get_os_info() -> OSInfo:
    """Describe the host operating system."""
    is_windows = current_os_family() == WINDOWS
    return OSInfo(
        os=platform.system().lower() or os.name,
        is_windows=is_windows,
        default_path=default_path(),
        drives=get_windows_drives() if is_windows else None,
    )

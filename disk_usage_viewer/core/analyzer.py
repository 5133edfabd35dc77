"""Disk usage analysis with bounded concurrency."""

import os
import logging
import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Optional

from .models import Entry, UsageResult
from .sizer import DirectorySizer
from ..utils.formatters import format_size

DEFAULT_MAX_WORKERS = 10


class RootAccessError(Exception):
    """Raised when the analysis root cannot be stat'ed or listed."""

    def __init__(self, path: str, reason: str):
        super().__init__(reason)
        self.path = path
        self.reason = reason
        self.result = UsageResult(root_path=path, error=reason)


def _error_reason(error: OSError) -> str:
    if error.strerror and error.filename:
        return f"{error.strerror}: {error.filename}"
    return str(error)


class UsageAnalyzer:
    """Computes sorted, size-annotated breakdowns of directory trees.

    Immediate children of the analysis root are sized in a thread pool of
    ``max_workers`` tasks. Everything below the top level runs sequentially
    inside the task of its top-level ancestor, so at most ``max_workers``
    tree walks are in flight at any time. There is no timeout: a filesystem
    call that hangs blocks its task, and ``analyze`` with it.
    """

    def __init__(self, max_workers: int = DEFAULT_MAX_WORKERS,
                 collect_warnings: bool = False,
                 sizer: Optional[Callable[..., int]] = None):
        """Initialize usage analyzer.

        Args:
            max_workers: Maximum number of concurrent top-level size computations.
            collect_warnings: Record skipped entries in ``UsageResult.warnings``.
            sizer: Callable ``(path, warnings)`` returning a directory's full size.
                Defaults to ``DirectorySizer().get_size``.
        """
        if max_workers < 1:
            raise ValueError(f"max_workers must be at least 1, got {max_workers}")
        self.max_workers = max_workers
        self.collect_warnings = collect_warnings
        self.sizer = sizer or DirectorySizer().get_size
        self.logger = logging.getLogger(__name__)

    def analyze(self, root_path: str, depth: int = 1) -> UsageResult:
        """Analyze disk usage below a path.

        Args:
            root_path: File or directory to analyze.
            depth: Number of directory levels to expand into entries; sizes
                always cover the whole subtree.

        Returns:
            UsageResult with items sorted by size, largest first.

        Raises:
            RootAccessError: If the root does not exist or cannot be listed.
        """
        root_path = os.path.normpath(root_path)
        depth = max(depth, 1)

        self.logger.info(f"Starting analysis of {root_path} (depth {depth})")

        try:
            root_stat = os.stat(root_path)
        except OSError as e:
            self.logger.error(f"Cannot access {root_path}: {e}")
            raise RootAccessError(root_path, _error_reason(e)) from e

        if not os.path.isdir(root_path):
            size = root_stat.st_size
            entry = Entry(
                name=os.path.basename(root_path) or root_path,
                path=root_path,
                size=size,
                size_str=format_size(size),
                is_dir=False
            )
            return UsageResult(
                root_path=root_path,
                total_size=size,
                total_str=format_size(size),
                items=[entry],
                warnings=[] if self.collect_warnings else None
            )

        try:
            with os.scandir(root_path) as it:
                dir_entries = list(it)
        except OSError as e:
            self.logger.error(f"Cannot list {root_path}: {e}")
            raise RootAccessError(root_path, _error_reason(e)) from e

        items: List[Entry] = []
        warnings: List[str] = []
        totals = {'size': 0}
        lock = threading.Lock()

        def size_child(dir_entry: os.DirEntry):
            task_warnings = [] if self.collect_warnings else None
            entry = self._build_entry(dir_entry, depth, task_warnings)
            with lock:
                items.append(entry)
                totals['size'] += entry.size
                if task_warnings:
                    warnings.extend(task_warnings)

        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            futures = [executor.submit(size_child, dir_entry) for dir_entry in dir_entries]
            for future in futures:
                future.result()

        items.sort(key=lambda item: item.size, reverse=True)
        total_size = totals['size']

        self.logger.info(
            f"Completed analysis of {root_path}: {len(items)} entries, {format_size(total_size)}"
        )

        return UsageResult(
            root_path=root_path,
            total_size=total_size,
            total_str=format_size(total_size),
            items=items,
            warnings=sorted(warnings) if self.collect_warnings else None
        )

    def _build_entry(self, dir_entry: os.DirEntry, depth: int,
                     warnings: Optional[List[str]]) -> Entry:
        """Build the entry for one directory child, expanding ``depth - 1`` levels."""
        is_dir = self._is_dir(dir_entry, warnings)
        children = None

        if is_dir:
            size = self.sizer(dir_entry.path, warnings)
            if depth > 1:
                children = self._children_of(dir_entry.path, depth - 1, warnings)
        else:
            size = self._file_size(dir_entry, warnings)

        return Entry(
            name=dir_entry.name,
            path=dir_entry.path,
            size=size,
            size_str=format_size(size),
            is_dir=is_dir,
            children=children
        )

    def _children_of(self, path: str, depth: int,
                     warnings: Optional[List[str]]) -> Optional[List[Entry]]:
        try:
            with os.scandir(path) as it:
                dir_entries = list(it)
        except OSError as e:
            # The sizer already reported this path
            self._skip(path, e, None)
            return None

        children = [self._build_entry(dir_entry, depth, warnings) for dir_entry in dir_entries]
        children.sort(key=lambda child: child.size, reverse=True)
        return children

    def _is_dir(self, dir_entry: os.DirEntry, warnings: Optional[List[str]]) -> bool:
        try:
            return dir_entry.is_dir(follow_symlinks=False)
        except OSError as e:
            self._skip(dir_entry.path, e, warnings)
            return False

    def _file_size(self, dir_entry: os.DirEntry, warnings: Optional[List[str]]) -> int:
        """Size of a non-directory entry; only regular files count."""
        try:
            if not dir_entry.is_file(follow_symlinks=False):
                return 0
            return dir_entry.stat(follow_symlinks=False).st_size
        except OSError as e:
            self._skip(dir_entry.path, e, warnings)
            return 0

    def _skip(self, path: str, error: OSError, warnings: Optional[List[str]]):
        self.logger.debug(f"Skipping {path}: {error}")
        if warnings is not None:
            warnings.append(f"{path}: {error.strerror or error}")


def analyze_disk_usage(root_path: str, depth: int = 1) -> UsageResult:
    """Analyze a path with a default ``UsageAnalyzer``."""
    return UsageAnalyzer().analyze(root_path, depth)

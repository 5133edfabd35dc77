"""Full-subtree size computation."""

import os
import logging
from typing import List, Optional


class DirectorySizer:
    """Sums the size of every regular file below a directory.

    Symlinks are never followed.
    """

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def get_size(self, path: str, warnings: Optional[List[str]] = None) -> int:
        """Calculate the total size of a directory tree.

        Entries that cannot be listed or stat'ed are skipped and contribute
        nothing to the total.

        Args:
            path: Directory to walk.
            warnings: Optional list that receives one message per skipped entry.

        Returns:
            Total size in bytes of the regular files found.
        """
        total_size = 0
        pending = [path]

        while pending:
            current = pending.pop()
            try:
                with os.scandir(current) as entries:
                    for entry in entries:
                        try:
                            if entry.is_dir(follow_symlinks=False):
                                pending.append(entry.path)
                            elif entry.is_file(follow_symlinks=False):
                                total_size += entry.stat(follow_symlinks=False).st_size
                        except OSError as e:
                            self._skip(entry.path, e, warnings)
            except OSError as e:
                self._skip(current, e, warnings)

        return total_size

    def _skip(self, path: str, error: OSError, warnings: Optional[List[str]]):
        self.logger.debug(f"Skipping {path}: {error}")
        if warnings is not None:
            warnings.append(f"{path}: {error.strerror or error}")

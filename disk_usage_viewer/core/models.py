"""Data models for disk usage analysis."""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class Entry:
    """A file or directory node in an analysis result tree.

    ``children`` is None when the entry was not expanded and an empty list
    when it was expanded but holds nothing.
    """
    name: str
    path: str
    size: int
    size_str: str
    is_dir: bool
    children: Optional[List["Entry"]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON wire shape."""
        data = {
            'name': self.name,
            'path': self.path,
            'size': self.size,
            'sizeStr': self.size_str,
            'isDir': self.is_dir,
        }
        if self.children is not None:
            data['children'] = [child.to_dict() for child in self.children]
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Entry":
        """Build an entry from its JSON wire shape."""
        children = data.get('children')
        return cls(
            name=data['name'],
            path=data['path'],
            size=data['size'],
            size_str=data['sizeStr'],
            is_dir=data['isDir'],
            children=[cls.from_dict(child) for child in children] if children is not None else None
        )


@dataclass
class UsageResult:
    """Result of one disk usage analysis."""
    root_path: str
    total_size: int = 0
    total_str: str = ""
    items: List[Entry] = field(default_factory=list)
    error: Optional[str] = None
    warnings: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON wire shape."""
        data = {
            'rootPath': self.root_path,
            'totalSize': self.total_size,
            'totalStr': self.total_str,
            'items': [item.to_dict() for item in self.items],
        }
        if self.error:
            data['error'] = self.error
        if self.warnings is not None:
            data['warnings'] = list(self.warnings)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UsageResult":
        """Build a result from its JSON wire shape."""
        return cls(
            root_path=data['rootPath'],
            total_size=data.get('totalSize', 0),
            total_str=data.get('totalStr', ""),
            items=[Entry.from_dict(item) for item in data.get('items', [])],
            error=data.get('error'),
            warnings=data.get('warnings')
        )


@dataclass
class OSInfo:
    """Information about the host operating system."""
    os: str
    is_windows: bool
    default_path: str
    drives: Optional[List[str]] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'os': self.os,
            'isWindows': self.is_windows,
            'defaultPath': self.default_path,
        }
        if self.drives:
            data['drives'] = list(self.drives)
        return data

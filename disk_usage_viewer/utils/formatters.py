"""Formatting utilities for disk usage output."""

from typing import List, Optional

from ..core.models import Entry, UsageResult

SIZE_UNITS = ['B', 'KB', 'MB', 'GB', 'TB']


def format_size(size_bytes: int) -> str:
    """Format a byte count in human readable form.

    Picks the largest 1024-based unit whose scaled value is at least 1 and
    keeps up to two (truncated) fractional digits.

    Args:
        size_bytes: Size in bytes.

    Returns:
        Human readable size string, e.g. ``"1.5 KB"`` or ``"1 GB"``.
    """
    if size_bytes < 0:
        return "-" + format_size(-size_bytes)

    unit_index = 0
    scale = 1
    while unit_index < len(SIZE_UNITS) - 1 and size_bytes >= scale * 1024:
        scale *= 1024
        unit_index += 1

    # Truncated to hundredths using integer arithmetic
    whole, hundredths = divmod(size_bytes * 100 // scale, 100)
    if hundredths == 0:
        number = str(whole)
    else:
        number = f"{whole}.{hundredths:02d}".rstrip('0')
    return f"{number} {SIZE_UNITS[unit_index]}"


def truncate_string(text: str, max_length: int, suffix: str = "...") -> str:
    """Truncate string to maximum length.

    Args:
        text: Text to truncate.
        max_length: Maximum length.
        suffix: Suffix to add when truncating.

    Returns:
        Truncated string.
    """
    if len(text) <= max_length:
        return text

    return text[:max_length - len(suffix)] + suffix


def render_usage_report(result: UsageResult, name_width: int = 48) -> str:
    """Render an analysis result as an indented text tree.

    Args:
        result: Analysis result to render.
        name_width: Column width reserved for entry names.

    Returns:
        Text report content.
    """
    report_lines = [
        f"Disk usage for {result.root_path}",
        "=" * (15 + len(result.root_path)),
        f"Total: {result.total_str} ({result.total_size:,} bytes)",
        "",
    ]

    if not result.items:
        report_lines.append("(empty)")
    else:
        _render_entries(result.items, 0, name_width, report_lines, result.total_size)

    if result.warnings:
        report_lines.extend(["", f"Skipped entries: {len(result.warnings)}"])
        report_lines.extend(f"  ! {warning}" for warning in result.warnings)

    return "\n".join(report_lines)


def _render_entries(entries: List[Entry], level: int, name_width: int,
                    report_lines: List[str], parent_size: Optional[int] = None):
    indent = "  " * level
    for entry in entries:
        label = entry.name + ("/" if entry.is_dir else "")
        label = truncate_string(indent + label, name_width)
        share = ""
        if parent_size:
            share = f"{entry.size * 100 / parent_size:5.1f}%"
        report_lines.append(f"{label:<{name_width}} {entry.size_str:>10} {share}".rstrip())
        if entry.children:
            _render_entries(entry.children, level + 1, name_width, report_lines, entry.size)

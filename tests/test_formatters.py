"""Tests for formatting utilities."""

from disk_usage_viewer.core.models import Entry, UsageResult
from disk_usage_viewer.utils.formatters import format_size, render_usage_report, truncate_string


class TestFormatSize:
    """Test format_size function."""

    def test_zero(self):
        assert format_size(0) == "0 B"

    def test_bytes(self):
        assert format_size(1023) == "1023 B"

    def test_exact_kb(self):
        assert format_size(1024) == "1 KB"

    def test_fractional_kb(self):
        assert format_size(1536) == "1.5 KB"

    def test_two_fractional_digits(self):
        assert format_size(int(1.25 * 1024**2)) == "1.25 MB"

    def test_fraction_is_truncated(self):
        # 1999 / 1024 = 1.952...
        assert format_size(1999) == "1.95 KB"

    def test_tiny_fraction_dropped(self):
        assert format_size(1025) == "1 KB"

    def test_exact_gb(self):
        assert format_size(1024**3) == "1 GB"

    def test_tb_is_largest_unit(self):
        assert format_size(1024**5) == "1024 TB"

    def test_negative(self):
        assert format_size(-1536) == "-1.5 KB"


class TestTruncateString:
    """Test truncate_string function."""

    def test_short_text_unchanged(self):
        assert truncate_string("abc", 10) == "abc"

    def test_long_text_truncated(self):
        assert truncate_string("abcdefghij", 6) == "abc..."


class TestRenderUsageReport:
    """Test render_usage_report function."""

    def test_renders_nested_entries(self):
        result = UsageResult(
            root_path="/data",
            total_size=2048,
            total_str="2 KB",
            items=[
                Entry(name="docs", path="/data/docs", size=1536, size_str="1.5 KB", is_dir=True,
                      children=[Entry(name="a.txt", path="/data/docs/a.txt", size=1536,
                                      size_str="1.5 KB", is_dir=False)]),
                Entry(name="b.txt", path="/data/b.txt", size=512, size_str="512 B", is_dir=False),
            ],
        )

        report = render_usage_report(result)
        lines = report.splitlines()

        assert lines[0] == "Disk usage for /data"
        assert "Total: 2 KB (2,048 bytes)" in report
        assert any(line.startswith("docs/") and "75.0%" in line for line in lines)
        assert any(line.startswith("  a.txt") and "100.0%" in line for line in lines)
        assert any(line.startswith("b.txt") and "512 B" in line for line in lines)

    def test_empty_result(self):
        report = render_usage_report(UsageResult(root_path="/empty", total_str="0 B"))
        assert "(empty)" in report

    def test_warnings_listed(self):
        result = UsageResult(root_path="/data", total_str="0 B", warnings=["/data/x: Permission denied"])
        report = render_usage_report(result)
        assert "Skipped entries: 1" in report
        assert "/data/x: Permission denied" in report

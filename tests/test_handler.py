"""Tests for request handling."""

import json

import pytest

from disk_usage_viewer.api import handler
from disk_usage_viewer.api.handler import (
    handle_analyze, handle_drives, handle_os_info, parse_depth, resolve_request
)
from disk_usage_viewer.core.analyzer import UsageAnalyzer
from disk_usage_viewer.core.models import UsageResult


class TestParseDepth:
    """Test parse_depth function."""

    @pytest.mark.parametrize("raw, expected", [
        (None, 1),
        ("", 1),
        ("3", 3),
        ("5", 5),
        ("6", 1),
        ("0", 1),
        ("-2", 1),
        ("deep", 1),
        (2, 2),
    ])
    def test_parse(self, raw, expected):
        assert parse_depth(raw) == expected

    def test_custom_default_and_limit(self):
        assert parse_depth(None, default=2, max_depth=3) == 2
        assert parse_depth("4", default=2, max_depth=3) == 2
        assert parse_depth("3", default=2, max_depth=3) == 3


class TestResolveRequest:
    """Test resolve_request function."""

    def test_defaults(self):
        assert resolve_request({}, os_family="posix") == ("/", 1)

    def test_path_normalized(self):
        path, depth = resolve_request({"path": "var//log/", "depth": "2"}, os_family="posix")
        assert path == "/var/log"
        assert depth == 2


class TestHandleAnalyze:
    """Test handle_analyze function."""

    def test_success_payload(self, sample_tree):
        status, payload = handle_analyze({"path": str(sample_tree), "depth": "2"}, os_family="posix")

        assert status == 200
        assert payload["rootPath"] == str(sample_tree)
        assert payload["totalSize"] == 10110
        assert payload["totalStr"] == "9.87 KB"
        assert "error" not in payload
        assert "warnings" not in payload
        items = {item["name"]: item for item in payload["items"]}
        assert set(items["big"]) == {"name", "path", "size", "sizeStr", "isDir", "children"}
        assert items["empty"]["children"] == []
        assert "children" not in items["a.txt"]
        json.dumps(payload)

    def test_payload_rebuilds_result(self, sample_tree):
        _, payload = handle_analyze({"path": str(sample_tree), "depth": "3"}, os_family="posix")

        result = UsageResult.from_dict(payload)

        assert result.total_size == 10110
        assert result.to_dict() == payload

    def test_depth_one_omits_children(self, sample_tree):
        status, payload = handle_analyze({"path": str(sample_tree)}, os_family="posix")

        assert status == 200
        assert all("children" not in item for item in payload["items"])

    def test_missing_path_is_bad_request(self):
        status, payload = handle_analyze({"path": "/definitely/does/not/exist"}, os_family="posix")

        assert status == 400
        assert list(payload) == ["error"]
        assert payload["error"]

    def test_uses_given_analyzer(self, sample_tree):
        status, payload = handle_analyze(
            {"path": str(sample_tree)},
            analyzer=UsageAnalyzer(collect_warnings=True),
            os_family="posix"
        )

        assert status == 200
        assert payload["warnings"] == []

    def test_invalid_depth_uses_default(self, sample_tree):
        status, payload = handle_analyze(
            {"path": str(sample_tree), "depth": "9"}, default_depth=2, os_family="posix"
        )

        assert status == 200
        items = {item["name"]: item for item in payload["items"]}
        assert "children" in items["big"]


class TestInfoHandlers:
    """Test OS info and drive handlers."""

    def test_os_info(self):
        status, payload = handle_os_info()

        assert status == 200
        assert {"os", "isWindows", "defaultPath"} <= set(payload)

    def test_drives_empty_off_windows(self, monkeypatch):
        monkeypatch.setattr(handler, "current_os_family", lambda: "posix")

        assert handle_drives() == (200, {"drives": []})

    def test_drives_on_windows(self, monkeypatch):
        monkeypatch.setattr(handler, "current_os_family", lambda: "windows")
        monkeypatch.setattr(handler, "get_windows_drives", lambda: ["C:\\"])

        assert handle_drives() == (200, {"drives": ["C:\\"]})

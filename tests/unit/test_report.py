"""Tests for result formatting and output."""

import json

import pytest

from ui_elf.errors import OutputWriteError
from ui_elf.models import ComponentMatch, ScanResult
from ui_elf.report import format_json, format_terminal, write_output


@pytest.fixture
def result():
    return ScanResult(
        matches=[
            ComponentMatch(
                file_path="src/components/Form.vue",
                line=10,
                component_name="q-form",
                component_type="form",
            ),
            ComponentMatch(
                file_path="src/pages/Login.vue",
                line=25,
                component_name="form",
                component_type="form",
            ),
        ],
        total_count=2,
        scan_time_ms=150,
        component_type="form",
        scanned_files=50,
    )


@pytest.fixture
def empty_result():
    return ScanResult(component_type="dialog")


def test_format_terminal(result):
    output = format_terminal(result)
    assert "Component Finder Results - form" in output
    assert "=" * 50 in output
    assert "Found components in:" in output
    assert "  src/components/Form.vue (line 10): q-form" in output
    assert "  src/pages/Login.vue (line 25): form" in output
    assert "Total components found: 2" in output
    assert "Files scanned: 50" in output
    assert "Scan time: 150ms" in output


def test_format_terminal_empty(empty_result):
    output = format_terminal(empty_result)
    assert "No components found." in output
    assert "Found components in:" not in output
    assert "Total components found: 0" in output


def test_format_json(result):
    data = json.loads(format_json(result))
    assert data["totalCount"] == 2
    assert data["scannedFiles"] == 50
    assert data["componentType"] == "form"
    assert data["matches"][0]["componentName"] == "q-form"
    assert data["matches"][1]["filePath"] == "src/pages/Login.vue"


def test_format_json_empty_matches(empty_result):
    assert json.loads(format_json(empty_result))["matches"] == []


def test_write_terminal(result, capsys):
    write_output(result, "terminal")
    out = capsys.readouterr().out
    assert "Total components found: 2" in out


def test_write_json(result, tmp_path, capsys):
    path = tmp_path / "out.json"
    write_output(result, "json", str(path))
    assert json.loads(path.read_text())["totalCount"] == 2
    out = capsys.readouterr().out
    assert f"Results written to {path}" in out
    assert "Component Finder Results" not in out


def test_write_both(result, tmp_path, capsys):
    path = tmp_path / "out.json"
    write_output(result, "both", str(path))
    assert path.exists()
    out = capsys.readouterr().out
    assert "Component Finder Results - form" in out
    assert f"Results also written to {path}" in out


def test_write_json_default_path(result, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    write_output(result, "json")
    assert (tmp_path / "ui-elf-results.json").exists()


def test_write_unknown_format(result):
    with pytest.raises(ValueError, match="unsupported output format"):
        write_output(result, "xml")


def test_write_failure(result, tmp_path):
    with pytest.raises(OutputWriteError):
        write_output(result, "json", str(tmp_path / "missing" / "out.json"))

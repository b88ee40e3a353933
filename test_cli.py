"""
Tests for the domchain command line.
"""

import io

import pytest

from domchain.main import main


@pytest.fixture
def config_path(tmp_path):
    return str(tmp_path / "config.json")


def write_source(tmp_path, text):
    path = tmp_path / "page.dc"
    path.write_text(text, encoding="utf-8")
    return str(path)


def test_prints_html(tmp_path, config_path, capsys):
    source = write_source(tmp_path, "div { span }")
    assert main([source, "--config", config_path]) == 0
    assert capsys.readouterr().out.strip() == "<div><span></span></div>"


def test_check_counts_brace_pairs(tmp_path, config_path, capsys):
    source = write_source(tmp_path, "div { span('}') }")
    assert main([source, "--check", "--config", config_path]) == 0
    assert capsys.readouterr().out.strip() == "ok: 1 brace pairs"


def test_unbalanced_markup(tmp_path, config_path, capsys):
    source = write_source(tmp_path, "div { span")
    assert main([source, "--config", config_path]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Unbalanced braces" in captured.err


def test_tree_outline(tmp_path, config_path, capsys):
    source = write_source(tmp_path, "div { span }")
    assert main([source, "--tree", "--config", config_path]) == 0
    assert capsys.readouterr().out.splitlines() == ["body", "  div", "    span"]


def test_reads_stdin(monkeypatch, config_path, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("p(Hi)"))
    assert main(["-", "--config", config_path]) == 0
    assert capsys.readouterr().out.strip() == "<p>Hi</p>"


def test_missing_source(tmp_path, config_path, capsys):
    assert main([str(tmp_path / "nope.dc"), "--config", config_path]) == 2
    assert "cannot read" in capsys.readouterr().err


def test_pretty_from_config(tmp_path, capsys):
    config = tmp_path / "config.json"
    config.write_text('{"output": {"pretty": true}}')
    source = write_source(tmp_path, "div { p(Hi) }")
    assert main([source, "--config", str(config)]) == 0
    assert "\n" in capsys.readouterr().out.strip()

"""Tests for saving documents and the platform opener fallbacks."""

import logging
import subprocess

from turtlesoup import viewer


def test_save_document_writes_file(tmp_path):
    path = viewer.save_document("<html></html>", tmp_path / "out" / "drawing.html")
    assert path.read_text(encoding="utf-8") == "<html></html>"


def test_open_uses_first_working_command(monkeypatch):
    calls = []

    def fake_run(cmd, check, capture_output):
        calls.append(cmd[0])
        if cmd[0] == "open":
            raise FileNotFoundError(cmd[0])
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(viewer.subprocess, "run", fake_run)
    assert viewer.open_in_browser("output.html") is True
    assert calls == ["open", "cmd"]


def test_open_falls_through_to_xdg(monkeypatch):
    calls = []

    def fake_run(cmd, check, capture_output):
        calls.append(cmd)
        if cmd[0] != "xdg-open":
            raise subprocess.CalledProcessError(1, cmd)
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setattr(viewer.subprocess, "run", fake_run)
    assert viewer.open_in_browser("a.html") is True
    assert calls[-1] == ["xdg-open", "a.html"]


def test_open_reports_failure(monkeypatch, caplog):
    def fake_run(cmd, check, capture_output):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(viewer.subprocess, "run", fake_run)
    with caplog.at_level(logging.WARNING, logger="turtlesoup.viewer"):
        assert viewer.open_in_browser("missing.html") is False
    assert "Could not open missing.html" in caplog.text

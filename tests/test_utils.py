from __future__ import annotations

import io
import json
import sys

import pytest

from termboard import utils


def test_execute_command_returns_stdout():
    assert utils.execute_command([sys.executable, "-c", "print('hi')"]) == "hi\n"


def test_execute_command_folds_failures():
    out = utils.execute_command([sys.executable, "-c", "import sys; sys.exit(3)"])
    assert "exit status 3" in out
    assert out.endswith("\n")

    missing = utils.execute_command(["definitely-not-a-real-command-xyz"])
    assert missing.strip()


def test_execute_command_without_command():
    assert utils.execute_command(None) == ""
    assert utils.execute_command([]) == ""


def test_find_match():
    assert utils.find_match(r"(\w+)=(\d+)?", "a=1 b=") == [["a=1", "a", "1"], ["b=", "b", ""]]
    assert utils.find_match(r"x", "abc") == []


def test_parse_json_stream():
    assert utils.parse_json(io.StringIO('{"a": 1}\n{"a": 2} ')) == {"a": 2}
    assert utils.parse_json(io.StringIO("[1, 2]")) == [1, 2]
    assert utils.parse_json(io.StringIO("")) is None
    with pytest.raises(json.JSONDecodeError):
        utils.parse_json(io.StringIO('{"a": '))


def test_open_url_uses_platform_opener(monkeypatch):
    calls = []
    monkeypatch.setattr(utils.sys, "platform", "darwin")
    monkeypatch.setattr(utils.subprocess, "Popen", lambda args: calls.append(args))
    utils.open_file("https://example.com")
    assert calls == [["open", "https://example.com"]]


def test_open_url_errors_are_not_raised(monkeypatch):
    def boom(args):
        raise FileNotFoundError("xdg-open")

    monkeypatch.setattr(utils.sys, "platform", "freebsd13")
    monkeypatch.setattr(utils.subprocess, "Popen", boom)
    utils.open_file("http://example.com")


def test_open_file_expands_home(monkeypatch):
    calls = []
    monkeypatch.setattr(utils.sys, "platform", "linux")
    monkeypatch.setenv("HOME", "/home/tester")
    monkeypatch.setattr(utils, "execute_command", lambda args: calls.append(args) or "")
    utils.open_file("~/notes.txt")
    assert calls == [["xdg-open", "/home/tester/notes.txt"]]

import logging
import subprocess

from json_schema_to_go.pipeline.config import FormatterConfig
from json_schema_to_go.pipeline.formatters import GofmtFormatter, format_go_file
from json_schema_to_go.pipeline.formatters import gofmt_formatter

GO_SOURCE = "package types\n\ntype Foo struct {\nBar string\n}\n"


def _fake_which(name):
    return f"/usr/bin/{name}"


class TestGofmtFormatter:
    def test_runs_command_on_file(self, tmp_path, monkeypatch):
        path = tmp_path / "types.go"
        path.write_text(GO_SOURCE)
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append((cmd, kwargs))
            return subprocess.CompletedProcess(cmd, 0, stdout="", stderr="")

        monkeypatch.setattr(gofmt_formatter.shutil, "which", _fake_which)
        monkeypatch.setattr(gofmt_formatter.subprocess, "run", fake_run)

        assert GofmtFormatter().format_file(path, FormatterConfig(timeout=7)) is True
        assert calls[0][0] == ["gofmt", "-w", str(path)]
        assert calls[0][1]["timeout"] == 7

    def test_missing_executable(self, tmp_path, monkeypatch, caplog):
        path = tmp_path / "types.go"
        path.write_text(GO_SOURCE)
        monkeypatch.setattr(gofmt_formatter.shutil, "which", lambda name: None)

        with caplog.at_level(logging.WARNING):
            assert GofmtFormatter().format_file(path, FormatterConfig()) is False

        assert path.read_text() == GO_SOURCE
        assert "not found" in caplog.text

    def test_non_zero_exit_is_a_warning(self, tmp_path, monkeypatch, caplog):
        path = tmp_path / "types.go"
        path.write_text(GO_SOURCE)

        def fake_run(cmd, **kwargs):
            return subprocess.CompletedProcess(cmd, 2, stdout="", stderr="types.go:3:1: expected declaration")

        monkeypatch.setattr(gofmt_formatter.shutil, "which", _fake_which)
        monkeypatch.setattr(gofmt_formatter.subprocess, "run", fake_run)

        with caplog.at_level(logging.WARNING):
            assert GofmtFormatter().format_file(path, FormatterConfig()) is False

        assert "expected declaration" in caplog.text
        assert path.read_text() == GO_SOURCE

    def test_timeout_is_a_warning(self, tmp_path, monkeypatch):
        path = tmp_path / "types.go"
        path.write_text(GO_SOURCE)

        def fake_run(cmd, **kwargs):
            raise subprocess.TimeoutExpired(cmd, kwargs["timeout"])

        monkeypatch.setattr(gofmt_formatter.shutil, "which", _fake_which)
        monkeypatch.setattr(gofmt_formatter.subprocess, "run", fake_run)

        assert GofmtFormatter().format_file(path, FormatterConfig()) is False

    def test_empty_command_is_unavailable(self):
        assert GofmtFormatter().is_available(FormatterConfig(command=[])) is False

    def test_convenience_function(self, tmp_path, monkeypatch):
        path = tmp_path / "types.go"
        path.write_text(GO_SOURCE)
        monkeypatch.setattr(gofmt_formatter.shutil, "which", lambda name: None)

        assert format_go_file(path) is False

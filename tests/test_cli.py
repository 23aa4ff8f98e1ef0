"""Tests for cli module."""

import logging
import os
import subprocess
import sys
from pathlib import Path

import pytest

from PathTree import cli


@pytest.fixture
def paths_file(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    f = tmp_path / "paths.txt"
    f.write_text("src/\nsrc/main.rs\nsrc/lib.rs\n", encoding="utf-8")
    return f


class TestDefaultInvocation:
    def test_reads_default_file(self, paths_file, capsys):
        assert cli.main([]) == 0
        out = capsys.readouterr().out
        assert out == "src/\n├── main.rs\n└── lib.rs\n"

    def test_empty_file_prints_nothing(self, paths_file, capsys):
        paths_file.write_text("", encoding="utf-8")
        assert cli.main([]) == 0
        assert capsys.readouterr().out == ""

    def test_missing_default_file(self, tmp_path, monkeypatch, capsys):
        monkeypatch.chdir(tmp_path)
        assert cli.main([]) == 1
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err.startswith("Error: Cannot read paths.txt")


class TestOptions:
    def test_explicit_input(self, tmp_path, capsys):
        f = tmp_path / "list.txt"
        f.write_text("a/b/c.txt\n", encoding="utf-8")
        assert cli.main([str(f)]) == 0
        assert capsys.readouterr().out == "a/\n└── b/\n    └── c.txt\n"

    def test_markdown_format(self, paths_file, capsys):
        assert cli.main(["--format", "markdown"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("# Tree: paths.txt\n")
        assert "└── lib.rs" in out

    def test_details(self, paths_file, capsys):
        assert cli.main(["--details"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Directory: /"
        assert "  Directory: src" in out
        assert "    File: lib.rs" in out

    def test_find(self, paths_file, capsys):
        assert cli.main(["--find", "main.rs"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out == ["File: main.rs", " Path: src/main.rs", " Depth: 2"]

    def test_find_missing(self, paths_file, capsys):
        assert cli.main(["--find", "nope.rs"]) == 1
        assert "no node named 'nope.rs'" in capsys.readouterr().err

    def test_bad_format_exits_2(self, paths_file):
        with pytest.raises(SystemExit) as exc_info:
            cli.main(["--format", "html"])
        assert exc_info.value.code == 2


class TestDebugLogging:
    def test_logs_parse_and_insert_steps(self, paths_file, caplog):
        with caplog.at_level(logging.DEBUG, logger="PathTree"):
            assert cli.main(["--debug"]) == 0
        messages = [r.getMessage() for r in caplog.records]
        assert "Adding: src/main.rs" in messages
        assert any(m.startswith("Read 3 entries") for m in messages)


class TestModuleInvocation:
    def test_ascii_stdout_still_gets_glyphs(self, paths_file):
        src_dir = Path(__file__).resolve().parents[1] / "src"
        env = dict(os.environ)
        env["PYTHONIOENCODING"] = "ascii"
        env["PYTHONPATH"] = os.pathsep.join(
            p for p in (str(src_dir), env.get("PYTHONPATH")) if p
        )
        result = subprocess.run(
            [sys.executable, "-m", "PathTree"],
            cwd=paths_file.parent,
            env=env,
            capture_output=True,
        )
        assert result.returncode == 0, result.stderr.decode("utf-8", "replace")
        assert result.stdout.decode("utf-8").splitlines() == [
            "src/",
            "├── main.rs",
            "└── lib.rs",
        ]

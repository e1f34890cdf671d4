"""Tests for the command-line filter."""

import argparse
import json
import logging
import re
import sys
from io import BytesIO, StringIO
from pathlib import Path
from types import SimpleNamespace

import pytest
from utils import image, para, raw_html, text

from paraunwrap import cli, dependencies
from paraunwrap.cli import get_exit_code_for_exception, main, report_error, should_use_rich_output
from paraunwrap.exceptions import (
    DependencyError,
    FileNotFoundError,
    OutputWriteError,
    ParaUnwrapError,
    ParsingError,
    RenderingError,
    ValidationError,
)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo the root logger changes made by ``setup_logging``."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def feed_stdin(monkeypatch):
    """Replace stdin with a binary payload."""

    def feed(payload: str) -> None:
        monkeypatch.setattr(sys, "stdin", SimpleNamespace(buffer=BytesIO(payload.encode("utf-8"))))

    return feed


@pytest.mark.cli
class TestFilterRun:
    """Test end-to-end runs through ``main``."""

    def test_stdin_to_stdout(self, feed_stdin, pandoc_json, capsys) -> None:
        feed_stdin(pandoc_json(para(text("<hr>")), para(text("plain"))))

        assert main([]) == 0

        out = json.loads(capsys.readouterr().out)
        assert out["blocks"] == [raw_html("<hr>"), para(text("plain"))]

    def test_untouched_input_is_echoed_exactly(self, feed_stdin, pandoc_json, capsys) -> None:
        payload = pandoc_json(para(text("hello")), {"t": "Unknown", "c": {"b": 1, "a": 2}})
        feed_stdin(payload)

        assert main([]) == 0
        assert capsys.readouterr().out == payload

    def test_file_to_file(self, tmp_path: Path, pandoc_json) -> None:
        source = tmp_path / "in.json"
        target = tmp_path / "out.json"
        source.write_text(pandoc_json(para(image("a.png"))), encoding="utf-8")

        assert main([str(source), "-o", str(target)]) == 0

        out = json.loads(target.read_text(encoding="utf-8"))
        assert out["blocks"] == [raw_html('<img src="a.png" />')]

    def test_option_flags(self, feed_stdin, pandoc_json, capsys) -> None:
        feed_stdin(pandoc_json(para(text("<div>")), para(text("< x")), para(image("a.png"))))

        assert main(["--require-space", "--no-images", "--raw-format", "html5"]) == 0

        blocks = json.loads(capsys.readouterr().out)["blocks"]
        assert blocks[0] == para(text("<div>"))
        assert blocks[1] == {"t": "RawBlock", "c": ["html5", "< x"]}
        assert blocks[2] == para(image("a.png"))

    def test_no_angle(self, feed_stdin, pandoc_json, capsys) -> None:
        feed_stdin(pandoc_json(para(text("<hr>"))))

        assert main(["--no-angle"]) == 0
        assert json.loads(capsys.readouterr().out)["blocks"] == [para(text("<hr>"))]

    def test_indent(self, feed_stdin, pandoc_json, capsys) -> None:
        feed_stdin(pandoc_json())

        assert main(["--indent", "2"]) == 0
        assert capsys.readouterr().out.startswith('{\n  "pandoc-api-version"')

    def test_log_file(self, tmp_path: Path, feed_stdin, pandoc_json, capsys) -> None:
        log_path = tmp_path / "run.log"
        feed_stdin(pandoc_json(para(text("<hr>"))))

        assert main(["--log-level", "INFO", "--log-file", str(log_path)]) == 0

        for handler in logging.getLogger().handlers:
            handler.flush()
        assert "Unwrapped 1 angle paragraph(s) and 0 image paragraph(s)" in log_path.read_text(encoding="utf-8")
        assert "Unwrapped" not in capsys.readouterr().out

    def test_trace_format(self, feed_stdin, pandoc_json, capsys) -> None:
        feed_stdin(pandoc_json(para(text("<hr>"))))

        assert main(["--log-level", "INFO", "--trace"]) == 0

        err = capsys.readouterr().err
        assert "[INFO] [paraunwrap." in err
        assert "Unwrapped 1 angle paragraph(s)" in err

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "paraunwrap" in capsys.readouterr().out


@pytest.mark.cli
class TestFilterFailures:
    """Test exit codes and error reporting."""

    def test_invalid_json(self, feed_stdin, capsys) -> None:
        feed_stdin("{not json")

        assert main([]) == 6

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Error: JSON decode error" in captured.err

    def test_missing_input_file(self, tmp_path: Path, capsys) -> None:
        assert main([str(tmp_path / "missing.json")]) == 4
        assert "File not found" in capsys.readouterr().err

    def test_invalid_raw_format(self, feed_stdin, pandoc_json, capsys) -> None:
        feed_stdin(pandoc_json())

        assert main(["--raw-format", "a b"]) == 3
        assert capsys.readouterr().out == ""

    def test_negative_indent(self, feed_stdin, pandoc_json) -> None:
        feed_stdin(pandoc_json())
        assert main(["--indent", "-1"]) == 3

    def test_no_output_file_on_failure(self, tmp_path: Path) -> None:
        source = tmp_path / "in.json"
        target = tmp_path / "out.json"
        source.write_text("[]", encoding="utf-8")

        assert main([str(source), "-o", str(target)]) == 6
        assert not target.exists()

    def test_unwritable_output(self, tmp_path: Path, pandoc_json) -> None:
        source = tmp_path / "in.json"
        source.write_text(pandoc_json(), encoding="utf-8")

        assert main([str(source), "-o", str(tmp_path / "missing" / "out.json")]) == 7

    def test_unopenable_log_file(self, tmp_path: Path, feed_stdin, pandoc_json, capsys) -> None:
        feed_stdin(pandoc_json(para(text("<hr>"))))

        assert main(["--log-file", str(tmp_path / "missing" / "run.log")]) == 4

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "Cannot open log file" in captured.err

    def test_unexpected_error(self, monkeypatch, capsys) -> None:
        def explode(args):
            raise RuntimeError("boom")

        monkeypatch.setattr(cli, "run_filter", explode)

        assert main([]) == 1
        assert "Unexpected error: boom" in capsys.readouterr().err


@pytest.mark.unit
class TestGetExitCodeForException:
    """Test exception to exit code mapping."""

    @pytest.mark.parametrize(
        "exception, expected",
        [
            (DependencyError("Feature", [("pkg", "")]), 2),
            (ImportError("x"), 2),
            (ValidationError("bad"), 3),
            (FileNotFoundError("x.json"), 4),
            (ParsingError("bad json"), 6),
            (RenderingError("bad output"), 7),
            (OutputWriteError("out.json"), 7),
            (ParaUnwrapError("generic"), 1),
            (RuntimeError("unexpected"), 1),
        ],
    )
    def test_mapping(self, exception, expected) -> None:
        assert get_exit_code_for_exception(exception) == expected


@pytest.mark.unit
class TestRichOutput:
    """Test rich output selection and rendering."""

    @staticmethod
    def _args(rich: bool = True, force_rich: bool = False) -> argparse.Namespace:
        return argparse.Namespace(rich=rich, force_rich=force_rich)

    def test_not_requested(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "check_rich_available", lambda: True)
        assert should_use_rich_output(self._args(rich=False, force_rich=True)) is False

    def test_rich_missing_falls_back(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "check_rich_available", lambda: False)
        assert should_use_rich_output(self._args(force_rich=True)) is False

    def test_forced(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "check_rich_available", lambda: True)
        assert should_use_rich_output(self._args(force_rich=True), StringIO()) is True

    def test_tty_detection(self, monkeypatch) -> None:
        monkeypatch.setattr(cli, "check_rich_available", lambda: True)
        tty = SimpleNamespace(isatty=lambda: True)

        assert should_use_rich_output(self._args(), tty) is True
        assert should_use_rich_output(self._args(), StringIO()) is False

    def test_plain_report(self) -> None:
        stream = StringIO()
        report_error("it broke", use_rich=False, stream=stream)
        assert stream.getvalue() == "Error: it broke\n"

    def test_rich_report(self) -> None:
        pytest.importorskip("rich")
        stream = StringIO()

        report_error("bad [x] input", use_rich=True, stream=stream)

        output = stream.getvalue()
        assert "\x1b[" in output
        assert re.sub(r"\x1b\[[0-9;]*m", "", output).strip() == "Error: bad [x] input"

    def test_rich_report_without_rich(self, monkeypatch) -> None:
        monkeypatch.setattr(dependencies, "check_package_installed", lambda name: False)
        with pytest.raises(DependencyError):
            report_error("it broke", use_rich=True, stream=StringIO())

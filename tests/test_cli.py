import io
import os
import sys

import pytest

from pipex.cli import main, read_here_doc, run_pipeline
from pipex.resolve import UsageError


def test_two_commands(tmp_path):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("hello\n")
    assert main([str(infile), "cat", "tr a-z A-Z", str(outfile)]) == 0
    assert outfile.read_text() == "HELLO\n"


def test_several_commands(tmp_path):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("apple\nbanana\ncherry\n")
    status = main([str(infile), "cat", "grep an", "tr a-z A-Z", str(outfile)])
    assert status == 0
    assert outfile.read_text() == "BANANA\n"


def test_output_is_truncated(tmp_path):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("short\n")
    outfile.write_text("a much longer previous content\n")
    main([str(infile), "cat", "cat", str(outfile)])
    assert outfile.read_text() == "short\n"


def test_usage_error(capsys):
    assert main(["a", "b", "c"]) == 0
    assert "./pipex infile cmd cmd outfile" in capsys.readouterr().err


def test_here_doc_needs_five_arguments(capsys, tmp_path):
    assert main(["here_doc", "EOF", "cat", str(tmp_path / "out")]) == 0
    assert "./pipex infile cmd cmd outfile" in capsys.readouterr().err
    assert not (tmp_path / "out").exists()


def test_missing_infile_stops_quietly(tmp_path):
    outfile = tmp_path / "out"
    assert main([str(tmp_path / "none"), "cat", "cat", str(outfile)]) == 0
    assert not outfile.exists()


def test_command_not_found(tmp_path, capsys):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("data\n")
    status = main([str(infile), "cat", "nosuchcmd_pipex_test", str(outfile)])
    assert status == 0
    assert "pipex: command not found: nosuchcmd_pipex_test" in capsys.readouterr().err
    assert outfile.read_text() == ""


def test_first_command_not_found_feeds_nothing(tmp_path, capsys):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("data\n")
    main([str(infile), "nosuchcmd_pipex_test -v", "cat", str(outfile)])
    assert outfile.read_text() == ""
    assert "command not found: nosuchcmd_pipex_test" in capsys.readouterr().err


def test_here_doc_appends(tmp_path, monkeypatch):
    outfile = tmp_path / "out"
    outfile.write_text("zero\n")
    fake_stdin = io.TextIOWrapper(io.BytesIO(b"one\ntwo\nEOF\nthree\n"))
    monkeypatch.setattr(sys, "stdin", fake_stdin)
    assert main(["here_doc", "EOF", "cat", "cat", str(outfile)]) == 0
    assert outfile.read_text() == "zero\none\ntwo\n"


def test_read_here_doc_stops_at_limiter():
    stream = io.BytesIO(b"a\nb\nSTOP\nc\n")
    assert read_here_doc("STOP", stream) == b"a\nb\n"


def test_read_here_doc_limiter_is_prefix_match():
    stream = io.BytesIO(b"a\nSTOPPING\nc\n")
    assert read_here_doc(b"STOP", stream) == b"a\n"


def test_read_here_doc_until_end_of_input():
    data = b"x\ny\nno limiter here"
    assert read_here_doc("END", io.BytesIO(data)) == data


def test_run_pipeline_returns_last_status(tmp_path):
    infile = tmp_path / "in"
    outfile = tmp_path / "out"
    infile.write_text("abc\n")
    with infile.open("rb") as src, outfile.open("wb") as dst:
        status = run_pipeline(["cat", "grep zzz"], src, dst, dict(os.environ))
    assert status == 1
    assert outfile.read_text() == ""


def test_run_pipeline_needs_commands():
    with pytest.raises(UsageError, match=r"^\./pipex infile cmd cmd outfile$"):
        run_pipeline([], None, None, {})
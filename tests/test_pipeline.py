import io
import os

import pytest

from pipex.errors import ArgumentCountError
from pipex.pipeline import (
    Mode,
    PipelineSpec,
    main,
    open_input,
    open_output,
    parse_args,
    run_pipeline,
)

ENV = {"PATH": os.environ.get("PATH", os.defpath)}


def test_parse_basic():
    spec = parse_args(["in.txt", "cat", "wc -l", "out.txt"])
    assert spec == PipelineSpec(Mode.BASIC, ("cat", "wc -l"), "out.txt", input_path="in.txt")


def test_parse_heredoc():
    spec = parse_args(["here_doc", "LIM", "cat", "out.txt"])
    assert spec.mode is Mode.HEREDOC
    assert spec.limiter == "LIM"
    assert spec.commands == ("cat",)
    assert spec.output_path == "out.txt"
    assert spec.input_path is None


def test_parse_keyword_must_match_exactly():
    spec = parse_args(["here_docx", "cat", "out.txt"])
    assert spec.mode is Mode.BASIC
    assert spec.input_path == "here_docx"


@pytest.mark.parametrize("args", [[], ["a"], ["a", "b"], ["here_doc", "LIM", "out"]])
def test_parse_too_few_arguments(args):
    with pytest.raises(ArgumentCountError):
        parse_args(args)


def test_open_input_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        open_input(str(tmp_path / "missing"))


def test_open_output_truncates(tmp_path):
    target = tmp_path / "out"
    target.write_bytes(b"old contents")
    with open_output(str(target)) as out:
        out.write(b"new")
    assert target.read_bytes() == b"new"


def test_open_output_appends(tmp_path):
    target = tmp_path / "out"
    target.write_bytes(b"old")
    with open_output(str(target), append=True) as out:
        out.write(b"+more")
    assert target.read_bytes() == b"old+more"


def test_run_basic_pipeline(tmp_path):
    source = tmp_path / "in"
    source.write_bytes(b"hello\nworld\n")
    target = tmp_path / "out"
    spec = parse_args([str(source), "cat", "tr a-z A-Z", str(target)])
    statuses = run_pipeline(spec, ENV)
    assert statuses == [0, 0]
    assert target.read_bytes() == b"hello\nworld\n".upper()


def test_run_heredoc_appends(tmp_path):
    target = tmp_path / "out"
    target.write_bytes(b"kept\n")
    spec = parse_args(["here_doc", "EOF", "cat", str(target)])
    statuses = run_pipeline(spec, ENV, io.BytesIO(b"line one\nEOF\nignored\n"))
    assert statuses == [0]
    assert target.read_bytes() == b"kept\nline one\n"


def test_run_missing_command_reports_and_continues(tmp_path, capsys):
    source = tmp_path / "in"
    source.write_bytes(b"data\n")
    target = tmp_path / "out"
    spec = parse_args([str(source), "nosuchcmd_pipex", "cat", str(target)])
    statuses = run_pipeline(spec, ENV)
    assert statuses == [1, 0]
    assert target.read_bytes() == b""
    assert "command not found: nosuchcmd_pipex" in capsys.readouterr().err


def test_run_missing_input_leaves_no_output(tmp_path):
    target = tmp_path / "out"
    spec = parse_args([str(tmp_path / "missing"), "cat", str(target)])
    with pytest.raises(FileNotFoundError):
        run_pipeline(spec, ENV)
    assert not target.exists()


def test_main_runs_pipeline(tmp_path):
    source = tmp_path / "in"
    source.write_bytes(b"abc\n")
    target = tmp_path / "out"
    assert main([str(source), "cat", str(target)]) == 0
    assert target.read_bytes() == b"abc\n"


def test_main_wrong_argument_count(capsys):
    assert main(["only", "two"]) == 1
    assert "Error: wrong number of arguments" in capsys.readouterr().err


def test_main_missing_input(tmp_path, capsys):
    target = tmp_path / "out"
    assert main([str(tmp_path / "missing"), "cat", str(target)]) == 1
    assert capsys.readouterr().err.startswith("fd: ")
    assert not target.exists()
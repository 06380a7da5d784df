"""Run commands joined by pipes, from a file or a here-document into a file."""

from __future__ import annotations

import contextlib
import enum
import os
import subprocess
import sys
import tempfile
from dataclasses import dataclass
from typing import BinaryIO, Mapping, Optional, Sequence

from pipex.command import resolve_command
from pipex.errors import ArgumentCountError, PipexError
from pipex.heredoc import collect_heredoc

HEREDOC_KEYWORD = "here_doc"
OUTPUT_MODE = 0o644


class Mode(enum.Enum):
    """Where the first command's input comes from."""

    BASIC = "basic"
    HEREDOC = "here_doc"


@dataclass(frozen=True)
class PipelineSpec:
    """What to run: the commands, their input and the output file."""

    mode: Mode
    commands: tuple[str, ...]
    output_path: str
    input_path: Optional[str] = None
    limiter: Optional[str] = None


def parse_args(args: Sequence[str]) -> PipelineSpec:
    """Read ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``."""
    args = list(args)
    if len(args) < 3:
        raise ArgumentCountError()
    if args[0] == HEREDOC_KEYWORD:
        if len(args) < 4:
            raise ArgumentCountError()
        return PipelineSpec(Mode.HEREDOC, tuple(args[2:-1]), args[-1], limiter=args[1])
    return PipelineSpec(Mode.BASIC, tuple(args[1:-1]), args[-1], input_path=args[0])


def open_input(path: str) -> BinaryIO:
    """Open the input file for reading."""
    return open(path, "rb")


def open_output(path: str, append: bool = False) -> BinaryIO:
    """Open the output file for writing, created with mode 0644 if missing.

    It is truncated, or appended to when ``append`` is true.
    """
    flags = os.O_WRONLY | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    fd = os.open(path, flags, OUTPUT_MODE)
    return os.fdopen(fd, "ab" if append else "wb")


def _report(message: object) -> None:
    print(message, file=sys.stderr)


def _start(command: str, upstream, downstream, env: Mapping[str, str]) -> Optional[subprocess.Popen]:
    try:
        executable, argv = resolve_command(command, env)
    except PipexError as error:
        _report(error)
        return None
    if not os.path.dirname(executable):
        executable = os.path.join(os.curdir, executable)
    try:
        return subprocess.Popen(
            argv, executable=executable, stdin=upstream, stdout=downstream, env=dict(env)
        )
    except OSError as error:
        _report(f"execve: {error.strerror}")
        return None


def _run_stages(commands: Sequence[str], source, output, env: Mapping[str, str]) -> list[int]:
    processes: list[Optional[subprocess.Popen]] = []
    upstream = source
    last = len(commands) - 1
    for index, command in enumerate(commands):
        downstream = output if index == last else subprocess.PIPE
        process = _start(command, upstream, downstream, env)
        if upstream is not source and hasattr(upstream, "close"):
            upstream.close()
        processes.append(process)
        if index != last:
            upstream = process.stdout if process is not None else subprocess.DEVNULL
    return [1 if process is None else process.wait() for process in processes]


def run_pipeline(
    spec: PipelineSpec,
    env: Optional[Mapping[str, str]] = None,
    stdin: object = None,
) -> list[int]:
    """Run every command of ``spec``, each reading the previous one's output.

    A command that cannot be found or started is reported on standard error
    and gives status 1; the next command then reads empty input. Returns
    the exit status of each command in order.
    """
    environment = dict(os.environ if env is None else env)
    with contextlib.ExitStack() as stack:
        if spec.mode is Mode.HEREDOC:
            output = stack.enter_context(open_output(spec.output_path, append=True))
            source = stack.enter_context(tempfile.TemporaryFile())
            data = collect_heredoc(sys.stdin.buffer if stdin is None else stdin, spec.limiter)
            if isinstance(data, str):
                data = data.encode("utf-8")
            source.write(data)
            source.flush()
            source.seek(0)
        else:
            source = stack.enter_context(open_input(spec.input_path))
            output = stack.enter_context(open_output(spec.output_path))
        return _run_stages(spec.commands, source, output, environment)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        spec = parse_args(args)
        run_pipeline(spec, os.environ)
    except PipexError as error:
        _report(error)
        return error.exit_status
    except OSError as error:
        _report(f"fd: {error.strerror}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
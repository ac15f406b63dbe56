"""Run shell-style pipelines between an input file and an output file."""

from __future__ import annotations

import contextlib
import os
import subprocess
import sys
import tempfile
from typing import Mapping, Optional, Sequence

from pipex.lines import LineReader
from pipex.resolve import (
    OpenMode,
    UsageError,
    command_argv,
    find_command,
    open_file,
)

HERE_DOC = "here_doc"


def _spawn(cmd: str, stdin, stdout, env: Mapping[str, str]):
    """Start one command, or report it and return None if it cannot run."""
    argv = command_argv(cmd)
    name = argv[0] if argv else ""
    if argv:
        path = find_command(name, env)
        # A bare name is resolved against the working directory, not PATH.
        executable = path if "/" in path else os.path.join(".", path)
        try:
            return subprocess.Popen(
                argv,
                executable=executable,
                stdin=stdin,
                stdout=stdout,
                env=dict(env),
            )
        except OSError:
            pass
    sys.stderr.write(f"pipex: command not found: {name}\n")
    sys.stderr.flush()
    return None


def run_pipeline(commands: Sequence[str], stdin, stdout, env: Mapping[str, str]) -> int:
    """Connect *commands* with pipes from *stdin* to *stdout*.

    Returns the exit status of the last command; a command that cannot be
    started counts as status 0 and feeds nothing to the next one.
    """
    if not commands:
        raise UsageError()
    processes = []
    current_in = stdin
    last_index = len(commands) - 1
    for index, cmd in enumerate(commands):
        is_last = index == last_index
        proc = _spawn(cmd, current_in, stdout if is_last else subprocess.PIPE, env)
        if index > 0 and current_in is not subprocess.DEVNULL:
            current_in.close()
        if proc is not None:
            processes.append(proc)
        if not is_last:
            current_in = proc.stdout if proc is not None else subprocess.DEVNULL
    for proc in processes:
        proc.wait()
    last = processes[-1] if processes and processes[-1].args == command_argv(commands[-1]) else None
    return last.returncode if last is not None else 0


def read_here_doc(limiter, stream) -> bytes:
    """Collect lines from a binary *stream* until one starting with *limiter*."""
    if isinstance(limiter, str):
        limiter = limiter.encode()
    collected = []
    for line in LineReader(stream):
        if line.startswith(limiter):
            break
        collected.append(line)
    return b"".join(collected)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry: infile cmd... outfile, or here_doc LIMITER cmd... outfile."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        with contextlib.ExitStack() as stack:
            if len(args) < 4:
                raise UsageError()
            if args[0].startswith(HERE_DOC):
                if len(args) < 5:
                    raise UsageError()
                outfile = stack.enter_context(open_file(args[-1], OpenMode.APPEND))
                data = read_here_doc(args[1], sys.stdin.buffer)
                infile = stack.enter_context(tempfile.TemporaryFile())
                infile.write(data)
                infile.flush()
                infile.seek(0)
                commands = args[2:-1]
            else:
                infile = stack.enter_context(open_file(args[0], OpenMode.READ))
                outfile = stack.enter_context(open_file(args[-1], OpenMode.TRUNCATE))
                commands = args[1:-1]
            return run_pipeline(commands, infile, outfile, os.environ)
    except UsageError as exc:
        sys.stderr.write(f"{exc}\n")
        return 0
    except OSError:
        return 0


if __name__ == "__main__":
    sys.exit(main())
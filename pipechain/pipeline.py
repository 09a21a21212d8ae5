"""Run a chain of commands joined by pipes, from an input to an output file."""

from __future__ import annotations

import os
import subprocess
import sys
import tempfile
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from dataclasses import dataclass

from .resolve import CommandResolutionError, resolve_command, split_command

_FAILED = 1
_OUTFILE_MODE = 0o644


@dataclass(frozen=True)
class Stage:
    """One command of a pipeline and the executable that runs it."""

    command: str
    words: tuple[str, ...]
    path: str | None = None
    error: str | None = None

    @property
    def runnable(self) -> bool:
        return self.path is not None


def plan_stages(
    commands: Sequence[str], env: Mapping[str, str] | None = None
) -> list[Stage]:
    """Split and resolve every command, keeping the reason for any that fail."""
    stages = []
    for command in commands:
        words = tuple(split_command(command))
        try:
            path = resolve_command(words, env)
        except CommandResolutionError as exc:
            stages.append(Stage(command, words, error=str(exc)))
        else:
            stages.append(Stage(command, words, path=path))
    return stages


def _report(name: str, exc: OSError) -> None:
    print(f"{name}: {exc.strerror}", file=sys.stderr, flush=True)


def _open_source(
    stack: ExitStack, infile: str | None, input_data: str | bytes | None
) -> int | None:
    if input_data is not None:
        data = input_data.encode() if isinstance(input_data, str) else input_data
        handle = stack.enter_context(tempfile.TemporaryFile())
        handle.write(data)
        handle.flush()
        handle.seek(0)
        return handle.fileno()
    assert infile is not None
    try:
        fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        _report(infile, exc)
        return None
    stack.callback(os.close, fd)
    return fd


def _open_sink(stack: ExitStack, outfile: str, append: bool) -> int | None:
    flags = os.O_RDWR | os.O_CREAT | (os.O_APPEND if append else os.O_TRUNC)
    try:
        fd = os.open(outfile, flags, _OUTFILE_MODE)
    except OSError as exc:
        _report(outfile, exc)
        return None
    stack.callback(os.close, fd)
    return fd


def _launch(
    stages: Sequence[Stage],
    source: int | None,
    sink: int | None,
    env: Mapping[str, str] | None,
) -> list[int]:
    processes: list[subprocess.Popen | None] = []
    child_env = dict(env) if env is not None else None
    last = len(stages) - 1
    pending = None
    for index, stage in enumerate(stages):
        is_first = index == 0
        is_last = index == last
        if pending is not None:
            stdin = pending
        elif is_first and source is not None:
            stdin = source
        else:
            stdin = subprocess.DEVNULL
        can_run = (
            stage.runnable
            and not (is_first and source is None)
            and not (is_last and sink is None)
        )
        process = None
        if can_run:
            try:
                process = subprocess.Popen(
                    list(stage.words),
                    executable=stage.path,
                    stdin=stdin,
                    stdout=sink if is_last else subprocess.PIPE,
                    env=child_env,
                )
            except OSError as exc:
                _report(stage.path or stage.command, exc)
                process = None
        if pending is not None:
            pending.close()
        pending = process.stdout if process is not None and not is_last else None
        processes.append(process)
    return [process.wait() if process else _FAILED for process in processes]


def run_pipeline(
    commands: Sequence[str],
    infile: str | None,
    outfile: str,
    append: bool = False,
    env: Mapping[str, str] | None = None,
    input_data: str | bytes | None = None,
) -> list[int]:
    """Run ``commands`` as a pipeline and return the exit status of each stage.

    The first command reads ``infile`` (or ``input_data`` when given) and the
    last writes ``outfile``, which is truncated unless ``append`` is set. A
    stage that cannot run reports why and counts as having exited with 1; the
    stage after it then reads empty input.
    """
    if not commands:
        raise ValueError("at least one command is required")
    if infile is None and input_data is None:
        raise ValueError("an input file or input data is required")
    with ExitStack() as stack:
        source = _open_source(stack, infile, input_data)
        sink = _open_sink(stack, outfile, append)
        stages = plan_stages(commands, env)
        for stage in stages:
            if stage.error is not None:
                print(stage.error, flush=True)
        return _launch(stages, source, sink, env)
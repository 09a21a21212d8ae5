"""Command-line entry points for running pipelines between files."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from .heredoc import collect_here_doc
from .pipeline import run_pipeline

USAGE_ERROR = "Error : invalid parameters"
HERE_DOC_KEYWORD = "here_doc"


def _arguments(argv: Sequence[str] | None) -> list[str]:
    return list(sys.argv[1:] if argv is None else argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile``: exactly two commands."""
    args = _arguments(argv)
    if len(args) != 4:
        print(USAGE_ERROR, flush=True)
        return -1
    infile, *commands, outfile = args
    run_pipeline(commands, infile, outfile)
    return 0


def main_bonus(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd... outfile`` or ``here_doc LIMITER cmd... outfile``.

    At least two commands are required. In here-document mode the input is
    read interactively up to the limiter and the output file is appended to.
    """
    args = _arguments(argv)
    if len(args) < 5:
        print(USAGE_ERROR, flush=True)
        return -1
    if args[0].startswith(HERE_DOC_KEYWORD):
        limiter = args[1]
        commands = args[2:-1]
        data = collect_here_doc(limiter)
        run_pipeline(commands, None, args[-1], append=True, input_data=data)
    else:
        infile, *commands, outfile = args
        run_pipeline(commands, infile, outfile)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Interactive collection of here-document input."""

from __future__ import annotations

import sys
from typing import TextIO

PROMPT = "heredoc> "


def collect_here_doc(
    limiter: str,
    stream: TextIO | None = None,
    prompt_stream: TextIO | None = None,
) -> str:
    """Read lines from ``stream`` until a line equal to ``limiter`` and return them.

    A prompt is written to ``prompt_stream`` before every line is read. The
    limiter line only ends input when it is followed by a newline; reaching
    the end of ``stream`` ends input as well.
    """
    if stream is None:
        stream = sys.stdin
    if prompt_stream is None:
        prompt_stream = sys.stdout
    terminator = limiter + "\n"
    collected: list[str] = []
    while True:
        prompt_stream.write(PROMPT)
        prompt_stream.flush()
        line = stream.readline()
        if not line or line.startswith(terminator):
            break
        collected.append(line)
    return "".join(collected)
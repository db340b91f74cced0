"""Compiler failures and running of tool commands."""

from __future__ import annotations

import subprocess
from collections.abc import Sequence


class CompileError(Exception):
    """A tool command failed; carries the command's combined output."""

    def __init__(self, output: bytes = b"") -> None:
        self.output = output
        super().__init__(output.decode(errors="replace"))

    def __str__(self) -> str:
        return self.output.decode(errors="replace")


def run_command(args: Sequence[str]) -> bytes:
    """Run ``args`` and return its combined stdout and stderr.

    Raises :class:`CompileError` if the command cannot start or exits non-zero.
    """
    try:
        result = subprocess.run(
            list(args),
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            check=False,
        )
    except OSError as exc:
        raise CompileError(b"") from exc
    if result.returncode != 0:
        raise CompileError(result.stdout)
    return result.stdout
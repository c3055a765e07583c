"""A minimal shell: parse a command line and run it in the foreground or background."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Sequence
from typing import TextIO


def parseline(cmdline: str) -> tuple[list[str], bool]:
    """Split a command line on spaces; return the arguments and a background flag.

    A blank line counts as a background job with no arguments.
    """
    line = cmdline[:-1] if cmdline.endswith("\n") else cmdline
    argv = [word for word in line.split(" ") if word]
    if not argv:
        return argv, True
    bg = argv[-1].startswith("&")
    if bg:
        argv.pop()
    return argv, bg


def builtin_command(argv: Sequence[str]) -> bool:
    """Handle a built-in command; True if ``argv`` was one."""
    if argv[0] == "quit":
        raise SystemExit(0)
    return argv[0] == "&"


def eval_line(cmdline: str, out: TextIO | None = None) -> subprocess.Popen | None:
    """Evaluate one command line; return the started process, if any."""
    out = out if out is not None else sys.stdout
    argv, bg = parseline(cmdline)
    if not argv or builtin_command(argv):
        return None

    # The program name is a path, not looked up in PATH.
    program = argv[0] if os.sep in argv[0] else os.path.join(os.curdir, argv[0])
    try:
        proc = subprocess.Popen(argv, executable=program)
    except OSError:
        out.write(f"{argv[0]}: command not find\n")
        return None

    if bg:
        out.write(f"{proc.pid} {cmdline}")
    else:
        proc.wait()
    return proc


def main(argv: Sequence[str] | None = None) -> int:
    """Read and evaluate command lines from standard input until end of file."""
    while True:
        sys.stdout.write(">")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            return 0
        eval_line(line, sys.stdout)
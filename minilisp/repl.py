"""Minilisp REPL and command line.

Usage:
    minilisp                      # Interactive prompt
    minilisp -e "+ 1 2"           # Evaluate one input and print the result
    minilisp --log-level DEBUG    # Trace reading and dispatch on stderr
"""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from loguru import logger

from minilisp import __version__, config
from minilisp.interpreter import Interpreter


def configure_logging(level: str | None) -> None:
    """Send `minilisp` log records to stderr at `level`; None leaves logging off."""
    if level is None:
        return
    logger.remove()
    logger.add(sys.stderr, level=level, format="{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function} | {message}")
    logger.enable("minilisp")


def repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    """Read a line, evaluate it, print the output line; until end of input."""
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    prompt = config.get_prompt() if prompt is None else prompt
    stdout.write(f"Minilisp Version {__version__}\n")
    stdout.write("Press Ctrl+c to Exit\n\n")

    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        logger.debug("read {!r}", line)
        stdout.write(interp.eval_to_str(line) + "\n")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minilisp", description="Minilisp interpreter")
    parser.add_argument("-e", "--eval", dest="expr", help="evaluate EXPR, print the result and exit")
    parser.add_argument("--log-level", help="log level for tracing (overrides MINILISP_LOG_LEVEL)")
    args = parser.parse_args(argv)

    configure_logging(args.log_level.upper() if args.log_level else config.get_log_level())

    interp = Interpreter()
    if args.expr is not None:
        print(interp.eval_to_str(args.expr))
        return 0

    try:
        repl(interp)
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())

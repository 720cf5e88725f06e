"""Line-oriented REPL host for MiniLisp.

Reads one expression per line, prints `=> result`, reports errors and keeps
going. `q` or end of input quits.
"""

from __future__ import annotations

import sys
from typing import TextIO

from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.types.sexpr import to_lisp

BANNER = "--- MiniLisp Runtime REPL ---\nEnter Lisp expression (e.g., \"(car '(1 2))\") or 'q' to quit."
QUIT = "q"


def run_repl(
    interp: Interpreter,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
    stderr: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stderr = stderr or sys.stderr
    if prompt is None:
        prompt = interp.config.prompt
    print(BANNER, file=stdout)
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            break
        line = line.rstrip("\r\n")
        if line == QUIT:
            break
        if not line.strip():
            continue
        try:
            result = interp.evaluate(line)
        except LispError as e:
            print(f"Error: {e}", file=stderr)
            continue
        print(f"=> {to_lisp(result)}", file=stdout)


def run_file(interp: Interpreter, path: str, stdout: TextIO | None = None) -> None:
    """Evaluate every expression in a source file, printing each result."""
    stdout = stdout or sys.stdout
    with open(path, encoding="utf-8") as f:
        source = f.read()
    for result in interp.evaluate_all(source):
        print(to_lisp(result), file=stdout)

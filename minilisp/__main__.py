"""Command-line entry point: `python -m minilisp [file]`."""

import argparse
import logging
import sys

from minilisp.config import load_config
from minilisp.errors import LispError
from minilisp.interpreter import Interpreter
from minilisp.repl import run_file, run_repl


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="minilisp")
    parser.add_argument("file", help="file to evaluate (if empty, starts the REPL)", nargs="?")
    parser.add_argument("--no-prelude", action="store_true", help="skip MINILISP_PRELUDE_PATH files")
    args = parser.parse_args(argv)

    config = load_config()
    logging.basicConfig(level=config.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        interp = Interpreter(prelude=None if args.no_prelude else 'auto', config=config)
        if args.file is not None:
            run_file(interp, args.file)
        else:
            run_repl(interp)
    except LispError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())

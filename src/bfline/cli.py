from __future__ import annotations

import argparse
import sys

from typing import List, Optional

from .config import DEFAULT_CELLS, DEFAULT_MAX_DEPTH, DEFAULT_MAX_LINE, VERSION, EngineConfig
from .errors import ConfigError
from .session import Session


HELLO_WORLD = (
    "++++++++++[>+>+++>+++++++>++++++++++<<<<-]>>>++.>+.+++++++..+++.<<++."
    ">>+++++.------------.---.+++++++++++++.-------------."
)


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(
        prog="bfline",
        description="Line-at-a-time command line interpreter for BrainFuck.",
        epilog=f"Example:\n  {HELLO_WORLD}",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--cells", type=int, default=DEFAULT_CELLS, help=f"Tape size (default {DEFAULT_CELLS}, minimum 30000)")
    parser.add_argument("--max-line", type=int, default=DEFAULT_MAX_LINE, help=f"Longest line run at once (default {DEFAULT_MAX_LINE})")
    parser.add_argument("--max-depth", type=int, default=DEFAULT_MAX_DEPTH, help=f"Loops open at the same time (default {DEFAULT_MAX_DEPTH})")
    parser.add_argument("--no-banner", action="store_true", help="Do not print the startup banner")
    parser.add_argument("--trace", action="store_true", help="Trace every operator on stderr")
    parser.add_argument("--dump", type=int, default=0, metavar="N", help="Print the first N cells when the session ends")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    args = parser.parse_args(argv)

    try:
        config = EngineConfig(cells=args.cells, max_line=args.max_line, max_depth=args.max_depth)
    except ConfigError as e:
        parser.error(str(e))

    session = Session(config, banner=not args.no_banner, trace=args.trace)
    status = session.run()

    if args.dump > 0:
        print("\n================")
        print(session.state.dump(args.dump))
    return status


if __name__ == "__main__":
    raise SystemExit(main())

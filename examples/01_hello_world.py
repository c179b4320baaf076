#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfline.api import execute_line
from bfline.cli import HELLO_WORLD


def main():
    result = execute_line(HELLO_WORLD)
    print(result.output)
    for w in result.warnings:
        print(f"Warning: {w.message} (index {w.index})", file=sys.stderr)


if __name__ == "__main__":
    main()

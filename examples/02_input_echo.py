#!/usr/bin/env python3

import os
import sys

sys.path.append(os.path.join(os.path.dirname(__file__), '..', 'src'))

from bfline.api import run_lines


def main():
    # one ',' per line of typed input; only the first character is kept
    stdin = ",+.\nH\n,+.\nA\n"
    result = run_lines(stdin)
    print(result.output)
    print(f"exit status: {result.exit_status}")


if __name__ == "__main__":
    main()

from __future__ import annotations
import sys

from ficodec import Direction

from .common import run_cli

def main(argv=None) -> int:
    return run_cli(Direction.COMPRESS, argv)

if __name__ == "__main__":
    sys.exit(main())

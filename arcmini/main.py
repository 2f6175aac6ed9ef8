from __future__ import annotations

import sys

from arcmini.app import run_app


def main() -> int:
    """Console entrypoint (`arcmini`) and `python -m arcmini`."""
    return run_app(sys.argv)


if __name__ == "__main__":
    raise SystemExit(main())

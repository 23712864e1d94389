"""Command-line entry point."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from bouncy.display import Display
from bouncy.game import game_loop


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window and run the bouncing-ball simulation."""
    parser = argparse.ArgumentParser(
        prog="bouncy",
        description="Balls bouncing elastically inside a window. "
        "Press + to add a ball, - to remove one, Escape to quit.",
    )
    parser.parse_args(argv)

    with Display("Bouncy") as display:
        game_loop(display)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
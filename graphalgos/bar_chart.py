"""Text bar chart drawn from the top level down."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

_FILLED = "** "
_EMPTY = "   "


def render_bars(values: Iterable[int]) -> str:
    """Draw one row per level from the highest value down to 1."""
    values = list(values)
    top = max(values, default=-1)
    rows = (
        "".join(_FILLED if value >= level else _EMPTY for value in values) + "\n"
        for level in range(top, 0, -1)
    )
    return "".join(rows)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a count and that many integers from standard input, print the chart."""
    parser = argparse.ArgumentParser(
        description="Print a vertical bar chart of integers read from standard input."
    )
    parser.parse_args(argv)
    tokens = sys.stdin.read().split()
    if not tokens:
        parser.error("expected a count followed by that many integers")
    try:
        count = int(tokens[0])
        values = [int(token) for token in tokens[1 : 1 + max(count, 0)]]
    except ValueError as exc:
        parser.error(str(exc))
    if len(values) < count:
        parser.error(f"expected {count} values, got {len(values)}")
    sys.stdout.write(render_bars(values))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
"""Built-in sample puzzles and the one-puzzle-per-line text format."""

from __future__ import annotations
import logging
import os
import re
from typing import Dict, List, Tuple

from .core.errors import InvalidDimensionsError
from .core.grid import parse_compact

log = logging.getLogger(__name__)

SAMPLE_PUZZLES: Dict[str, List[int]] = {
    "blank": [0] * 81,
    "sample": [
        4, 2, 0, 0, 5, 0, 0, 0, 8,
        8, 0, 3, 0, 0, 0, 0, 0, 0,
        0, 1, 0, 0, 0, 9, 0, 0, 0,
        0, 7, 0, 0, 8, 0, 6, 0, 0,
        0, 0, 0, 5, 2, 6, 0, 0, 0,
        0, 0, 5, 0, 3, 0, 0, 9, 0,
        0, 0, 0, 2, 0, 0, 0, 7, 0,
        0, 0, 0, 0, 0, 0, 5, 0, 3,
        9, 0, 0, 0, 4, 0, 0, 2, 6,
    ],
    "classic": [
        5, 3, 0, 0, 7, 0, 0, 0, 0,
        6, 0, 0, 1, 9, 5, 0, 0, 0,
        0, 9, 8, 0, 0, 0, 0, 6, 0,
        8, 0, 0, 0, 6, 0, 0, 0, 3,
        4, 0, 0, 8, 0, 3, 0, 0, 1,
        7, 0, 0, 0, 2, 0, 0, 0, 6,
        0, 6, 0, 0, 0, 0, 2, 8, 0,
        0, 0, 0, 4, 1, 9, 0, 0, 5,
        0, 0, 0, 0, 8, 0, 0, 7, 9,
    ],
    "mini": [
        1, 0, 0, 0,
        0, 0, 1, 0,
        0, 1, 0, 0,
        0, 0, 0, 1,
    ],
}

_SEPARATORS = re.compile(r"[\s,;]+")


def parse_values(text: str) -> List[int]:
    """
    Parse a puzzle written on one line.

    Two forms are accepted:
      - integers separated by commas or whitespace ("4,2,0,0,5,...")
      - one character per cell ("42005...", with 0 or . for empty and
        A-Z for 10 and up)

    Raises:
        InvalidDimensionsError: If a token cannot be read as a cell value.
    """
    text = text.strip()
    if _SEPARATORS.search(text):
        tokens = [t for t in _SEPARATORS.split(text) if t]
        try:
            return [int(t) for t in tokens]
        except ValueError as e:
            raise InvalidDimensionsError(f"Cannot parse puzzle values: {e}") from e

    return parse_compact(text)


def load_puzzles(path: str) -> List[Tuple[str, List[int]]]:
    """
    Read puzzles from a text file, one per line.

    A line may start with "name:" to label the puzzle; unlabelled puzzles
    are named after their line number. Blank lines and lines starting with
    '#' are skipped.
    """
    puzzles = []
    with open(path, "r") as f:
        for line_no, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            name, sep, body = line.partition(":")
            if not sep:
                name, body = f"line_{line_no}", line
            puzzles.append((name.strip(), parse_values(body)))

    log.info("Loaded %d puzzles from %s", len(puzzles), path)
    return puzzles


def save_puzzles(puzzles: List[Tuple[str, List[int]]], path: str) -> None:
    """Write puzzles in the format read by load_puzzles."""
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    with open(path, "w") as f:
        for name, values in puzzles:
            f.write(f"{name}: {','.join(str(v) for v in values)}\n")

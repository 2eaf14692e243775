"""Nesting limits for the recursive reader and evaluator.

Both walk one Python frame pair per list level. The default depth admits any
nesting that fits in one REPL line (under 1023 bytes, so at most 511
levels). That is more than the interpreter's default recursion limit allows,
so callers raise the limit for the duration of a parse or an evaluation.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from typing import Iterator

DEFAULT_MAX_DEPTH = 512
MAX_DEPTH_CEILING = 4096

# Python frames spent per nesting level, and room for the caller's own stack
FRAMES_PER_LEVEL = 3
BASE_FRAMES = 500


@contextmanager
def recursion_headroom(max_depth: int) -> Iterator[None]:
    """Raise the recursion limit so `max_depth` levels fit, then restore it."""
    needed = FRAMES_PER_LEVEL * min(max_depth, MAX_DEPTH_CEILING) + BASE_FRAMES
    previous = sys.getrecursionlimit()
    if needed <= previous:
        yield
        return
    sys.setrecursionlimit(needed)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)

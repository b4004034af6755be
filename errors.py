# errors.py
from __future__ import annotations


class ValidationError(ValueError):
    """
    Raised for malformed input before any search state exists:
      - grid dimensions that are not positive integers
      - obstacles outside the grid
      - start/goal positions that are out of bounds or blocked
      - benchmark iteration counts below 1
    """


class NotFoundError(LookupError):
    """
    Raised by the collaborators around the core when something asked for
    by name does not exist (unknown algorithm / heuristic, missing CSV).

    "No path between start and goal" is NOT an error; planners report it
    as PathResult(found=False).
    """

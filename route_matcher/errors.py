"""Exceptions raised by route_matcher."""

from typing import Optional


class PatternCompilationError(ValueError):
    """Route pattern can not be turned into a usable regular expression."""

    def __init__(self, pattern: str, reason: str, position: Optional[int] = None):
        self.pattern = pattern
        self.reason = reason
        self.position = position
        location = f" at position {position}" if position is not None else ""
        super().__init__(f'Invalid route pattern "{pattern}"{location}: {reason}')

"""Match requests against route patterns and bind path parameters."""

import logging
from dataclasses import dataclass
from typing import Optional, Union

from route_matcher.routing import compile_route
from route_matcher.types import Request

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class MatchCriteria:
    pattern: str
    verb: str


@dataclass(frozen=True)
class NoPathMatch:
    """The request path does not match the pattern."""

    pattern_matched = False
    matched = False


@dataclass(frozen=True)
class PathMatchedVerbMismatch:
    """The request path matches the pattern but the method differs."""

    request: Request
    pattern_matched = True
    matched = False


@dataclass(frozen=True)
class Matched:
    """Both path and method match, ``request`` carries the path parameters."""

    request: Request
    pattern_matched = True
    matched = True


MatchResult = Union[NoPathMatch, PathMatchedVerbMismatch, Matched]


def _bind_attributes(request: Request, groups: dict) -> Request:
    for name, value in groups.items():
        # optional groups that did not participate are left out
        if value is not None:
            request = request.with_attribute(name, value)
    return request


def match_route(criteria: MatchCriteria, request: Request) -> MatchResult:
    """Match a request against one route pattern and verb.

    The pattern is anchored at both ends. Named groups that took part in the
    match are added to a copy of ``request`` as attributes; ``request`` itself
    is left untouched. Raises PatternCompilationError for malformed patterns.

    """
    expr = compile_route(criteria.pattern)
    match = expr.fullmatch(request.path)
    if match is None:
        return NoPathMatch()

    bound = _bind_attributes(request, match.groupdict())
    if criteria.verb != request.method:
        log.debug(
            f"{request.path} matched {criteria.pattern!r} "
            f"but {request.method} is not {criteria.verb}"
        )
        return PathMatchedVerbMismatch(bound)

    return Matched(bound)


class RequestMatcher:
    """Stateful matcher wrapping one incoming request.

    Every ``match`` call starts from the request given to the constructor and
    overwrites the outcome of the previous call. Not safe to share between
    threads, build one per request.
    """

    def __init__(self, request: Request) -> None:
        self.request = request
        self.last_result: Optional[MatchResult] = None

    def match(self, criteria: MatchCriteria) -> bool:
        """Return True if both path and verb match."""
        self.last_result = match_route(criteria, self.request)
        return self.last_result.matched

    def is_pattern_matched(self) -> bool:
        """Return True if the last match found the path, whatever the verb."""
        return self.last_result is not None and self.last_result.pattern_matched

    def request_with_added_attributes(self) -> Request:
        """Return the request carrying the attributes of the last match."""
        if isinstance(self.last_result, (Matched, PathMatchedVerbMismatch)):
            return self.last_result.request
        return self.request

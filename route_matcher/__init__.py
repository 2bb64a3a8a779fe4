"""route-matcher: route pattern matching for request dispatch."""

from enum import Enum

__version__ = "1.0.0"


class StatusCode(Enum):
    """HTTP status codes returned by the router."""

    OK = 200
    NOT_FOUND = 404
    METHOD_NOT_ALLOWED = 405
    INTERNAL_SERVER_ERROR = 500


from route_matcher.errors import PatternCompilationError  # noqa: E402
from route_matcher.matching import (  # noqa: E402
    Matched,
    MatchCriteria,
    MatchResult,
    NoPathMatch,
    PathMatchedVerbMismatch,
    RequestMatcher,
    match_route,
)
from route_matcher.routing import (  # noqa: E402
    RouteEntry,
    compile_pattern,
    compile_route,
)
from route_matcher.types import Request, Response  # noqa: E402
from route_matcher.router import Router  # noqa: E402

__all__ = [
    "StatusCode",
    "PatternCompilationError",
    "MatchCriteria",
    "MatchResult",
    "Matched",
    "NoPathMatch",
    "PathMatchedVerbMismatch",
    "RequestMatcher",
    "match_route",
    "RouteEntry",
    "compile_pattern",
    "compile_route",
    "Request",
    "Response",
    "Router",
]

"""Dispatch requests over a route table."""

import json
import logging
import sys
from dataclasses import dataclass, field
from typing import Callable, List, Optional

from route_matcher import StatusCode
from route_matcher.matching import MatchCriteria, match_route
from route_matcher.routing import RouteEntry
from route_matcher.types import Request, Response


@dataclass(frozen=True)
class Resolution:
    status: StatusCode
    request: Request
    route: Optional[RouteEntry] = None
    allowed_verbs: List[str] = field(default_factory=list)


class Router:
    """Route table."""

    FORMAT_STRING = "[%(name)s] - [%(levelname)s] - %(message)s"

    def __init__(
        self,
        name: str,
        configure_logs: bool = True,
        debug: bool = False,
    ) -> None:
        """Initialize router object."""
        self.name: str = name
        self.routes: List[RouteEntry] = []
        self.debug: bool = debug
        self.log = logging.getLogger(self.name)
        if configure_logs:
            self._configure_logging()

    def _configure_logging(self) -> None:
        if self._already_configured(self.log):
            return

        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter(self.FORMAT_STRING)
        handler.setFormatter(formatter)
        self.log.propagate = False
        if self.debug:
            level = logging.DEBUG
        else:
            level = logging.ERROR
        self.log.setLevel(level)
        self.log.addHandler(handler)

    def _already_configured(self, log) -> bool:
        if not log.handlers:
            return False

        for handler in log.handlers:
            if isinstance(handler, logging.StreamHandler):
                if handler.stream == sys.stdout:
                    return True

        return False

    def _checkroute(self, pattern: str, verb: str) -> bool:
        for route in self.routes:
            if verb == route.verb and pattern == route.pattern:
                return True
        return False

    def add_route(self, pattern: str, handler: Callable, **kwargs) -> RouteEntry:
        """Register a handler, raises PatternCompilationError for bad patterns."""
        verb = kwargs.pop("verb", "GET")
        description = kwargs.pop("description", None)

        if kwargs:
            raise TypeError(
                f"TypeError: add_route() got unexpected keyword "
                f"arguments: {', '.join(list(kwargs))}"
            )

        if self._checkroute(pattern, verb):
            raise ValueError(
                f'Duplicate route detected: "{verb} {pattern}"\n'
                "Route patterns must be unique per verb."
            )

        route = RouteEntry(handler, pattern, verb, description)
        self.routes.append(route)
        self.log.debug(f"Registered {route!r}")
        return route

    def route(self, pattern: str, **kwargs) -> Callable:
        """Register route."""

        def _register_view(handler):
            self.add_route(pattern, handler, **kwargs)
            return handler

        return _register_view

    def get(self, pattern: str, **kwargs) -> Callable:
        """Register GET route."""
        kwargs["verb"] = "GET"
        return self.route(pattern, **kwargs)

    def post(self, pattern: str, **kwargs) -> Callable:
        """Register POST route."""
        kwargs["verb"] = "POST"
        return self.route(pattern, **kwargs)

    def put(self, pattern: str, **kwargs) -> Callable:
        """Register PUT route."""
        kwargs["verb"] = "PUT"
        return self.route(pattern, **kwargs)

    def patch(self, pattern: str, **kwargs) -> Callable:
        """Register PATCH route."""
        kwargs["verb"] = "PATCH"
        return self.route(pattern, **kwargs)

    def delete(self, pattern: str, **kwargs) -> Callable:
        """Register DELETE route."""
        kwargs["verb"] = "DELETE"
        return self.route(pattern, **kwargs)

    def resolve(self, request: Request) -> Resolution:
        """Find the route for a request.

        Routes are tried in registration order, the first one matching both
        path and verb wins. When only paths matched the resolution is
        METHOD_NOT_ALLOWED with the verbs that would have been accepted,
        otherwise NOT_FOUND.

        """
        allowed_verbs: List[str] = []
        for route in self.routes:
            result = match_route(MatchCriteria(route.pattern, route.verb), request)
            if result.matched:
                return Resolution(StatusCode.OK, result.request, route)
            if result.pattern_matched and route.verb not in allowed_verbs:
                allowed_verbs.append(route.verb)

        if allowed_verbs:
            return Resolution(
                StatusCode.METHOD_NOT_ALLOWED, request, allowed_verbs=allowed_verbs
            )
        return Resolution(StatusCode.NOT_FOUND, request)

    def _error(
        self, status_code: StatusCode, message: str, headers: Optional[dict] = None
    ) -> Response:
        return Response(
            status_code=status_code,
            content_type="application/json",
            body=json.dumps({"errorMessage": message}),
            headers=headers,
        )

    def __call__(self, request: Request) -> Response:
        """Dispatch a request to its handler."""
        self.log.debug(f"{request.method} - {request.path}")

        resolution = self.resolve(request)
        if resolution.status == StatusCode.NOT_FOUND:
            return self._error(
                StatusCode.NOT_FOUND,
                f"No view function for: {request.method} - {request.path}",
            )

        if resolution.status == StatusCode.METHOD_NOT_ALLOWED:
            return self._error(
                StatusCode.METHOD_NOT_ALLOWED,
                f"Method {request.method} not allowed for: {request.path}",
                headers={"Allow": ", ".join(resolution.allowed_verbs)},
            )

        try:
            return resolution.route.handler(resolution.request)
        except Exception as err:
            self.log.error(str(err))
            return self._error(StatusCode.INTERNAL_SERVER_ERROR, str(err))

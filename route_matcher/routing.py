"""Route template compilation and route table entries."""

import logging
import re
from functools import lru_cache
from typing import Callable, List, Optional

from route_matcher.errors import PatternCompilationError
from route_matcher.patterns import (
    DEFAULT_PLACEHOLDER_REGEX,
    ESCAPE,
    OPTIONAL_CLOSE,
    OPTIONAL_OPEN,
    PLACEHOLDER_CLOSE,
    PLACEHOLDER_OPEN,
    PLACEHOLDER_SEPARATOR,
    REGEX_PREFIX,
    name_pattern,
)

log = logging.getLogger(__name__)


def _check_groups(pattern: str, name: str, fragment: str, position: int) -> None:
    """Reject fragments whose parentheses would leak out of their group.

    Only the group structure is checked here, references to other
    placeholders are resolved by ``compile_route`` on the whole regex.
    """
    depth = 0
    index = 0
    while index < len(fragment):
        char = fragment[index]
        if char == ESCAPE:
            index += 2
            continue
        if char == "[":
            # a leading "^" or "]" belongs to the set
            index += 1
            if fragment[index : index + 1] == "^":
                index += 1
            if fragment[index : index + 1] == "]":
                index += 1
            while index < len(fragment) and fragment[index] != "]":
                index += 2 if fragment[index] == ESCAPE else 1
            if index >= len(fragment):
                raise PatternCompilationError(
                    pattern, f"unterminated set in placeholder '{name}'", position
                )
        elif char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth < 0:
                break
        index += 1

    if depth != 0:
        raise PatternCompilationError(
            pattern, f"unbalanced parenthesis in placeholder '{name}'", position
        )


def _placeholder_to_regex(pattern: str, body: str, position: int) -> str:
    name, separator, fragment = body.partition(PLACEHOLDER_SEPARATOR)
    if not name_pattern.fullmatch(name):
        raise PatternCompilationError(
            pattern, f"'{name}' is not a valid placeholder name", position
        )

    if not separator:
        return f"(?P<{name}>{DEFAULT_PLACEHOLDER_REGEX})"

    _check_groups(pattern, name, fragment, position)
    return f"(?P<{name}>{fragment})"


class _TemplateParser:
    """Recursive descent over a route template.

    Optional segments nest by bracket depth, placeholders are read up to
    their balancing closing brace so that fragments like ``\\d{4}`` stay
    intact. Every character is consumed exactly once.
    """

    def __init__(self, pattern: str) -> None:
        self.pattern = pattern
        self.pos = 0

    def parse(self) -> str:
        return self._sequence(opened_at=None)

    def _check_escape(self, pos: int) -> None:
        if pos + 1 == len(self.pattern):
            raise PatternCompilationError(self.pattern, "dangling escape", pos)

    def _sequence(self, opened_at: Optional[int]) -> str:
        parts: List[str] = []
        while self.pos < len(self.pattern):
            char = self.pattern[self.pos]
            if char == ESCAPE:
                self._check_escape(self.pos)
                parts.append(self.pattern[self.pos : self.pos + 2])
                self.pos += 2
            elif char == OPTIONAL_OPEN:
                start = self.pos
                self.pos += 1
                parts.append(f"(?:{self._sequence(opened_at=start)})?")
            elif char == OPTIONAL_CLOSE:
                if opened_at is None:
                    raise PatternCompilationError(
                        self.pattern, "unbalanced ']'", self.pos
                    )
                self.pos += 1
                return "".join(parts)
            elif char == PLACEHOLDER_OPEN:
                parts.append(self._placeholder())
            elif char == PLACEHOLDER_CLOSE:
                raise PatternCompilationError(self.pattern, "unbalanced '}'", self.pos)
            else:
                parts.append(char)
                self.pos += 1

        if opened_at is not None:
            raise PatternCompilationError(self.pattern, "unclosed '['", opened_at)
        return "".join(parts)

    def _placeholder(self) -> str:
        start = self.pos
        index = start + 1
        depth = 0
        while index < len(self.pattern):
            char = self.pattern[index]
            if char == ESCAPE:
                self._check_escape(index)
                index += 2
                continue
            if char == PLACEHOLDER_OPEN:
                depth += 1
            elif char == PLACEHOLDER_CLOSE:
                if depth == 0:
                    break
                depth -= 1
            index += 1
        else:
            raise PatternCompilationError(self.pattern, "unclosed '{'", start)

        self.pos = index + 1
        body = self.pattern[start + 1 : index]
        return _placeholder_to_regex(self.pattern, body, start)


def compile_pattern(pattern: str) -> str:
    """Convert a route pattern into a regular expression string.

    ``::<regex>`` is used verbatim. Otherwise ``{name}`` becomes a named group
    matching one path segment, ``{name::regex}`` a named group matching
    ``regex`` and ``[...]`` an optional group. Anchoring is left to the caller.

    """
    if pattern.startswith(REGEX_PREFIX):
        return pattern[len(REGEX_PREFIX) :]

    return _TemplateParser(pattern).parse()


@lru_cache(maxsize=1024)
def compile_route(pattern: str) -> re.Pattern:
    """Return the compiled regular expression of a route pattern."""
    regex = compile_pattern(pattern)
    try:
        compiled = re.compile(regex)
    except re.error as err:
        raise PatternCompilationError(pattern, str(err)) from err

    log.debug(f"Compiled route pattern {pattern!r} to {regex!r}")
    return compiled


class RouteEntry:
    """Route table row."""

    def __init__(
        self,
        handler: Callable,
        pattern: str,
        verb: str = "GET",
        description: Optional[str] = None,
    ) -> None:
        """Initialize route object."""
        self.handler = handler
        self.pattern = pattern
        self.verb = verb
        self.route_regex = compile_route(pattern)
        self.description = description or self.handler.__doc__

    def __eq__(self, other) -> bool:
        """Check for equality."""
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        return f"RouteEntry({self.verb} {self.pattern})"

    def placeholders(self) -> List[str]:
        """Return the capture names of the route, in order of appearance."""
        groups = self.route_regex.groupindex
        return sorted(groups, key=groups.__getitem__)

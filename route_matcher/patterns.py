"""Regex patterns and markers of the route template grammar."""

import re

# Template markers
REGEX_PREFIX = "::"
PLACEHOLDER_SEPARATOR = "::"
OPTIONAL_OPEN, OPTIONAL_CLOSE = "[", "]"
PLACEHOLDER_OPEN, PLACEHOLDER_CLOSE = "{", "}"
ESCAPE = "\\"

DEFAULT_PLACEHOLDER_REGEX = "[^/]+"

# Pattern matching expressions
name_pattern = re.compile(r"^[a-zA-Z_][a-zA-Z0-9_]*$")
option_pattern = re.compile(
    r"^--?(?P<name>[^=-][^=]*)(=(?P<value>.*))?$", re.DOTALL
)

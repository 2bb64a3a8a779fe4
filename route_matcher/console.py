"""Parsed view of a console command invocation."""

from typing import Dict, Optional, Sequence, Tuple

from route_matcher.patterns import option_pattern


class CommandLine:
    """Command name, positional arguments and options of one invocation.

    Format (``-a -b`` are aliases for options)::

        commandName argument1 argumentN --optionWithNoValue --optionWithValue=1 -a -b=1

    maps to ``command_name() == "commandName"``,
    ``arguments() == ("argument1", "argumentN")`` and
    ``options()`` mapping ``optionWithNoValue`` and ``a`` to None,
    ``optionWithValue`` and ``b`` to ``"1"``.

    """

    def __init__(
        self,
        command_name: str,
        arguments: Sequence[str] = (),
        options: Optional[Dict[str, Optional[str]]] = None,
    ) -> None:
        """Initialize command line object."""
        self._command_name = command_name
        self._arguments = tuple(arguments)
        self._options = dict(options or {})

    @classmethod
    def parse(cls, command: str) -> "CommandLine":
        """Split a whitespace separated command line."""
        tokens = command.split()
        if not tokens:
            return cls("")

        arguments = []
        options: Dict[str, Optional[str]] = {}
        for token in tokens[1:]:
            match = option_pattern.match(token)
            if match:
                options[match["name"]] = match["value"]
            else:
                arguments.append(token)

        return cls(tokens[0], arguments, options)

    def __eq__(self, other) -> bool:
        """Check for equality."""
        return self.__dict__ == other.__dict__

    def command_name(self) -> str:
        return self._command_name

    def arguments(self) -> Tuple[str, ...]:
        return self._arguments

    def options(self) -> Dict[str, Optional[str]]:
        return dict(self._options)

    def has_option(self, option: str, alias: str = "") -> bool:
        if option in self._options:
            return True
        return alias != "" and alias in self._options

    def get_option_value(self, option: str, alias: str = "") -> Optional[str]:
        """Return the option value, None when absent or given without value."""
        if option in self._options:
            return self._options[option]
        if alias != "" and alias in self._options:
            return self._options[alias]
        return None

    def has_argument(self, index: int) -> bool:
        return 0 <= index < len(self._arguments)

    def get_argument_value(self, index: int) -> Optional[str]:
        if self.has_argument(index):
            return self._arguments[index]
        return None

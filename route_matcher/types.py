from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from route_matcher import StatusCode


@dataclass(frozen=True)
class Request:
    path: str
    method: str
    attributes: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only view over a private copy
        object.__setattr__(self, "attributes", MappingProxyType(dict(self.attributes)))

    def __hash__(self) -> int:
        return hash((self.path, self.method, frozenset(self.attributes.items())))

    def with_attribute(self, name: str, value: str) -> "Request":
        """Return a copy of the request with one more attribute."""
        return replace(self, attributes={**self.attributes, name: value})

    def get_attribute(self, name: str, default: Any = None) -> Any:
        return self.attributes.get(name, default)


@dataclass(frozen=True)
class Response:
    status_code: StatusCode
    content_type: str
    body: Union[str, bytes]
    headers: Optional[Dict[str, str]] = None

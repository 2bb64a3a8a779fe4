from unittest.mock import Mock

import pytest

from route_matcher import StatusCode
from route_matcher.types import Request, Response


@pytest.fixture
def funct():
    """Mock handler for testing purposes."""
    return Mock(
        __name__="Mock",
        return_value=Response(StatusCode.OK, "text/plain", "OK"),
    )


@pytest.fixture
def user_request():
    return Request(path="/users/42", method="GET")

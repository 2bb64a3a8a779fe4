"""route-matcher: example."""

import json

from route_matcher import Request, Router, StatusCode
from route_matcher.types import Response

app = Router(name="app", debug=True)


@app.get("/users[/{id::\\d+}]")
def get_users(request: Request) -> Response:
    """Return one user or the list of users."""
    user_id = request.get_attribute("id")
    if user_id is None:
        body = {"users": ["1", "2"]}
    else:
        body = {"user": user_id}
    return Response(StatusCode.OK, "application/json", json.dumps(body))


@app.post("/users")
def create_user(request: Request) -> Response:
    """Create a user."""
    return Response(StatusCode.OK, "application/json", json.dumps({"created": True}))


@app.get("::^/(?P<page>about|contact)$")
def page(request: Request) -> Response:
    """Return a static page."""
    return Response(StatusCode.OK, "text/plain", request.get_attribute("page"))


def handler(path: str, method: str) -> Response:
    """Dispatch one request."""
    return app(Request(path, method))


if __name__ == "__main__":
    for path, method in [("/users/7", "GET"), ("/users/7", "DELETE"), ("/nope", "GET")]:
        response = handler(path, method)
        print(response.status_code.value, response.body)

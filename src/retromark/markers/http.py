from __future__ import annotations

from typing import Any, Literal, final, get_args

from retromark.errors import UnknownVerbError
from retromark.markers.base import MethodMarker

HttpVerb = Literal["GET", "HEAD", "OPTIONS", "PUT", "POST", "DELETE", "PATCH"]

HTTP_VERBS: tuple[str, ...] = get_args(HttpVerb)


class HttpMethod(MethodMarker):
    """
    Declares the HTTP verb and path template of an interface method:

        @GET("/users/{id}")
        def get_user(self, id: Annotated[int, Path("id")]) -> User: ...

    The path is kept exactly as written. Whether it is relative to a base URL
    and how its placeholders are filled is decided by whoever consumes it.
    """

    path: str = ""

    def __init__(self, path: str = "", **data: Any) -> None:
        if type(self).method is HttpMethod.method:
            raise TypeError(
                "HttpMethod is abstract; use one of " + ", ".join(HTTP_VERBS)
            )
        super().__init__(path=path, **data)

    def method(self) -> str:
        raise NotImplementedError

    @property
    def verb(self) -> str:
        return self.method()

    def route(self) -> tuple[str, str]:
        return (self.method(), self.path)


# each variant returns its verb as a literal


@final
class GET(HttpMethod):
    def method(self) -> str:
        return "GET"


@final
class HEAD(HttpMethod):
    def method(self) -> str:
        return "HEAD"


@final
class OPTIONS(HttpMethod):
    def method(self) -> str:
        return "OPTIONS"


@final
class PUT(HttpMethod):
    def method(self) -> str:
        return "PUT"


@final
class POST(HttpMethod):
    def method(self) -> str:
        return "POST"


@final
class DELETE(HttpMethod):
    def method(self) -> str:
        return "DELETE"


@final
class PATCH(HttpMethod):
    def method(self) -> str:
        return "PATCH"


HTTP_METHODS: dict[str, type[HttpMethod]] = {
    "GET": GET,
    "HEAD": HEAD,
    "OPTIONS": OPTIONS,
    "PUT": PUT,
    "POST": POST,
    "DELETE": DELETE,
    "PATCH": PATCH,
}


def http_method(verb: str, path: str = "") -> HttpMethod:
    """Build the marker for a verb name, e.g. http_method("get", "/users")."""
    cls = HTTP_METHODS.get(verb.strip().upper()) if isinstance(verb, str) else None
    if cls is None:
        raise UnknownVerbError(
            f"Unknown HTTP verb {verb!r}; expected one of: {', '.join(HTTP_VERBS)}",
            verb=verb,
        )
    return cls(path)

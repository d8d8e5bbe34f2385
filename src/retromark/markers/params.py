"""Parameter markers, attached through Annotated:

    def list_users(
        self,
        page: Annotated[int, Query("page")],
        token: Annotated[str, Header("Authorization")],
    ) -> list[User]: ...

A `name` of None means "use the parameter's own name".
"""

from __future__ import annotations

from enum import Enum
from typing import Any, ClassVar, Optional

from retromark.markers.base import ParameterMarker


class ParameterKind(str, Enum):
    PATH = "path"
    QUERY = "query"
    QUERY_MAP = "query_map"
    BODY = "body"
    FIELD = "field"
    FIELD_MAP = "field_map"
    PART = "part"
    PART_MAP = "part_map"
    HEADER = "header"
    HEADER_MAP = "header_map"
    URL = "url"


class Path(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.PATH

    name: str
    encoded: bool = False

    def __init__(self, name: str, encoded: bool = False, **data: Any) -> None:
        super().__init__(name=name, encoded=encoded, **data)


class Query(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.QUERY

    name: Optional[str] = None
    encoded: bool = False

    def __init__(self, name: Optional[str] = None, encoded: bool = False, **data: Any) -> None:
        super().__init__(name=name, encoded=encoded, **data)


class QueryMap(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.QUERY_MAP

    encoded: bool = False


class Body(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.BODY


class Field(ParameterMarker):
    """A form field of a FormUrlEncoded request."""

    kind: ClassVar[ParameterKind] = ParameterKind.FIELD

    name: Optional[str] = None
    encoded: bool = False

    def __init__(self, name: Optional[str] = None, encoded: bool = False, **data: Any) -> None:
        super().__init__(name=name, encoded=encoded, **data)


class FieldMap(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.FIELD_MAP

    encoded: bool = False


class Part(ParameterMarker):
    """One part of a Multipart request."""

    kind: ClassVar[ParameterKind] = ParameterKind.PART

    name: Optional[str] = None
    content_type: str = "text/plain"

    def __init__(
        self, name: Optional[str] = None, content_type: str = "text/plain", **data: Any
    ) -> None:
        super().__init__(name=name, content_type=content_type, **data)


class PartMap(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.PART_MAP

    content_type: str = "text/plain"

    def __init__(self, content_type: str = "text/plain", **data: Any) -> None:
        super().__init__(content_type=content_type, **data)


class Header(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.HEADER

    name: Optional[str] = None

    def __init__(self, name: Optional[str] = None, **data: Any) -> None:
        super().__init__(name=name, **data)


class HeaderMap(ParameterMarker):
    kind: ClassVar[ParameterKind] = ParameterKind.HEADER_MAP


class Url(ParameterMarker):
    """The argument replaces the base URL and path for this call."""

    kind: ClassVar[ParameterKind] = ParameterKind.URL

from typing import Annotated, get_type_hints

from retromark.markers.base import ParameterMarker, annotated_markers
from retromark.markers.params import (
    Body,
    Field,
    FieldMap,
    Header,
    HeaderMap,
    ParameterKind,
    Part,
    PartMap,
    Path,
    Query,
    QueryMap,
    Url,
)

ALL_PARAMS = [Path, Query, QueryMap, Body, Field, FieldMap, Part, PartMap, Header, HeaderMap, Url]


def test_path():
    marker = Path("userId")
    assert marker.name == "userId"
    assert marker.encoded is False
    assert Path("userId", encoded=True).encoded is True


def test_query_defaults_to_parameter_name():
    assert Query().name is None
    assert Query("page").name == "page"
    assert Query("page").encoded is False


def test_maps():
    assert QueryMap().encoded is False
    assert FieldMap(encoded=True).encoded is True


def test_field():
    marker = Field("username")
    assert marker.name == "username"
    assert marker.encoded is False


def test_part():
    marker = Part("file", "image/png")
    assert marker.name == "file"
    assert marker.content_type == "image/png"
    assert Part().content_type == "text/plain"
    assert PartMap("application/json").content_type == "application/json"


def test_header():
    assert Header("Authorization").name == "Authorization"
    assert Header().name is None


def test_every_parameter_marker_has_its_own_kind():
    kinds = [cls.kind for cls in ALL_PARAMS]
    assert set(kinds) == set(ParameterKind)
    assert all(cls.target == "parameter" for cls in ALL_PARAMS)


def test_parameter_markers_via_annotated():
    def update_user(
        id: Annotated[int, Path("id")],
        user: Annotated[dict, Body()],
        token: Annotated[str, Header("Authorization"), "not a marker"],
        page: int = 1,
    ) -> None:
        pass

    hints = get_type_hints(update_user, include_extras=True)

    assert annotated_markers(hints["id"]) == (Path("id"),)
    assert annotated_markers(hints["user"], ParameterMarker) == (Body(),)
    assert annotated_markers(hints["token"]) == (Header("Authorization"),)
    assert annotated_markers(hints["page"]) == ()

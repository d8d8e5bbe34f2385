from __future__ import annotations

from typing import Any, Optional

from retromark.markers.base import Marker, MarkerTarget
from retromark.markers.fields import ArrayType, SerializedName
from retromark.markers.http import HTTP_METHODS
from retromark.markers.method import (
    Cacheable,
    FormUrlEncoded,
    Headers,
    Multipart,
    ResponseType,
    Streaming,
    Timeout,
)
from retromark.markers.params import (
    Body,
    Field,
    FieldMap,
    Header,
    HeaderMap,
    Part,
    PartMap,
    Path,
    Query,
    QueryMap,
    Url,
)

MARKER_CLASSES: tuple[type[Marker], ...] = (
    *HTTP_METHODS.values(),
    Headers,
    Timeout,
    Cacheable,
    Streaming,
    FormUrlEncoded,
    Multipart,
    ResponseType,
    Path,
    Query,
    QueryMap,
    Body,
    Field,
    FieldMap,
    Part,
    PartMap,
    Header,
    HeaderMap,
    Url,
    SerializedName,
    ArrayType,
)


def _type_name(annotation: Any) -> str:
    if isinstance(annotation, type) and not getattr(annotation, "__args__", None):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")


def describe_marker(cls: type[Marker]) -> dict[str, Any]:
    fields = []
    for name, info in cls.model_fields.items():
        required = info.is_required()
        fields.append(
            {
                "name": name,
                "type": _type_name(info.annotation),
                "required": required,
                "default": None if required else info.default,
            }
        )
    return {"name": cls.__name__, "target": cls.target, "fields": fields}


def describe_markers(target: Optional[MarkerTarget] = None) -> list[dict[str, Any]]:
    """Field-level description of every marker, in catalog order."""
    return [
        describe_marker(cls)
        for cls in MARKER_CLASSES
        if target is None or cls.target == target
    ]

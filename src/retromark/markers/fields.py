from __future__ import annotations

from typing import Any

from retromark.markers.base import FieldMarker


class SerializedName(FieldMarker):
    """
    Wire-format key for a data-model field:

        class User:
            user_id: Annotated[int, SerializedName("id")]

    The name is stored exactly as given. An empty name is accepted too;
    rejecting it is up to the serializer.
    """

    name: str

    def __init__(self, name: str, **data: Any) -> None:
        super().__init__(name=name, **data)


class ArrayType(FieldMarker):
    """Element type of a list field, e.g. Annotated[list, ArrayType(Post)]."""

    type: Any

    def __init__(self, type: Any, **data: Any) -> None:
        super().__init__(type=type, **data)

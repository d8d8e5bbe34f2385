from __future__ import annotations

import inspect
from typing import Annotated, Any, Callable, ClassVar, Literal, TypeVar, get_args, get_origin

from pydantic import BaseModel, ConfigDict

from retromark.errors import MarkerTargetError

MarkerTarget = Literal["method", "parameter", "field"]

# attribute holding attached method markers, top decorator first
MARKERS_ATTR = "__retromark_markers__"

M = TypeVar("M", bound="Marker")
F = TypeVar("F", bound=Callable[..., Any])


class Marker(BaseModel):
    """
    Immutable declarative metadata.

    Markers carry values only. Whatever builds requests out of them lives
    outside this package.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    target: ClassVar[MarkerTarget]


class MethodMarker(Marker):
    target: ClassVar[MarkerTarget] = "method"

    def __call__(self, func: F) -> F:
        if not callable(_unwrap(func)):
            raise MarkerTargetError(
                f"{type(self).__name__} can only decorate callables, got {type(func).__name__}",
                target=func,
            )
        return attach(func, self)


class ParameterMarker(Marker):
    target: ClassVar[MarkerTarget] = "parameter"


class FieldMarker(Marker):
    target: ClassVar[MarkerTarget] = "field"


def _unwrap(obj: Any) -> Any:
    if isinstance(obj, (staticmethod, classmethod)) or inspect.ismethod(obj):
        return obj.__func__
    return obj


def _own_markers(target: Any) -> tuple[Marker, ...]:
    # own __dict__ only: a subclass must not inherit its parent's markers
    return tuple(getattr(target, "__dict__", {}).get(MARKERS_ATTR, ()))


def attach(obj: F, marker: Marker) -> F:
    """
    Attach a marker to a function and return the function unchanged.

    Decorators run bottom-up, so each new marker is prepended; the stored
    order then matches the order the decorators are written in.
    """
    target = _unwrap(obj)
    try:
        setattr(target, MARKERS_ATTR, (marker,) + _own_markers(target))
    except (AttributeError, TypeError) as exc:
        raise MarkerTargetError(
            f"cannot attach {type(marker).__name__} to {target!r}", target=target
        ) from exc
    return obj


def markers_of(obj: Any, kind: type[M] = Marker) -> tuple[M, ...]:  # type: ignore[assignment]
    return tuple(m for m in _own_markers(_unwrap(obj)) if isinstance(m, kind))


def find_marker(obj: Any, kind: type[M]) -> M | None:
    for m in markers_of(obj, kind):
        return m
    return None


def annotated_markers(hint: Any, kind: type[M] = Marker) -> tuple[M, ...]:  # type: ignore[assignment]
    """
    Markers carried in the metadata of an Annotated hint:
      Annotated[int, Path("id")] -> (Path(name="id", encoded=False),)
    Plain hints have no markers.
    """
    if get_origin(hint) is not Annotated:
        return ()
    return tuple(m for m in get_args(hint)[1:] if isinstance(m, kind))

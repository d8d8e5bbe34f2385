"""Exceptions raised by the marker attach/read seam.

Marker construction itself never fails on content; these cover the places
where a marker meets something it cannot work with.
"""

from __future__ import annotations

from typing import Any


class MarkerError(Exception):
    """Base exception for all retromark errors."""


class MarkerTargetError(MarkerError, TypeError):
    """Raised when a marker is attached to an object that cannot carry it.

    Attributes:
        target: The object the marker was applied to.
    """

    def __init__(self, message: str, target: Any = None):
        super().__init__(message)
        self.target = target


class UnknownVerbError(MarkerError, ValueError):
    """Raised when a verb name is not part of the closed HTTP method set.

    Attributes:
        verb: The verb name that was looked up.
    """

    def __init__(self, message: str, verb: Any = None):
        super().__init__(message)
        self.verb = verb

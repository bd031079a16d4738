"""Marker and classification enums for optional containers.

``EMPTY`` is the one "no value" literal. It is a dedicated marker rather
than ``None`` so that ``None`` stays a legal payload.
"""

from __future__ import annotations

from enum import Enum, StrEnum


class Empty(Enum):
    """Tag type for the absent value. Its only member is :data:`EMPTY`."""

    EMPTY = "EMPTY"

    def __repr__(self) -> str:
        return "EMPTY"


EMPTY = Empty.EMPTY


class SlotState(StrEnum):
    """The two states an optional container can be in."""

    EMPTY = "empty"
    HOLDING = "holding"


class CopyMode(StrEnum):
    """How a payload is duplicated when a container is copied."""

    DEEP = "deep"
    SHALLOW = "shallow"

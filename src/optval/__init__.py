"""optval — an optional-value container with explicit payload lifetimes."""

from __future__ import annotations

from optval.domain.optional import OptionalValue, make_optional
from optval.domain.types import EMPTY, CopyMode, Empty, SlotState
from optval.exceptions import EmptyAccessError, OptvalError

__version__ = "0.1.0"

__all__ = [
    "EMPTY",
    "CopyMode",
    "Empty",
    "EmptyAccessError",
    "OptionalValue",
    "OptvalError",
    "SlotState",
    "__version__",
    "make_optional",
]

"""OptionalValue — a container holding zero or one payload.

Storage is a two-variant tagged union: the :data:`EMPTY` marker, or a
``_Holding`` cell wrapping exactly one payload.

INVARIANT: a payload is reachable from the container iff its state is
``holding``. Once a payload leaves (reset, reassignment, close, or being
moved out) the container keeps no reference to it. Dropping a container
that still holds a payload releases it, as ``close()`` would.

Releasing a payload drops the container's reference and then calls the
container's ``on_release`` hook, exactly once per payload. Constructors
that derive from another container (``take``, ``copy_of``, ``copy.copy``,
``copy.deepcopy``) inherit its hook. Assignments keep the destination's.
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Callable
from dataclasses import dataclass
from types import TracebackType
from typing import Any, Generic, TypeVar

from optval.config.settings import get_settings
from optval.domain.types import EMPTY, CopyMode, Empty, SlotState
from optval.exceptions import EmptyAccessError

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class _Holding(Generic[T]):
    """Storage cell for a present payload."""

    payload: T


def _log_event(event: str, payload: Any) -> None:
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug(event, extra={"payload_type": type(payload).__qualname__})


def _duplicate(payload: T, mode: CopyMode | None, memo: dict[int, Any] | None = None) -> T:
    """Copy *payload* according to *mode* (settings default when None)."""
    if mode is None:
        mode = get_settings().copy_mode
    if mode == CopyMode.SHALLOW:
        return copy.copy(payload)
    return copy.deepcopy(payload, memo)


class OptionalValue(Generic[T]):
    """Value-semantic container for zero or one ``T``.

    Examples:
        >>> a = OptionalValue(7)
        >>> a.value()
        7
        >>> a.reset()
        >>> a == EMPTY
        True
        >>> a.value_or(42)
        42
    """

    __slots__ = ("_slot", "_on_release")

    # Mutable container; equality is only defined against EMPTY.
    __hash__ = None  # type: ignore[assignment]

    def __init__(
        self,
        value: T | Empty = EMPTY,
        /,
        *,
        on_release: Callable[[T], object] | None = None,
    ) -> None:
        self._slot: _Holding[T] | Empty = EMPTY
        self._on_release = on_release
        if not isinstance(value, Empty):
            self._acquire(value)

    # --- Storage primitives ---

    def _acquire(self, payload: T) -> None:
        self._slot = _Holding(payload)
        _log_event("optional.acquire", payload)

    def _release(self) -> None:
        slot = self._slot
        if isinstance(slot, Empty):
            return
        # Cleared before the hook runs so a raising hook leaves us empty.
        self._slot = EMPTY
        _log_event("optional.release", slot.payload)
        if self._on_release is not None:
            self._on_release(slot.payload)

    def _detach(self) -> _Holding[T] | Empty:
        """Hand the storage cell over without releasing the payload."""
        slot = self._slot
        self._slot = EMPTY
        return slot

    # --- Construction from other containers ---

    @classmethod
    def copy_of(cls, other: OptionalValue[T], *, mode: CopyMode | None = None) -> OptionalValue[T]:
        """Build a new container holding a copy of *other*'s payload (if any)."""
        result: OptionalValue[T] = cls(on_release=other._on_release)
        if isinstance(other._slot, _Holding):
            result._acquire(_duplicate(other._slot.payload, mode))
        return result

    def take(self) -> OptionalValue[T]:
        """Move the payload into a new container, leaving this one empty."""
        result: OptionalValue[T] = type(self)(on_release=self._on_release)
        result._slot = self._detach()
        return result

    def __copy__(self) -> OptionalValue[T]:
        return self.copy_of(self, mode=CopyMode.SHALLOW)

    def __deepcopy__(self, memo: dict[int, Any]) -> OptionalValue[T]:
        result: OptionalValue[T] = type(self)(on_release=self._on_release)
        memo[id(self)] = result
        if isinstance(self._slot, _Holding):
            result._acquire(_duplicate(self._slot.payload, CopyMode.DEEP, memo))
        return result

    # --- Mutation ---

    def reset(self) -> None:
        """Release the payload if present. No-op on an empty container."""
        self._release()

    def assign(self, value: T | Empty) -> None:
        """Replace the payload with *value*; ``assign(EMPTY)`` is :meth:`reset`."""
        if isinstance(value, Empty):
            self._release()
            return
        if isinstance(self._slot, _Holding) and self._slot.payload is value:
            return
        self._release()
        self._acquire(value)

    def copy_from(self, other: OptionalValue[T], *, mode: CopyMode | None = None) -> None:
        """Release the current payload, then copy in *other*'s payload (if any)."""
        if other is self:
            return
        self._release()
        if isinstance(other._slot, _Holding):
            self._acquire(_duplicate(other._slot.payload, mode))

    def move_from(self, other: OptionalValue[T]) -> None:
        """Release the current payload, then take over *other*'s payload."""
        if other is self:
            return
        self._release()
        self._slot = other._detach()

    def close(self) -> None:
        """End the container's ownership; the payload (if any) is released."""
        self._release()

    def __enter__(self) -> OptionalValue[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def __del__(self) -> None:
        # Dropping a holding container releases its payload like close().
        if hasattr(self, "_slot"):
            self._release()

    # --- Observers ---

    def has_value(self) -> bool:
        return isinstance(self._slot, _Holding)

    @property
    def state(self) -> SlotState:
        return SlotState.HOLDING if self.has_value() else SlotState.EMPTY

    def value(self) -> T:
        """Return the payload.

        Raises:
            EmptyAccessError: If the container is empty.
        """
        slot = self._slot
        if isinstance(slot, Empty):
            raise EmptyAccessError()
        return slot.payload

    @property
    def payload(self) -> T:
        """Dereference shorthand for :meth:`value`."""
        return self.value()

    def value_or(self, default: T) -> T:
        """Return a shallow copy of the payload if present, else *default*.

        Never raises. The returned copy is detached from the container.
        """
        slot = self._slot
        if isinstance(slot, Empty):
            return default
        return _duplicate(slot.payload, CopyMode.SHALLOW)

    def __bool__(self) -> bool:
        return self.has_value()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Empty):
            return not self.has_value()
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        if isinstance(other, Empty):
            return self.has_value()
        return NotImplemented

    def __repr__(self) -> str:
        slot = self._slot
        if isinstance(slot, Empty):
            return f"{type(self).__name__}(EMPTY)"
        return f"{type(self).__name__}({slot.payload!r})"


def make_optional(value: T, *, on_release: Callable[[T], object] | None = None) -> OptionalValue[T]:
    """Wrap a bare *value* in an :class:`OptionalValue`."""
    return OptionalValue(value, on_release=on_release)

"""Controlled/uncontrolled value ownership."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")
ChangeHandler = Callable[..., None]

UNSET: Any = object()


def _noop(*_: Any) -> None:
    return None


@dataclass(frozen=True, slots=True)
class Controlled(Generic[T]):
    value: T


@dataclass(slots=True)
class Uncontrolled(Generic[T]):
    value: T


Ownership = Union[Controlled[T], Uncontrolled[T]]


class ValueController(Generic[T]):
    """Merge caller-owned and engine-owned values behind one mutator.

    Ownership is re-derived from the current inputs on every evaluation: a
    non-``None`` ``value`` means the caller owns it, anything else falls back
    to internal state seeded once from ``default_value`` or ``final_value``.
    """

    def __init__(
        self,
        *,
        value: T | None = None,
        default_value: T | None = None,
        final_value: T | None = None,
        on_change: ChangeHandler | None = None,
    ) -> None:
        self._value = value
        self._on_change = on_change
        seed = default_value if default_value is not None else final_value
        self._internal: Uncontrolled[T] = Uncontrolled(seed)  # type: ignore[arg-type]

    def bind(self, *, value: T | None = None, on_change: ChangeHandler | None = UNSET) -> None:
        """Replace the caller-supplied inputs; pass ``on_change=None`` to drop the handler."""

        self._value = value
        if on_change is not UNSET:
            self._on_change = on_change

    @property
    def ownership(self) -> Ownership[T]:
        if self._value is not None:
            return Controlled(self._value)
        return self._internal

    @property
    def is_controlled(self) -> bool:
        return isinstance(self.ownership, Controlled)

    @property
    def current(self) -> T:
        return self.ownership.value

    def evaluate(self) -> tuple[T, ChangeHandler, bool]:
        ownership = self.ownership
        if isinstance(ownership, Controlled):
            return ownership.value, self._on_change or _noop, True
        return ownership.value, self._handle_uncontrolled_change, False

    def change(self, new_value: T, *extra: Any) -> None:
        """Single mutation entry point for the current ownership mode."""

        _, handler, _ = self.evaluate()
        handler(new_value, *extra)

    def _handle_uncontrolled_change(self, new_value: T, *extra: Any) -> None:
        self._internal.value = new_value
        if self._on_change is not None:
            self._on_change(new_value, *extra)


__all__ = ["Controlled", "Ownership", "UNSET", "Uncontrolled", "ValueController"]

"""Result containers for field validators and pipelines.

Every validator in patchform returns either ``Success(value)`` or
``Failure(error)``. What the error is depends on the layer:

- field validators fail with a single patch,
- pipelines fail with a ``NonEmptyList`` of patches in declaration order,
- error-list validators fail with a ``NonEmptyList`` of error values,
- ``run`` fails with the patched form itself.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from patchform.core.errors import PatchformError

T = TypeVar("T")
U = TypeVar("U")
E = TypeVar("E")


@dataclass(frozen=True)
class Success(Generic[T]):
    """A validated value."""

    value: T

    @property
    def is_valid(self) -> bool:
        return True

    def __bool__(self) -> bool:
        return True

    def map(self, func: Callable[[T], U]) -> Success[U]:
        """Apply ``func`` to the wrapped value."""
        return Success(func(self.value))


@dataclass(frozen=True)
class Failure(Generic[E]):
    """A failed validation carrying its error payload."""

    error: E

    @property
    def is_valid(self) -> bool:
        return False

    def __bool__(self) -> bool:
        """Falsy, so ``if not result:`` reads naturally."""
        return False

    def map(self, func: Callable[[Any], Any]) -> Failure[E]:
        return self


# Error type first, matching the order failures are described in throughout
# the package: Result[Patch, Verified].
Result = Union[Failure[E], Success[T]]


@dataclass(frozen=True)
class NonEmptyList(Generic[E]):
    """An ordered sequence guaranteed to hold at least one element.

    Stored as the first element plus a tuple of the remaining ones, which is
    the shape error-list validators report failures in.

    Example:
        >>> errors = NonEmptyList.of("required", "too short")
        >>> errors.head
        'required'
        >>> errors.to_list()
        ['required', 'too short']
    """

    head: E
    tail: tuple[E, ...] = ()

    @classmethod
    def of(cls, head: E, *tail: E) -> NonEmptyList[E]:
        """Build from positional elements."""
        return cls(head, tuple(tail))

    @classmethod
    def from_iterable(cls, items: Iterable[E]) -> NonEmptyList[E]:
        """Build from any iterable.

        Raises:
            PatchformError: If ``items`` is empty.
        """
        values = list(items)
        if not values:
            raise PatchformError(
                "empty_non_empty_list",
                "NonEmptyList requires at least one element",
            )
        return cls(values[0], tuple(values[1:]))

    def to_list(self) -> list[E]:
        """Return every element, first element first."""
        return [self.head, *self.tail]

    def concat(self, other: NonEmptyList[E]) -> NonEmptyList[E]:
        """Return a new list with ``other``'s elements after this one's."""
        return NonEmptyList(self.head, (*self.tail, other.head, *other.tail))

    def __iter__(self) -> Iterator[E]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

from __future__ import annotations

from typing import Generic, Iterator, TypeVar

from ._exceptions import InvalidArgument

T = TypeVar("T")


class Span(Generic[T]):
    """
    Inclusive, ascending range of years, weeks or week days.

    Iteration steps with ``next()`` from ``first`` up to and including
    ``last``. A span whose ``last`` lies before ``first`` is empty.
    """

    __slots__ = ("_first", "_last")

    def __init__(self, first: T, last: T) -> None:
        if type(first) is not type(last):
            raise InvalidArgument(
                f"Span ends must share a type; got {type(first).__name__} "
                f"and {type(last).__name__}"
            )
        self._first = first
        self._last = last

    @property
    def first(self) -> T:
        return self._first

    @property
    def last(self) -> T:
        return self._last

    def __iter__(self) -> Iterator[T]:
        current = self._first
        while current <= self._last:
            yield current
            current = current.next()

    def __len__(self) -> int:
        return max(self._last._position() - self._first._position() + 1, 0)

    def __contains__(self, item: object) -> bool:
        try:
            return self._first <= item <= self._last
        except TypeError:
            return False

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Span):
            return NotImplemented
        return (
            type(self._first) is type(other._first)
            and self._first == other._first
            and self._last == other._last
        )

    def __hash__(self) -> int:
        return hash((self._first, self._last))

    def __repr__(self) -> str:
        return f"Span({self._first!r}, {self._last!r})"

"""A singly linked list of names with the classic insert and delete operations."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

MAX_NAME_LENGTH = 50


class EmptyListError(Exception):
    """Raised when deleting from an empty list."""

    def __init__(self) -> None:
        super().__init__("List kosong!")


class ValueNotFoundError(LookupError):
    """Raised when a value the operation relies on is not in the list."""

    def __init__(self, value: str) -> None:
        super().__init__(f"Nilai '{value}' tidak ditemukan!")
        self.value = value


def _clip(value: str) -> str:
    return value[: MAX_NAME_LENGTH - 1]


class LinkedList:
    """Ordered sequence of names; stored names are clipped to 49 characters."""

    def __init__(self, values: Iterable[str] = ()) -> None:
        self._items: list[str] = [_clip(value) for value in values]

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __contains__(self, value: object) -> bool:
        return value in self._items

    def __str__(self) -> str:
        return " -> ".join(self._items)

    def __repr__(self) -> str:
        return f"LinkedList({self._items!r})"

    def insert_first(self, value: str) -> None:
        """Put a value at the front."""
        self._items.insert(0, _clip(value))

    def insert_last(self, value: str) -> None:
        """Put a value at the end."""
        self._items.append(_clip(value))

    def insert_after(self, value: str, after_value: str) -> None:
        """Put a value right after the first occurrence of ``after_value``."""
        try:
            position = self._items.index(after_value)
        except ValueError:
            raise ValueNotFoundError(after_value) from None
        self._items.insert(position + 1, _clip(value))

    def delete_first(self) -> str:
        """Remove and return the first value."""
        if not self._items:
            raise EmptyListError()
        return self._items.pop(0)

    def delete_last(self) -> str:
        """Remove and return the last value."""
        if not self._items:
            raise EmptyListError()
        return self._items.pop()

    def delete(self, value: str) -> None:
        """Remove the first occurrence of ``value``."""
        if not self._items:
            raise EmptyListError()
        try:
            self._items.remove(value)
        except ValueError:
            raise ValueNotFoundError(value) from None

    def clear(self) -> None:
        """Remove every value."""
        self._items.clear()
"""Helpers shared by the in-memory repositories."""

from copy import deepcopy
from typing import Any, Callable, List, Sequence, Tuple, TypeVar

T = TypeVar("T")


def snapshot(entity: T) -> T:
    """Deep copy of entity with its pending domain events dropped.

    Stored copies must not carry events, otherwise they would be
    published again after the next load and save.
    """
    copy = deepcopy(entity)
    collect = getattr(copy, "collect_events", None)
    if collect is not None:
        collect()
    return copy


def sort_key(attribute: str) -> Callable[[Any], Tuple[bool, Any]]:
    """Sort key that orders None values last in ascending order."""

    def key(item: Any) -> Tuple[bool, Any]:
        value = getattr(item, attribute)
        if isinstance(value, str):
            value = value.lower()
        return (value is None, value if value is not None else 0)

    return key


def paginate(items: Sequence[T], page: int, page_size: int) -> List[T]:
    start = (page - 1) * page_size
    return [snapshot(item) for item in items[start:start + page_size]]

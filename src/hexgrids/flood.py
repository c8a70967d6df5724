"""Reachability over any graph whose nodes expose their neighbors."""

from __future__ import annotations

from typing import Callable, Hashable, Iterable, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class SupportsNeighbors(Protocol):
    """Anything that can list the nodes adjacent to it."""

    @property
    def neighbors(self) -> Iterable: ...


T = TypeVar("T", bound=SupportsNeighbors)
K = TypeVar("K", bound=Hashable)


def flood(start: T, can_be_added: Callable[[T], bool]) -> set[T]:
    """Return every node reachable from ``start`` through admitted nodes.

    Expands one ring at a time: the whole frontier is settled, then the next
    frontier is every admitted neighbor not yet settled or queued. ``start``
    is always part of the result, whether or not it passes the predicate.
    """

    flooded: set[T] = set()
    in_process: set[T] = {start}

    while in_process:
        waiting: set[T] = set()
        for cell in in_process:
            flooded.add(cell)
            for neighbor in cell.neighbors:
                if neighbor in flooded or neighbor in in_process or neighbor in waiting:
                    continue
                if can_be_added(neighbor):
                    waiting.add(neighbor)
        in_process = waiting

    return flooded


def is_disconnected_partition(cell: T, key_of: Callable[[T], K]) -> bool:
    """True if ``cell``'s same-key neighbors split into separate groups.

    Only the direct neighbors of ``cell`` are considered, and they may only
    connect through each other; ``cell`` itself is not a bridge.
    """

    key = key_of(cell)
    same_neighbors = {neighbor for neighbor in cell.neighbors if key_of(neighbor) == key}
    if not same_neighbors:
        return False

    starter = next(iter(same_neighbors))
    connected = flood(starter, same_neighbors.__contains__)
    return len(same_neighbors) > len(connected)


__all__ = ["SupportsNeighbors", "flood", "is_disconnected_partition"]

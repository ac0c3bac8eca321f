"""Per-switch queues of command-line values."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator

from bankacct.domain.value_objects import Switch


class SwitchQueue:
    """Values supplied for each switch, oldest first.

    A switch stays "present" once it has been supplied, even after all of its
    values have been taken. take_next returns None, never "", when there is
    nothing left to take, so an empty value ("/R" with nothing after it) stays
    distinguishable from a missing one.
    """

    def __init__(self, pairs: Iterable[tuple[Switch, str]] = ()) -> None:
        self._values: dict[Switch, deque[str]] = {}
        for switch, value in pairs:
            self.add(switch, value)

    def __contains__(self, switch: object) -> bool:
        return switch in self._values

    def __iter__(self) -> Iterator[Switch]:
        return iter(self._values)

    def __repr__(self) -> str:
        counts = {switch.value: len(values) for switch, values in self._values.items()}
        return f"SwitchQueue({counts})"

    def add(self, switch: Switch, value: str) -> None:
        self._values.setdefault(switch, deque()).append(value)

    def take_next(self, switch: Switch) -> str | None:
        """Remove and return the oldest value left for a switch."""
        values = self._values.get(switch)
        if not values:
            return None
        return values.popleft()

    def peek_last(self, switch: Switch) -> str | None:
        """Most recently supplied value still queued for a switch."""
        values = self._values.get(switch)
        if not values:
            return None
        return values[-1]

    def is_empty(self) -> bool:
        return not self._values

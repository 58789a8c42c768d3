"""Fixed-capacity ring buffer of floats used for frame timing metrics."""

from __future__ import annotations

from .log import log

DEFAULT_CAPACITY = 4


class RingBuffer:
    """A circular buffer that overwrites its oldest slot once full.

    The write head advances before each store, so the first value lands in
    slot 1; reads likewise advance before loading.
    """

    def __init__(self, name: str, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self.name = name
        self.capacity = capacity
        self._data = [0.0] * capacity
        self._write_head = 0
        self._read_head = 0
        self._count = 0

    def put(self, value: float) -> None:
        """Store ``value`` in the next slot, overwriting when full."""
        self._write_head = (self._write_head + 1) % self.capacity
        self._data[self._write_head] = float(value)
        self._count = min(self._count + 1, self.capacity)

    def get(self) -> float:
        """Advance the read head and return the value in that slot."""
        self._read_head = (self._read_head + 1) % self.capacity
        return self._data[self._read_head]

    def _slots(self):
        """Yield every slot in read order starting after slot 0."""
        for offset in range(1, self.capacity + 1):
            yield self._data[offset % self.capacity]

    def average(self) -> float:
        """Sum of all slots divided by the number of stored values.

        Returns NaN when nothing has been stored.
        """
        total = sum(self._slots())
        if self._count == 0:
            return float("nan")
        return total / self._count

    def is_empty(self) -> bool:
        # Reports True once any value has been stored.
        return self._count > 0

    def is_full(self) -> bool:
        return self._count == self.capacity

    def dump(self, suffix: str = "") -> str:
        """Log every slot with its index and return the logged text."""
        lines = [f"\tN  \t{self.name:<20}\n"]
        lines.extend(
            f"\t{index:03d}\t{value:0.2f}{suffix}\n"
            for index, value in enumerate(self._slots())
        )
        text = "".join(lines)
        log(text)
        return text

    def __len__(self) -> int:
        return self._count
"""Gap buffer storage for document codepoints."""

from __future__ import annotations

from typing import List, Optional

from gapedit.runtime import telemetry

DEFAULT_CAPACITY = 256

_EMPTY = ""


class GapBuffer:
    """Codepoint sequence with a movable empty region ("the gap").

    Valid content lives in ``storage[:gap_start]`` followed by
    ``storage[gap_end:]``. Edits happen at the gap, so moving it costs time
    proportional to the distance travelled and repeated edits at the same spot
    are cheap. Positions are logical offsets into the content; they are
    clamped, never rejected.
    """

    __slots__ = ("_storage", "_gap_start", "_gap_end")

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        capacity = max(0, capacity)
        self._storage: List[str] = [_EMPTY] * capacity
        self._gap_start = 0
        self._gap_end = capacity

    @property
    def gap_start(self) -> int:
        return self._gap_start

    @property
    def gap_end(self) -> int:
        return self._gap_end

    @property
    def capacity(self) -> int:
        return len(self._storage)

    @property
    def gap_size(self) -> int:
        return self._gap_end - self._gap_start

    @property
    def logical_length(self) -> int:
        return len(self._storage) - self.gap_size

    def __len__(self) -> int:
        return self.logical_length

    def __str__(self) -> str:
        return self.to_linear()

    def __repr__(self) -> str:
        return (
            f"GapBuffer(length={self.logical_length}, capacity={self.capacity}, "
            f"gap=[{self._gap_start}, {self._gap_end}))"
        )

    def to_linear(self) -> str:
        """Return the content with the gap squeezed out."""

        storage = self._storage
        return "".join(storage[: self._gap_start]) + "".join(
            storage[self._gap_end :]
        )

    def codepoint_at(self, offset: int) -> Optional[str]:
        if offset < 0 or offset >= self.logical_length:
            return None
        if offset < self._gap_start:
            return self._storage[offset]
        return self._storage[offset + self.gap_size]

    def move_gap_to(self, pos: int) -> None:
        pos = max(0, min(pos, self.logical_length))
        storage = self._storage
        if pos < self._gap_start:
            # content [pos, gap_start) slides to the end of the gap
            distance = self._gap_start - pos
            storage[self._gap_end - distance : self._gap_end] = storage[
                pos : self._gap_start
            ]
            self._gap_start = pos
            self._gap_end -= distance
        elif pos > self._gap_start:
            distance = pos - self._gap_start
            storage[self._gap_start : pos] = storage[
                self._gap_end : self._gap_end + distance
            ]
            self._gap_start = pos
            self._gap_end += distance

    def insert(self, pos: int, codepoint: str) -> None:
        if self._gap_end == self._gap_start:
            self._grow()
        self.move_gap_to(pos)
        self._storage[self._gap_start] = codepoint
        self._gap_start += 1

    def delete(self, pos: int) -> None:
        """Remove the codepoint at logical offset ``pos``.

        Offsets outside the content are a no-op.
        """

        if pos >= self._gap_start:
            self.move_gap_to(pos)
            if self._gap_end < len(self._storage):
                self._gap_end += 1
        else:
            self.move_gap_to(pos + 1)
            if self._gap_start > 0:
                self._gap_start -= 1

    def _grow(self) -> None:
        old_capacity = len(self._storage)
        new_capacity = max(old_capacity * 2, 1)
        tail = self._storage[self._gap_end :]
        storage = [_EMPTY] * new_capacity
        storage[: self._gap_start] = self._storage[: self._gap_start]
        new_gap_end = new_capacity - len(tail)
        storage[new_gap_end:] = tail
        self._storage = storage
        self._gap_end = new_gap_end
        telemetry.record_event(
            "gap_buffer.grow",
            level="debug",
            data={"from": old_capacity, "to": new_capacity},
            logger_name="gapedit.buffer",
        )


__all__ = ["GapBuffer", "DEFAULT_CAPACITY"]

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable

from ..policy_base import ReplacementPolicy
from ..trace import Trace


class FIFOPolicy(ReplacementPolicy):
    """Evicts the page admitted earliest; hits do not reorder the queue."""

    name = "FIFO"

    def _reset(self) -> None:
        super()._reset()
        self.queue: Deque[int] = deque()

    def _select_victim(self, index: int) -> int:
        oldest = self.queue.popleft()
        slot = self.frames.slot_of(oldest)
        assert slot is not None
        return slot

    def _on_load(self, index: int, slot: int) -> None:
        self.queue.append(self.frames[slot])


def fifo(frame_capacity: int, reference_stream: Iterable[int]) -> Trace:
    return FIFOPolicy(frame_capacity, reference_stream).run()

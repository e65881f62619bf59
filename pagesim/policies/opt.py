from __future__ import annotations

from collections import defaultdict, deque
from typing import DefaultDict, Deque, Iterable, Optional

from ..policy_base import ReplacementPolicy
from ..trace import Trace


class OPTPolicy(ReplacementPolicy):
    """Belady's optimal policy: evict the page whose next use is farthest away.

    The whole stream is indexed up front; each page keeps a queue of the
    positions where it is still going to be referenced.
    """

    name = "OPT"

    def _reset(self) -> None:
        super()._reset()
        self.future_positions: DefaultDict[int, Deque[int]] = defaultdict(deque)
        for position, page in enumerate(self.reference_stream):
            self.future_positions[page].append(position)

    def next_use(self, page: int, index: int) -> Optional[int]:
        """Position of the next reference to ``page`` after ``index``, if any."""
        positions = self.future_positions.get(page)
        while positions and positions[0] <= index:
            positions.popleft()
        return positions[0] if positions else None

    def _select_victim(self, index: int) -> int:
        farthest = -1
        victim = None
        for slot, page in enumerate(self.frames):
            position = self.next_use(page, index)
            if position is None:
                return slot
            if position > farthest:
                farthest = position
                victim = slot
        assert victim is not None
        return victim


def opt(frame_capacity: int, reference_stream: Iterable[int]) -> Trace:
    return OPTPolicy(frame_capacity, reference_stream).run()

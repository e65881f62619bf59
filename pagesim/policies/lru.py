from __future__ import annotations

from typing import Dict, Iterable

from ..policy_base import ReplacementPolicy
from ..trace import Trace


class LRUPolicy(ReplacementPolicy):
    """经典 LRU：淘汰最近一次访问位置最小的页面。"""

    name = "LRU"

    def _reset(self) -> None:
        super()._reset()
        # page -> index of its latest reference; entries for evicted pages stay
        self.last_used: Dict[int, int] = {}

    def _select_victim(self, index: int) -> int:
        # min() keeps the first minimum, so ties go to the lowest slot
        return min(range(len(self.frames)), key=lambda slot: self.last_used[self.frames[slot]])

    def _record_reference(self, index: int, page: int) -> None:
        self.last_used[page] = index


def lru(frame_capacity: int, reference_stream: Iterable[int]) -> Trace:
    return LRUPolicy(frame_capacity, reference_stream).run()

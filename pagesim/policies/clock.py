from __future__ import annotations

from typing import Iterable, List

from ..policy_base import ReplacementPolicy
from ..trace import Trace


class ClockPolicy(ReplacementPolicy):
    """Second-chance replacement with one reference bit per slot.

    The hand moves one slot on every load, including loads into free slots
    while the table is still filling up.
    """

    name = "Clock"

    def _reset(self) -> None:
        super()._reset()
        self.reference_bits: List[bool] = []
        self.pointer = 0

    def _advance(self) -> None:
        self.pointer = (self.pointer + 1) % self.frame_capacity

    def _on_hit(self, index: int, slot: int) -> None:
        self.reference_bits[slot] = True

    def _select_victim(self, index: int) -> int:
        # one revolution clears every bit, so the slot after it must be free
        for _ in range(self.frame_capacity + 1):
            if not self.reference_bits[self.pointer]:
                return self.pointer
            self.reference_bits[self.pointer] = False
            self._advance()
        raise RuntimeError("Clock sweep did not find a victim")

    def _on_load(self, index: int, slot: int) -> None:
        if slot == len(self.reference_bits):
            self.reference_bits.append(True)
        else:
            self.reference_bits[slot] = True
        self._advance()


def clock(frame_capacity: int, reference_stream: Iterable[int]) -> Trace:
    return ClockPolicy(frame_capacity, reference_stream).run()

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Iterable, List

from .trace import FrameTable, Step, Trace


class ReplacementPolicy(ABC):
    """One policy over a reference stream.

    Per-run state (frame table and any per-policy bookkeeping) is rebuilt by
    ``_reset`` at the start of every ``run``, so repeated runs give the same trace.
    """

    name = ""

    def __init__(self, frame_capacity: int, reference_stream: Iterable[int]):
        if frame_capacity < 0:
            raise ValueError("Frame capacity must be a non-negative integer")
        self.frame_capacity = frame_capacity
        self.reference_stream = tuple(reference_stream)
        self._reset()

    def _reset(self) -> None:
        """Subclasses extend this to rebuild their own bookkeeping."""
        self.frames = FrameTable(self.frame_capacity)

    def run(self) -> Trace:
        self._reset()
        steps: List[Step] = [self.access(index, page) for index, page in enumerate(self.reference_stream)]
        return Trace.from_steps(self.name, self.frame_capacity, steps)

    def access(self, index: int, page: int) -> Step:
        """Apply the reference at ``index`` and return its step record."""
        frames_before = self.frames.snapshot()
        evicted = None
        slot = self.frames.slot_of(page)

        if slot is not None:
            fault = False
            self._on_hit(index, slot)
        else:
            fault = True
            if self.frames.has_space():
                slot = self.frames.load(page)
                self._on_load(index, slot)
            elif self.frame_capacity > 0:
                slot = self._select_victim(index)
                evicted = self.frames.replace(slot, page)
                self._on_load(index, slot)
            # zero frames: nothing is ever resident, nothing to evict

        self._record_reference(index, page)
        return Step(page=page, frames_before=frames_before, fault=fault, evicted=evicted)

    @abstractmethod
    def _select_victim(self, index: int) -> int:
        """Return the slot to overwrite on a fault with a full frame table."""

    def _on_hit(self, index: int, slot: int) -> None:
        pass

    def _on_load(self, index: int, slot: int) -> None:
        pass

    def _record_reference(self, index: int, page: int) -> None:
        pass

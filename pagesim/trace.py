from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple


@dataclass(frozen=True)
class Step:
    """Snapshot of one reference: the resident pages *before* it was applied."""

    page: int
    frames_before: Tuple[int, ...]
    fault: bool
    evicted: Optional[int] = None


@dataclass(frozen=True)
class Trace:
    """Full step-by-step result of one policy run."""

    policy: str
    frame_capacity: int
    steps: Tuple[Step, ...]
    fault_count: int

    @classmethod
    def from_steps(cls, policy: str, frame_capacity: int, steps: Iterable[Step]) -> "Trace":
        step_tuple = tuple(steps)
        return cls(
            policy=policy,
            frame_capacity=frame_capacity,
            steps=step_tuple,
            fault_count=sum(1 for step in step_tuple if step.fault),
        )

    @property
    def total_references(self) -> int:
        return len(self.steps)

    @property
    def hits(self) -> int:
        return self.total_references - self.fault_count

    @property
    def fault_rate(self) -> float:
        """缺页率，以百分比返回。"""
        return (self.fault_count / self.total_references) * 100 if self.total_references else 0.0

    @property
    def hit_rate(self) -> float:
        return (self.hits / self.total_references) * 100 if self.total_references else 0.0


class FrameTable:
    """Slot-indexed resident set; slot order is insertion order."""

    def __init__(self, capacity: int):
        self.capacity = capacity
        self._slots: List[int] = []

    def __len__(self) -> int:
        return len(self._slots)

    def __getitem__(self, slot: int) -> int:
        return self._slots[slot]

    def __iter__(self) -> Iterator[int]:
        return iter(self._slots)

    def __contains__(self, page: object) -> bool:
        return page in self._slots

    def slot_of(self, page: int) -> Optional[int]:
        try:
            return self._slots.index(page)
        except ValueError:
            return None

    def has_space(self) -> bool:
        return len(self._slots) < self.capacity

    def load(self, page: int) -> int:
        """Append a page into the next free slot and return that slot."""
        if not self.has_space():
            raise ValueError("Frame table is full")
        self._slots.append(page)
        return len(self._slots) - 1

    def replace(self, slot: int, page: int) -> int:
        """Overwrite a slot and return the page that was there."""
        previous = self._slots[slot]
        self._slots[slot] = page
        return previous

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self._slots)

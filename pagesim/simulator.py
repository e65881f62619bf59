from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Type

from .policies import ClockPolicy, FIFOPolicy, LRUPolicy, OPTPolicy
from .policy_base import ReplacementPolicy
from .trace import Trace

POLICIES: Dict[str, Type[ReplacementPolicy]] = {
    "FIFO": FIFOPolicy,
    "LRU": LRUPolicy,
    "OPT": OPTPolicy,
    "Clock": ClockPolicy,
}
POLICY_NAMES = tuple(POLICIES)
_BY_LOWER_NAME = {name.lower(): name for name in POLICIES}


def normalize_policy_name(policy: str) -> Optional[str]:
    """Map a user supplied identifier onto its canonical name (``"clock"`` -> ``"Clock"``)."""
    return _BY_LOWER_NAME.get(policy.strip().lower())


def run_policy(policy: str, frame_capacity: int, reference_stream: Iterable[int]) -> Trace:
    name = normalize_policy_name(policy)
    if name is None:
        raise ValueError(f"Unknown policy '{policy}'. Choose from: {', '.join(POLICY_NAMES)}")
    return POLICIES[name](frame_capacity, reference_stream).run()


class Simulator:
    """Runs several policies over the same frame count and reference stream.

    Every run builds a fresh policy instance, so traces never share state.
    """

    def __init__(self, frame_capacity: int, reference_stream: Iterable[int]):
        self.frame_capacity = frame_capacity
        self.reference_stream: List[int] = list(reference_stream)

    def run(self, policy: str) -> Trace:
        return run_policy(policy, self.frame_capacity, self.reference_stream)

    def run_all(self, policies: Iterable[str]) -> Dict[str, Trace]:
        """Run each recognised policy once, keyed by canonical name in request order.

        Unknown identifiers are skipped.
        """
        results: Dict[str, Trace] = {}
        for policy in policies:
            name = normalize_policy_name(policy)
            if name is None or name in results:
                continue
            results[name] = self.run(name)
        return results

"""
Fixed reference strings for comparing replacement policies.

- belady-classic: the textbook FIFO/LRU/OPT example string
- belady-anomaly: FIFO faults more with 4 frames than with 3
- single-frame: one frame, every switch of page faults
- clock-second-chance: small string showing reference bits being cleared
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Mapping, Sequence


@dataclass(frozen=True)
class ScenarioRecipe:
    key: str
    goal: str
    frame_capacity: int
    reference_stream: Sequence[int]
    # known fault counts per policy for frame_capacity
    expected_faults: Mapping[str, int]


SCENARIOS = (
    ScenarioRecipe(
        key="belady-classic",
        goal="Textbook string with 3 frames; OPT is the lower bound",
        frame_capacity=3,
        reference_stream=(7, 0, 1, 2, 0, 3, 0, 4, 2, 3, 0, 3, 2),
        expected_faults={"FIFO": 10, "LRU": 9, "OPT": 7, "Clock": 9},
    ),
    ScenarioRecipe(
        key="belady-anomaly",
        goal="LRU and OPT diverge; rerun FIFO with 4 frames to see more faults",
        frame_capacity=3,
        reference_stream=(1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5),
        expected_faults={"FIFO": 9, "LRU": 10, "OPT": 7, "Clock": 9},
    ),
    ScenarioRecipe(
        key="single-frame",
        goal="One frame: every access to a different page is a fault",
        frame_capacity=1,
        reference_stream=(1, 2, 1, 2),
        expected_faults={"FIFO": 4, "LRU": 4, "OPT": 4, "Clock": 4},
    ),
    ScenarioRecipe(
        key="clock-second-chance",
        goal="Two frames; Clock clears both bits before evicting",
        frame_capacity=2,
        reference_stream=(1, 2, 3, 1, 2),
        expected_faults={"FIFO": 5, "LRU": 5, "OPT": 4, "Clock": 5},
    ),
)

SCENARIO_BY_KEY: Dict[str, ScenarioRecipe] = {recipe.key: recipe for recipe in SCENARIOS}


def get_scenario(key: str) -> ScenarioRecipe:
    try:
        return SCENARIO_BY_KEY[key]
    except KeyError:
        raise ValueError(
            f"Unknown scenario '{key}'. Available: {', '.join(SCENARIO_BY_KEY)}"
        ) from None

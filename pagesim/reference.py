from __future__ import annotations

import re
from typing import Iterable, List, Tuple

from .simulator import normalize_policy_name

_LEADING_INT = re.compile(r"[+-]?\d+")


def parse_reference_string(raw: str) -> List[int]:
    """Turn ``"7, 0, 1,x,2"`` into ``[7, 0, 1, 2]``.

    Tokens are separated by commas or whitespace. A token keeps its leading
    integer (``"3.5"`` -> 3, ``"4x"`` -> 4); tokens that do not start with
    one are dropped.
    """
    pages = []
    for token in raw.replace(",", " ").split():
        match = _LEADING_INT.match(token)
        if match:
            pages.append(int(match.group()))
    return pages


def parse_policy_selection(tokens: Iterable[str]) -> Tuple[List[str], List[str]]:
    """Split policy tokens into (accepted canonical names, rejected tokens).

    Tokens may themselves be comma separated; duplicates are collapsed while
    keeping first-seen order.
    """
    accepted: List[str] = []
    rejected: List[str] = []
    for chunk in tokens:
        for token in chunk.replace(",", " ").split():
            name = normalize_policy_name(token)
            if name is None:
                rejected.append(token)
            elif name not in accepted:
                accepted.append(name)
    return accepted, rejected

"""Concrete page replacement policies."""

from .clock import ClockPolicy, clock  # noqa: F401
from .fifo import FIFOPolicy, fifo  # noqa: F401
from .lru import LRUPolicy, lru  # noqa: F401
from .opt import OPTPolicy, opt  # noqa: F401

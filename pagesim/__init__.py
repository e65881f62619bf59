"""pagesim - page replacement simulator (FIFO, LRU, OPT, Clock)."""

from .simulator import POLICY_NAMES, Simulator, run_policy  # noqa: F401
from .trace import FrameTable, Step, Trace  # noqa: F401
from .report import ReportConfig, TraceReport  # noqa: F401

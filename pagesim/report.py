from __future__ import annotations

from dataclasses import dataclass
from typing import List, Mapping, Optional, Sequence, Set

from .trace import Step, Trace


@dataclass
class ReportConfig:
    frame_capacity: int
    reference_stream: Sequence[int]
    scenario_name: str = "custom"
    show_steps: bool = True


def describe_action(step: Step) -> str:
    if not step.fault:
        return "Hit"
    if step.evicted is None:
        return "Page Fault - Loaded"
    return f"Page Fault - Replaced {step.evicted}"


def format_frames(frames: Sequence[int]) -> str:
    return "[" + ", ".join(str(page) for page in frames) + "]"


class TraceReport:
    """generate text report for simulation traces"""

    def __init__(self, config: ReportConfig):
        self.config = config

    def _format_summary(self, trace: Trace) -> str:
        lines = [
            f"[Policy: {trace.policy}]",
            f"- Page Faults: {trace.fault_count}",
            f"- Hits: {trace.hits}",
            f"- Fault Rate: {trace.fault_rate:.2f}%",
        ]
        return "\n".join(lines)

    def _render_table(
        self,
        headers: Sequence[str],
        rows: Sequence[Sequence[str]],
        fault_rows: Optional[Set[int]] = None,
    ) -> str:
        """Render an ASCII table; rows listed in ``fault_rows`` get a ``*`` gutter."""
        if not rows:
            return "(No data)"
        widths = [max(len(str(cell)) for cell in column) for column in zip(headers, *rows)]
        gutter = "" if fault_rows is None else "  "

        def render(cells: Sequence[str], mark: str) -> str:
            padded = (str(cell).ljust(width) for cell, width in zip(cells, widths))
            return f"{mark}| " + " | ".join(padded) + " |"

        lines = [render(headers, gutter), gutter + "|" + "+".join("-" * (width + 2) for width in widths) + "|"]
        for idx, row in enumerate(rows):
            mark = "* " if fault_rows is not None and idx in fault_rows else gutter
            lines.append(render(row, mark))
        return "\n".join(lines)

    def _build_ranking(self, traces: List[Trace]) -> str:
        if not traces:
            return ""
        # sorted() is stable, so equal fault counts keep the requested order
        ranked = sorted(traces, key=lambda t: t.fault_count)
        rows = [(str(idx + 1), t.policy, str(t.fault_count)) for idx, t in enumerate(ranked)]
        return "\n".join(["", "[Fault Ranking]", self._render_table(("Rank", "Policy", "Page Faults"), rows)])

    def build_step_table(self, trace: Trace) -> str:
        rows = [
            (str(idx + 1), str(step.page), format_frames(step.frames_before), describe_action(step))
            for idx, step in enumerate(trace.steps)
        ]
        fault_rows = {idx for idx, step in enumerate(trace.steps) if step.fault}
        return "\n".join(
            [
                f"[{trace.policy} Steps] (* = page fault)",
                self._render_table(("Step", "Page", "Frames", "Action"), rows, fault_rows),
            ]
        )

    def build_report(self, traces: Mapping[str, Trace]) -> str:
        trace_list = list(traces.values())
        header = [
            "[Simulation Configuration]",
            f"- Frames: {self.config.frame_capacity}",
            f"- Scenario: {self.config.scenario_name}",
            f"- Reference String: {', '.join(str(page) for page in self.config.reference_stream)}",
            f"- Total References: {len(self.config.reference_stream)}",
            "",
        ]
        body = "\n\n".join(self._format_summary(t) for t in trace_list)
        sections = header + [body, self._build_ranking(trace_list)]
        if self.config.show_steps:
            sections.append("")
            sections.append("\n\n".join(self.build_step_table(t) for t in trace_list))
        return "\n".join(sections)

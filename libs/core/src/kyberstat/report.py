"""Plain-text console reports for both tools."""

from __future__ import annotations

from typing import Iterable, List

from .batchlog import REPORT_LABELS, OperationSummary
from .instructions import InstructionCounts
from .simd_table import SIMD_FAMILIES


def render_instruction_report(counts: InstructionCounts, breakdown: bool = False) -> str:
    lines: List[str] = [
        "The result is:",
        f"{counts.simd} SIMD instructions",
        f"{counts.total} Total instructions",
    ]
    if breakdown:
        lines.append(f"SIMD share: {counts.simd_ratio * 100:.2f}%")
        for family in SIMD_FAMILIES:
            hits = counts.by_family.get(family, 0)
            if hits:
                lines.append(f"  {family}: {hits}")
    return "\n".join(lines) + "\n"


def render_batch_report(summaries: Iterable[OperationSummary]) -> str:
    out: List[str] = []
    for s in summaries:
        avg_label, stddev_label = REPORT_LABELS[s.operation]
        out.append("%s avg: %f" % (avg_label, s.mean))
        out.append("%s stddev: %f" % (stddev_label, s.stddev))
    return "\n".join(out) + "\n"

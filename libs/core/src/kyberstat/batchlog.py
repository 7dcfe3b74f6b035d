"""Aggregate per-operation Kyber timings from a batch job's captured stdout.

The log repeats one block per iteration: a ``Loop spin:`` marker followed by
label lines such as ``gen_a:``, each followed by ``average:``/``median:``
lines. Averages are attributed to the most recent label.

Two denominators are in play and are kept apart on purpose: the reported
``avg`` divides an operation's total by the number of ``Loop spin:`` markers,
while the standard deviation is taken around total / own sample count. They
agree only when every operation reports exactly once per iteration.
"""

from __future__ import annotations

import logging
import math
import pathlib
import re
import statistics
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, List, Optional, Sequence, Tuple

from .textio import open_artifact

log = logging.getLogger(__name__)

OPERATIONS: Tuple[str, ...] = (
    "gen_a:",
    "indcpa_keypair:",
    "indcpa_enc:",
    "kyber_keypair_derand:",
    "kyber_keypair:",
    "kyber_encaps:",
    "kyber_decaps:",
)

# (avg label, stddev label) as printed in the console report
REPORT_LABELS: Dict[str, Tuple[str, str]] = {
    "gen_a:": ("gen_a", "gen_a"),
    "indcpa_keypair:": ("indcpa keypair", "indcpa_keypair"),
    "indcpa_enc:": ("indcpa enc", "indcpa_enc"),
    "kyber_keypair_derand:": ("keypair_derand", "keypair_derand"),
    "kyber_keypair:": ("keypair", "keypair"),
    "kyber_encaps:": ("encaps", "encaps"),
    "kyber_decaps:": ("decaps", "decaps"),
}

NO_TEST = "none"
ITERATION_MARKER = "Loop spin:"

_AVERAGE_RE = re.compile(r"average:\s*([0-9.]*)")


def parse_average(line: str) -> float:
    """Return the number that follows ``average:`` on ``line``.

    The payload is the run of digits and dots directly after the keyword;
    ``ValueError`` is raised when that run is empty or not a float
    (e.g. ``1.2.3``).
    """
    m = _AVERAGE_RE.search(line)
    if m is None or not m.group(1):
        raise ValueError("no numeric value after 'average:'")
    return float(m.group(1))


@dataclass
class BatchLogState:
    count: int = 0
    last_test: str = NO_TEST
    sums: Dict[str, float] = field(default_factory=lambda: {op: 0.0 for op in OPERATIONS})
    samples: Dict[str, List[float]] = field(default_factory=lambda: {op: [] for op in OPERATIONS})
    parse_failures: int = 0

    def feed(self, line: str) -> None:
        if ITERATION_MARKER in line:
            self.count += 1
            return
        if "average:" in line:
            try:
                value = parse_average(line)
            except ValueError as exc:
                self.parse_failures += 1
                log.warning("Failed to parse number from line %r: %s", line, exc)
                return
            self.sums[self.last_test] = self.sums.get(self.last_test, 0.0) + value
            # values under an unknown label only reach the generic sums
            if self.last_test in self.samples:
                self.samples[self.last_test].append(value)
            return
        if "median:" in line:
            return
        trimmed = line.strip()
        if trimmed.endswith(":") and "average" not in trimmed and "median" not in trimmed:
            self.last_test = trimmed


@dataclass
class OperationSummary:
    operation: str
    samples: int
    total: float
    mean: float         # total / iteration count
    sample_mean: float  # total / samples
    stddev: float


def population_stddev(values: Sequence[float], total: float) -> float:
    """Population standard deviation around ``total / len(values)``.

    Returns NaN for an empty sequence.
    """
    if not values:
        return math.nan
    return statistics.pstdev(values, mu=total / len(values))


def summarize(state: BatchLogState) -> List[OperationSummary]:
    """Finalize the scan into one summary per known operation, in report order."""
    if state.count == 0:
        log.warning("no %r markers found; per-iteration averages are undefined", ITERATION_MARKER)
    out: List[OperationSummary] = []
    for op in OPERATIONS:
        total = state.sums.get(op, 0.0)
        values = state.samples[op]
        n = len(values)
        if n == 0:
            log.warning("no samples collected for operation %s", op)
        elif state.count and n != state.count:
            log.warning(
                "%s has %d samples over %d iterations; avg and stddev use different denominators",
                op, n, state.count,
            )
        out.append(
            OperationSummary(
                operation=op,
                samples=n,
                total=total,
                mean=total / state.count if state.count else math.nan,
                sample_mean=total / n if n else math.nan,
                stddev=population_stddev(values, total),
            )
        )
    return out


def aggregate_lines(lines: Iterable[str]) -> BatchLogState:
    state = BatchLogState()
    for line in lines:
        state.feed(line)
    return state


def scan_batch_log(
    path: str | pathlib.Path,
    on_open: Optional[Callable[[], None]] = None,
) -> BatchLogState:
    """Aggregate the batch log at ``path``; raises ArtifactError on I/O failure.

    ``on_open`` is called once the file has been opened, before scanning.
    """
    with open_artifact(path) as lines:
        if on_open is not None:
            on_open()
        state = aggregate_lines(lines)
    log.info(
        "%s: %d iterations, %d unparsable average lines", path, state.count, state.parse_failures
    )
    return state

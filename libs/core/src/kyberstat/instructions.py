"""Count SIMD instructions in a textual objdump listing.

Only lines shaped like ``<address>: <bytes> <mnemonic> <operands>`` are
considered. The first word-bounded run of two or more lowercase ASCII letters
on such a line is taken as its mnemonic; hex byte columns such as ``c5`` or
``f8`` never qualify because they contain digits or a single letter.
"""

from __future__ import annotations

import logging
import pathlib
import re
from collections import Counter
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from .simd_table import SIMD_MNEMONICS, family_of
from .textio import open_artifact

log = logging.getLogger(__name__)

_MNEMONIC_RE = re.compile(r"\b[a-z]{2,}\b", re.ASCII)


@dataclass
class InstructionCounts:
    total: int = 0
    simd: int = 0
    by_family: Counter = field(default_factory=Counter)
    mnemonics: Counter = field(default_factory=Counter)

    @property
    def non_simd(self) -> int:
        return self.total - self.simd

    @property
    def simd_ratio(self) -> float:
        return self.simd / self.total if self.total else 0.0

    def record(self, mnemonic: str) -> None:
        self.total += 1
        self.mnemonics[mnemonic] += 1
        if mnemonic in SIMD_MNEMONICS:
            self.simd += 1
            self.by_family[family_of(mnemonic)] += 1


def is_listing_line(line: str) -> bool:
    fields = line.split()
    return len(fields) >= 2 and ":" in fields[0]


def extract_mnemonic(line: str) -> Optional[str]:
    """Return the mnemonic of an instruction line, or None if it has none."""
    if not is_listing_line(line):
        return None
    m = _MNEMONIC_RE.search(line)
    return m.group(0) if m else None


def classify_lines(lines: Iterable[str]) -> InstructionCounts:
    counts = InstructionCounts()
    for line in lines:
        mnemonic = extract_mnemonic(line)
        if mnemonic is None:
            continue
        log.debug("%s", mnemonic)
        counts.record(mnemonic)
    return counts


def scan_listing(
    path: str | pathlib.Path,
    on_open: Optional[Callable[[], None]] = None,
) -> InstructionCounts:
    """Classify every instruction line of the listing at ``path``.

    ``on_open`` is called once the file has been opened, before scanning.
    Raises ArtifactError if the file cannot be opened or read completely;
    no partial counts are returned in that case.
    """
    with open_artifact(path) as lines:
        if on_open is not None:
            on_open()
        counts = classify_lines(lines)
    log.info("%s: %d of %d instructions are SIMD", path, counts.simd, counts.total)
    log.debug("most frequent mnemonics: %s", counts.mnemonics.most_common(10))
    return counts

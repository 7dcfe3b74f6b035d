from __future__ import annotations

import logging
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
CLI_SRC = ROOT / "apps" / "cli" / "src"
CORE_SRC = ROOT / "libs" / "core" / "src"

for candidate in (CLI_SRC, CORE_SRC):
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)


OBJDUMP_LISTING = """\

Disassembly of section .text:

0000000000401126 <poly_add>:
  401126:\t55                   \tpush   %rbp
  401127:\t48 89 e5             \tmov    %rsp,%rbp
  40112a:\tc5 f8 58 c1          \tvaddps %xmm1,%xmm0,%xmm0
  40112e:\t66 0f d5 c1          \tpmullw %xmm1,%xmm0
  401132:\tc5 f5 d4 c1          \tvpaddq %ymm1,%ymm1,%ymm0
  401136:\t5d                   \tpop    %rbp
  401137:\tc3                   \tret
"""

BATCH_LOG = """\
Loop spin: 1
gen_a:
median: 101 cycles/ticks
average: 100 cycles/ticks

indcpa_keypair:
median: 199 cycles/ticks
average: 200 cycles/ticks

Loop spin: 2
gen_a:
median: 301 cycles/ticks
average: 300 cycles/ticks

indcpa_keypair:
median: 199 cycles/ticks
average: 200 cycles/ticks

"""


@pytest.fixture
def listing_file(tmp_path: Path) -> Path:
    path = tmp_path / "kyber768_avx2.txt"
    path.write_text(OBJDUMP_LISTING, encoding="utf-8")
    return path


@pytest.fixture
def batch_log_file(tmp_path: Path) -> Path:
    path = tmp_path / "slurm-1234.out"
    path.write_text(BATCH_LOG, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def _reset_cli_logging():
    root = logging.getLogger()
    level = root.level
    yield
    # drop the stderr handler installed by the CLI's logging.basicConfig
    for handler in list(root.handlers):
        if type(handler) is logging.StreamHandler:
            root.removeHandler(handler)
    root.setLevel(level)


class _BrokenReader:
    """Text handle that serves one listing line, then fails like a dying disk."""

    def __init__(self) -> None:
        self.closed = False

    def __iter__(self):
        yield "1000: 48 89 c7 mov %rdi,%rax\n"
        raise OSError(5, "Input/output error")

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def broken_reads(monkeypatch: pytest.MonkeyPatch):
    handles: list[_BrokenReader] = []

    def fake_open(self, *args, **kwargs):
        handle = _BrokenReader()
        handles.append(handle)
        return handle

    monkeypatch.setattr(Path, "open", fake_open)
    return handles

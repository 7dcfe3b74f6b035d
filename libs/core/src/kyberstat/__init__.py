from .simd_table import SIMD_FAMILIES, SIMD_MNEMONICS, family_of
from .textio import ArtifactError, open_artifact
from .instructions import InstructionCounts, classify_lines, extract_mnemonic, scan_listing
from .batchlog import (
    OPERATIONS,
    BatchLogState,
    OperationSummary,
    aggregate_lines,
    parse_average,
    population_stddev,
    scan_batch_log,
    summarize,
)
from .report import render_batch_report, render_instruction_report

__all__ = [
    "SIMD_FAMILIES",
    "SIMD_MNEMONICS",
    "family_of",
    "ArtifactError",
    "open_artifact",
    "InstructionCounts",
    "classify_lines",
    "extract_mnemonic",
    "scan_listing",
    "OPERATIONS",
    "BatchLogState",
    "OperationSummary",
    "aggregate_lines",
    "parse_average",
    "population_stddev",
    "scan_batch_log",
    "summarize",
    "render_batch_report",
    "render_instruction_report",
]

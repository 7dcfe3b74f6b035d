from __future__ import annotations

import itertools
import re

from kyberstat.simd_table import SIMD_FAMILIES, SIMD_MNEMONICS, family_of


def test_table_covers_mmx_through_avx2_without_avx512():
    assert list(SIMD_FAMILIES) == ["MMX", "SSE", "SSE2", "SSE3", "SSSE3", "SSE4.1", "SSE4.2", "AVX", "AVX2"]
    assert len(SIMD_MNEMONICS) == 254
    for avx512_only in ("vpternlogd", "kandw", "vpermb", "vcompresspd"):
        assert avx512_only not in SIMD_MNEMONICS


def test_families_are_disjoint_and_lowercase():
    for (a, left), (b, right) in itertools.combinations(SIMD_FAMILIES.items(), 2):
        assert not left & right, f"{a} and {b} overlap"
    assert all(re.fullmatch(r"[a-z][a-z0-9]+", m) for m in SIMD_MNEMONICS)


def test_family_of():
    assert family_of("vaddps") == "AVX"
    assert family_of("vpcmpgtd") == "AVX2"
    assert family_of("crc32") == "SSE4.2"
    assert family_of("pxor") == "MMX"
    assert family_of("mov") is None
    assert family_of("VADDPS") is None

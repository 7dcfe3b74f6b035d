"""Fixed x86 SIMD mnemonic table used by the instruction classifier.

Mnemonics are grouped by ISA extension so a listing can be broken down per
family. AVX-512 is intentionally absent: the Kyber reference and AVX2 builds
never emit it.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Optional

SIMD_FAMILIES: Dict[str, FrozenSet[str]] = {
    "MMX": frozenset({
        "packsswb", "packssdw", "packuswb",
        "paddb", "paddw", "paddd", "paddsb", "paddsw", "paddusb", "paddusw",
        "pand", "pandn",
        "pcmpeqb", "pcmpeqw", "pcmpeqd", "pcmpgtb", "pcmpgtw", "pcmpgtd",
        "pmaddwd", "pmulhw", "pmullw", "por",
        "psllw", "pslld", "psllq", "psraw", "psrad", "psrlw", "psrld", "psrlq",
        "psubb", "psubw", "psubd", "psubsb", "psubsw", "psubusb", "psubusw",
        "punpckhbw", "punpckhwd", "punpckhdq",
        "punpcklbw", "punpcklwd", "punpckldq",
        "pxor",
    }),
    "SSE": frozenset({
        "addps", "addss", "andps", "andnps",
        "cmpeqps", "cmpeqss", "cmpgeps", "cmpgess",
        "cmpgtps", "cmpgtss", "cmpleps", "cmpless",
        "cmpltps", "cmpltss", "cmpneqps", "cmpneqss",
        "cmpngeps", "cmpngess", "cmpngtps", "cmpngtss",
        "cmpnleps", "cmpnless", "cmpnltps", "cmpnltss",
        "cmpordps", "cmpordss", "cmpunordps", "cmpunordss",
        "divps", "divss", "maxps", "maxss", "minps", "minss",
        "movaps", "movss", "movups", "mulps", "mulss",
        "rcpps", "rcpss", "rsqrtps", "rsqrtss", "sqrtps", "sqrtss",
        "subps", "subss", "xorps",
    }),
    "SSE2": frozenset({
        "addpd", "addsd", "andpd", "andnpd",
        "cmpeqpd", "cmpeqsd", "cmpgepd", "cmpgesd",
        "cmpgtpd", "cmpgtsd", "cmplepd", "cmplesd",
        "cmpltpd", "cmpltsd", "cmpneqpd", "cmpneqsd",
        "cmpngepd", "cmpngesd", "cmpngtpd", "cmpngtsd",
        "cmpnlepd", "cmpnlesd", "cmpnltpd", "cmpnltsd",
        "cmpordpd", "cmpordsd", "cmpunordpd", "cmpunordsd",
        "divpd", "divsd", "maxpd", "maxsd", "minpd", "minsd",
        "movapd", "movsd", "movupd", "mulpd", "mulsd",
        "sqrtpd", "subpd", "subsd", "xorpd",
    }),
    "SSE3": frozenset({
        "addsubpd", "addsubps", "haddpd", "haddps", "hsubpd", "hsubps",
        "lddqu", "monitor", "mwait", "movddup", "movshdup", "movsldup",
    }),
    "SSSE3": frozenset({
        "pshufb", "phaddw", "phaddd", "phaddsw", "pmaddubsw",
        "phsubw", "phsubd", "phsubsw", "psignb", "psignw", "psignd",
        "pmulhrsw", "palignr",
    }),
    "SSE4.1": frozenset({
        "blendpd", "blendps", "blendvpd", "blendvps", "dppd", "dpps",
        "extractps", "insertps", "movntdqa", "mpsadbw", "packusdw",
        "pblendvb", "pblendw", "pcmpeqq", "pextrb", "pextrd", "pextrq",
        "phminposuw", "pinsrb", "pinsrd", "pinsrq", "pmuldq", "pmulld",
        "ptest", "roundpd", "roundps", "roundsd", "roundss",
    }),
    "SSE4.2": frozenset({
        "pcmpestri", "pcmpestrm", "pcmpistri", "pcmpistrm", "crc32", "popcnt",
    }),
    "AVX": frozenset({
        "vaddpd", "vaddps", "vaddsd", "vaddss",
        "vandpd", "vandps", "vandnpd", "vandnps",
        "vdivpd", "vdivps", "vdivsd", "vdivss",
        "vmaxpd", "vmaxps", "vmaxsd", "vmaxss",
        "vminpd", "vminps", "vminsd", "vminss",
        "vmulpd", "vmulps", "vmulsd", "vmulss",
        "vorpd", "vorps", "vsqrtpd", "vsqrtps", "vsqrtsd", "vsqrtss",
        "vsubpd", "vsubps", "vsubsd", "vsubss", "vxorpd", "vxorps",
    }),
    "AVX2": frozenset({
        "vpabsb", "vpabsw", "vpabsd",
        "vpaddb", "vpaddw", "vpaddd", "vpaddq",
        "vpaddsb", "vpaddsw", "vpaddusb", "vpaddusw", "vpalignr",
        "vpand", "vpandn", "vpavgb", "vpavgw", "vpblendd",
        "vpcmpeqb", "vpcmpeqw", "vpcmpeqd", "vpcmpeqq",
        "vpcmpgtb", "vpcmpgtw", "vpcmpgtd",
    }),
}

SIMD_MNEMONICS: FrozenSet[str] = frozenset().union(*SIMD_FAMILIES.values())


def family_of(mnemonic: str) -> Optional[str]:
    """Return the ISA family of ``mnemonic`` or None when it is not SIMD."""
    for family, members in SIMD_FAMILIES.items():
        if mnemonic in members:
            return family
    return None

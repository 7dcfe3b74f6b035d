import kyberstat


def test_public_api_exports():
    for name in kyberstat.__all__:
        assert hasattr(kyberstat, name), name
    assert len(kyberstat.OPERATIONS) == 7


def test_classifier_never_reports_more_simd_than_total():
    counts = kyberstat.classify_lines([
        "1: 0f 58 c1 addps %xmm1,%xmm0",
        "2: c3 ret",
        "3: 90 nop",
        "junk",
    ])
    assert 0 <= counts.simd <= counts.total == 3

"""Tests for MembershipScanner."""

import numpy as np
import pandas as pd
import pytest

import prsregion as pr
from prsregion.intervals import GenomicInterval as GI


def _scanner(chrom_order, **sets):
    catalog = pr.RegionCatalog(chrom_order)
    for name, intervals in sets.items():
        catalog.add(name, pr.sort_intervals(intervals))
    return pr.MembershipScanner(catalog.freeze())


QUERIES = [
    ("chr1", 3), ("chr1", 5), ("chr1", 12), ("chr1", 40), ("chrUn", 1),
    ("chr2", 1), ("chr2", 18), ("chr2", 60), ("chr3", 2), ("chr3", 900),
]

SETS = {
    "a": [GI(0, 5, 10), GI(0, 8, 45), GI(1, 15, 20), GI(2, 1, 1000)],
    "b": [GI(1, 50, 70)],
    "c": [],
    "d": [GI(0, 1, 3), GI(0, 12, 12), GI(2, 900, 900)],
}


def test_requires_frozen_catalog(chrom_order):
    catalog = pr.RegionCatalog(chrom_order)
    with pytest.raises(RuntimeError, match="frozen"):
        pr.MembershipScanner(catalog)


def test_interval_bounds_are_inclusive(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(0, 5, 10)])
    hits = [bool(scanner.classify("chr1", pos)[1]) for pos in (4, 5, 10, 11)]
    assert hits == [False, True, True, False]
    assert list(scanner.catalog.iter_counts()) == [("Base", 4), ("setA", 2)]


def test_base_always_matches(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(0, 5, 10)])
    for chrom, pos in [("chr1", 1), ("chr2", 1), ("chrUn", 7)]:
        assert scanner.classify(chrom, pos)[0]
    assert scanner.catalog.counts[0] == 3


def test_unknown_chromosome_leaves_cursors_alone(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(0, 5, 10), GI(1, 5, 10)])
    scanner.classify("chr2", 1)
    cursors = scanner.catalog.cursors.copy()
    bits = scanner.classify("chrM", 7)
    assert bits.tolist() == [True, False]
    np.testing.assert_array_equal(scanner.catalog.cursors, cursors)


def test_cursor_skips_earlier_chromosomes(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(0, 5, 10), GI(0, 20, 30), GI(2, 1, 5)])
    assert scanner.classify("chr3", 3).tolist() == [True, True]
    assert scanner.catalog.cursors[1] == 2


def test_later_chromosome_interval_does_not_match(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(1, 5, 10)])
    assert scanner.classify("chr1", 7).tolist() == [True, False]
    assert scanner.catalog.cursors[1] == 0
    assert scanner.classify("chr2", 7).tolist() == [True, True]


def test_matched_interval_stays_under_cursor(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(0, 1, 100)])
    assert scanner.classify("chr1", 10)[1]
    assert scanner.classify("chr1", 20)[1]
    assert scanner.catalog.cursors[1] == 0
    assert scanner.catalog.counts[1] == 2


def test_overlapping_intervals_count_once_per_query(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(0, 1, 10), GI(0, 5, 20), GI(0, 5, 8)])
    scanner.classify("chr1", 6)
    scanner.classify("chr1", 15)
    assert scanner.catalog.counts[1] == 2


def test_empty_set_never_matches(chrom_order):
    scanner = _scanner(chrom_order, empty=[])
    for chrom, pos in QUERIES:
        assert not scanner.classify(chrom, pos)[1]
    assert scanner.catalog.counts[1] == 0


def test_stream_against_many_sets(chrom_order):
    scanner = _scanner(chrom_order, **SETS)
    bits = [scanner.classify(chrom, pos).tolist() for chrom, pos in QUERIES]
    assert bits == [
        [True, False, False, False, True],   # chr1:3
        [True, True, False, False, False],   # chr1:5
        [True, True, False, False, True],    # chr1:12
        [True, True, False, False, False],   # chr1:40
        [True, False, False, False, False],  # chrUn:1
        [True, False, False, False, False],  # chr2:1
        [True, True, False, False, False],   # chr2:18
        [True, False, True, False, False],   # chr2:60
        [True, True, False, False, False],   # chr3:2
        [True, True, False, False, True],    # chr3:900
    ]
    assert list(scanner.catalog.iter_counts()) == [
        ("Base", 10), ("a", 6), ("b", 1), ("c", 0), ("d", 3),
    ]


def test_scan_is_deterministic(chrom_order):
    runs = []
    for _ in range(2):
        scanner = _scanner(chrom_order, **SETS)
        bits = [scanner.classify(chrom, pos).tolist() for chrom, pos in QUERIES]
        runs.append((bits, list(scanner.catalog.iter_counts())))
    assert runs[0] == runs[1]


def test_unsorted_queries_miss_matches(chrom_order):
    # cursors never move back, so a query behind the stream is not matched
    scanner = _scanner(chrom_order, setA=[GI(0, 5, 10), GI(0, 20, 30)])
    assert scanner.classify("chr1", 25)[1]
    assert not scanner.classify("chr1", 7)[1]
    assert not scanner.classify("chr1", 7)[1]


def test_out_buffer_is_reused(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(0, 5, 10)])
    out = np.ones(2, dtype=bool)
    result = scanner.classify("chr1", 1, out=out)
    assert result is out
    assert out.tolist() == [True, False]


def test_classify_frame(chrom_order):
    scanner = _scanner(chrom_order, **SETS)
    positions = pd.DataFrame(
        {"chrom": [c for c, _ in QUERIES], "pos": [p for _, p in QUERIES]},
        index=[f"rs{i}" for i in range(len(QUERIES))],
    )
    result = scanner.classify_frame(positions)
    assert list(result.columns) == ["Base", "a", "b", "c", "d"]
    assert list(result.index) == list(positions.index)
    assert result["Base"].all()
    assert result["a"].sum() == 6
    assert result.loc["rs7", "b"]
    assert scanner.catalog.counts.tolist() == [10, 6, 1, 0, 3]


def test_classify_frame_custom_columns(chrom_order):
    scanner = _scanner(chrom_order, setA=[GI(1, 5, 10)])
    positions = pd.DataFrame({"CHR": ["chr2", "chr2"], "BP": [4, 6]})
    result = scanner.classify_frame(positions, chrom_col="CHR", pos_col="BP")
    assert result["setA"].tolist() == [False, True]

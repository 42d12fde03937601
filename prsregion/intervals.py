"""Genomic intervals and named region sets."""

from dataclasses import dataclass as _dataclass
from dataclasses import field as _field
from typing import NamedTuple as _NamedTuple

import pandas as _pandas

from ._shared import _interval_sort_key


class GenomicInterval(_NamedTuple):
    """A 1-based, closed interval on a ranked chromosome.

    ``chrom`` is the chromosome rank, not its label. No ``start <= end``
    check is made here; malformed input is rejected by the loaders.
    """

    chrom: int
    start: int
    end: int

    def contains(self, chrom, pos):
        return self.chrom == chrom and self.start <= pos <= self.end


def sort_intervals(intervals):
    """Return ``intervals`` sorted by (chromosome rank, start, end).

    Overlapping and duplicated intervals are kept as they are.
    """
    return sorted(intervals, key=_interval_sort_key)


@_dataclass
class RegionSet:
    """A named, sorted list of genomic intervals.

    Attributes
    ----------
    name : str
        Unique set name inside a catalog (the file path for BED-derived
        sets, the first column for gene-set rows).
    intervals : list of GenomicInterval
        Intervals sorted with :func:`sort_intervals`. May be empty.
    """

    name: str
    intervals: list = _field(default_factory=list)

    def __len__(self):
        return len(self.intervals)

    def to_frame(self):
        """Return the intervals as a DataFrame with chrom, start, end."""
        if not self.intervals:
            return _pandas.DataFrame(
                {
                    "chrom": _pandas.Series([], dtype="int64"),
                    "start": _pandas.Series([], dtype="int64"),
                    "end": _pandas.Series([], dtype="int64"),
                }
            )
        return _pandas.DataFrame(self.intervals, columns=["chrom", "start", "end"])

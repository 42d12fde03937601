"""Single-pass classification of sorted positions against a region catalog."""

import logging as _logging

import numpy as _numpy
import pandas as _pandas

from ._shared import CONFIG

_logger = _logging.getLogger(__name__)


class MembershipScanner:
    """
    Classify a sorted stream of positions against every set of a catalog.

    Each non-base set keeps a cursor into its sorted interval list that
    only moves forward, so a whole stream is classified in time linear in
    the number of queries plus the number of intervals.

    Queries **must** arrive in non-decreasing (chromosome rank, position)
    order. This is not checked: a query behind an earlier one can miss
    intervals the cursors have already passed.

    Not safe for concurrent use. The cursors and counters live in the
    frozen catalog, so two scanners over one catalog share state.

    Parameters
    ----------
    catalog : RegionCatalog
        A frozen catalog.
    """

    def __init__(self, catalog):
        if not catalog.frozen:
            raise RuntimeError("Region catalog must be frozen before scanning")
        self.catalog = catalog
        self.chrom_order = catalog.chrom_order
        self._intervals = [region.intervals for region in catalog]
        self._cursors = catalog.cursors
        self._counts = catalog.counts

    def __len__(self):
        return len(self._intervals)

    def classify(self, chrom, pos, out=None):
        """
        Return the membership bitset of one position.

        Bit 0 (the base set) is always set. Bit ``i`` is set when ``pos``
        lies in an interval of set ``i``; the hit counter of every set that
        matched is incremented.

        Parameters
        ----------
        chrom : str
            Chromosome label. Unknown labels match the base set only.
        pos : int
            1-based position.
        out : numpy.ndarray, optional
            Boolean array of length ``len(catalog)`` to fill in place.

        Returns
        -------
        numpy.ndarray
            Boolean array of length ``len(catalog)``.
        """
        if out is None:
            out = _numpy.zeros(len(self._intervals), dtype=bool)
        else:
            out[:] = False
        out[0] = True
        self._counts[0] += 1

        rank = self.chrom_order.get(chrom)
        if rank is None:
            if CONFIG['debug']:
                _logger.debug("Chromosome %s not found, base set only", chrom)
            return out

        cursors = self._cursors
        for i in range(1, len(self._intervals)):
            intervals = self._intervals[i]
            cursor = int(cursors[i])
            n = len(intervals)
            while cursor < n:
                bound = intervals[cursor]
                if bound.chrom < rank:
                    cursor += 1
                elif bound.chrom > rank or bound.start > pos:
                    break
                elif bound.end < pos:
                    cursor += 1
                else:
                    out[i] = True
                    self._counts[i] += 1
                    break
            cursors[i] = cursor
        return out

    def classify_frame(self, positions, chrom_col="chrom", pos_col="pos"):
        """
        Classify every row of a sorted DataFrame.

        Parameters
        ----------
        positions : pandas.DataFrame
            One query per row, sorted by chromosome rank then position.
        chrom_col, pos_col : str
            Names of the chromosome label and position columns.

        Returns
        -------
        pandas.DataFrame
            Boolean membership, one column per set (in catalog order),
            indexed like ``positions``.
        """
        matrix = _numpy.zeros((len(positions), len(self._intervals)), dtype=bool)
        chroms = positions[chrom_col].tolist()
        locs = positions[pos_col].tolist()
        for row, (chrom, pos) in enumerate(zip(chroms, locs)):
            self.classify(chrom, int(pos), out=matrix[row])
        return _pandas.DataFrame(matrix, index=positions.index, columns=self.catalog.names)

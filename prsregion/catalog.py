"""The ordered catalog of named region sets."""

import logging as _logging
import warnings

import numpy as _numpy
import pandas as _pandas

from ._shared import CONFIG
from .bed import regions_load_bed
from .gtf import GtfGeneIndex
from .intervals import RegionSet
from .msigdb import regions_load_msigdb

_logger = _logging.getLogger(__name__)


class RegionCatalog:
    """
    Ordered collection of region sets with unique names.

    Index 0 always holds the universal base set, which matches every
    position regardless of its (empty) interval list. Sets are added
    during the loading phase; :meth:`freeze` ends it and allocates one
    scan cursor and one hit counter per set.

    Parameters
    ----------
    chrom_order : Mapping[str, int]
        Chromosome label to rank lookup shared by all loaders and the
        scanner.
    base_name : str, optional
        Name of the universal set. Defaults to ``CONFIG['base_name']``.
    """

    def __init__(self, chrom_order, base_name=None):
        if base_name is None:
            base_name = CONFIG['base_name']
        self.chrom_order = chrom_order
        self._sets = [RegionSet(base_name, [])]
        self._used_names = {base_name}
        self._cursors = None
        self._counts = None

    def __len__(self):
        return len(self._sets)

    def __iter__(self):
        return iter(self._sets)

    def __getitem__(self, index):
        return self._sets[index]

    def __contains__(self, name):
        if self._used_names is None:
            return name in self.names
        return name in self._used_names

    def size(self):
        return len(self._sets)

    @property
    def names(self):
        return [region.name for region in self._sets]

    @property
    def frozen(self):
        return self._counts is not None

    @property
    def cursors(self):
        if not self.frozen:
            raise RuntimeError("Region catalog is not frozen. Call freeze() first.")
        return self._cursors

    @property
    def counts(self):
        if not self.frozen:
            raise RuntimeError("Region catalog is not frozen. Call freeze() first.")
        return self._counts

    def add(self, name, intervals):
        """
        Append a region set and return its index.

        ``intervals`` must already be sorted. Returns ``None`` with a
        warning if ``name`` is taken; the earlier set is kept untouched.
        Raises ``RuntimeError`` once the catalog is frozen.
        """
        if self.frozen:
            raise RuntimeError(f"Cannot add region set '{name}': catalog is frozen")
        if name in self._used_names:
            warnings.warn(f"{name} is duplicated, it will be ignored", stacklevel=2)
            return None
        self._sets.append(RegionSet(name, list(intervals)))
        self._used_names.add(name)
        return len(self._sets) - 1

    def freeze(self):
        """End the loading phase and allocate scan cursors and counters."""
        if self.frozen:
            return self
        n = len(self._sets)
        self._cursors = _numpy.zeros(n, dtype=_numpy.int64)
        self._counts = _numpy.zeros(n, dtype=_numpy.int64)
        self._used_names = None
        return self

    def iter_counts(self):
        """Yield (name, hit count) pairs in catalog order."""
        counts = self.counts
        for i, region in enumerate(self._sets):
            yield region.name, int(counts[i])

    def counts_frame(self):
        """Return the per-set hit counts as a two-column DataFrame."""
        region_col, count_col = CONFIG['report_header']
        rows = list(self.iter_counts())
        return _pandas.DataFrame(
            {
                region_col: [name for name, _ in rows],
                count_col: _pandas.Series([c for _, c in rows], dtype="int64"),
            }
        )

    def info(self):
        """Return a one-line summary of how many sets are included."""
        n = len(self._sets)
        if n == 1:
            return "1 region included"
        return f"A total of {n} regions are included"


def build_catalog(chrom_order, bed=(), gtf=None, msigdb=None, features=None,
                  reporter=None):
    """
    Load every region source into a new catalog and freeze it.

    BED files are read first. The gene-set file is only read when a GTF
    file is given and yields at least one gene boundary.

    Parameters
    ----------
    chrom_order : Mapping[str, int]
        Chromosome label to rank lookup.
    bed : iterable of str or Path, optional
        BED-like interval files, one region set each.
    gtf : str or Path, optional
        Gene annotation file, plain or ``.gz``.
    msigdb : str or Path, optional
        Gene-set file resolved against the GTF genes.
    features : iterable of str, optional
        Accepted GTF feature tags. Defaults to ``CONFIG['gtf_features']``.
    reporter : callable, optional
        Receives the final region summary string. Defaults to logging it.

    Returns
    -------
    RegionCatalog
        Frozen catalog ready for :class:`~prsregion.scanner.MembershipScanner`.

    Examples
    --------
    >>> import prsregion as pr
    >>> order = pr.make_chrom_order(["1", "2"])
    >>> catalog = pr.build_catalog(order, bed=["peaks.bed"])  # doctest: +SKIP
    """
    catalog = RegionCatalog(chrom_order)
    regions_load_bed(catalog, bed)

    if gtf:
        _logger.info("Processing the GTF file")
        index = GtfGeneIndex(chrom_order, features)
        boundaries, aliases = index.load(gtf)
        _logger.info("A total of %d genes found in the GTF file", len(boundaries))
        if boundaries:
            regions_load_msigdb(catalog, msigdb, boundaries, aliases)

    catalog.freeze()
    message = catalog.info()
    if reporter is not None:
        reporter(message)
    else:
        _logger.info(message)
    return catalog

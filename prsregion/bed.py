"""Region sets from BED-like interval files."""

import logging as _logging
import warnings

from ._shared import _open_text
from .intervals import GenomicInterval, RegionSet, sort_intervals

_logger = _logging.getLogger(__name__)


class BedFormatError(ValueError):
    """A BED row that cannot be turned into an interval."""


def _parse_bed_coordinate(token, what, lineno):
    try:
        value = int(token)
    except ValueError:
        raise BedFormatError(
            f"Cannot convert {what} coordinate! (line: {lineno})"
        ) from None
    if value < 0:
        raise BedFormatError(f"Negative {what} coordinate at line {lineno}!")
    return value


def _read_bed(fh, chrom_order):
    """Parse an open BED file into a sorted list of intervals.

    Both bounds are shifted by one: BED starts are 0-based and the region
    sets are 1-based. Rows on chromosomes missing from ``chrom_order``
    are dropped. Any malformed row raises :class:`BedFormatError`.
    """
    intervals = []
    lineno = 0
    for raw_line in fh:
        lineno += 1
        line = raw_line.strip()
        if not line:
            continue
        fields = line.split()
        if len(fields) < 3:
            raise BedFormatError(f"line {lineno} contains less than 3 columns")
        start = _parse_bed_coordinate(fields[1], "start", lineno) + 1
        end = _parse_bed_coordinate(fields[2], "end", lineno) + 1
        rank = chrom_order.get(fields[0])
        if rank is None:
            continue
        intervals.append(GenomicInterval(rank, start, end))
    return sort_intervals(intervals)


def regions_from_bed(path, chrom_order):
    """
    Read one BED-like file into a region set named after the file.

    Parameters
    ----------
    path : str or Path
        Whitespace-delimited file with at least three columns
        (chrom, start, end). Extra columns are ignored.
    chrom_order : Mapping[str, int]
        Chromosome label to rank lookup.

    Returns
    -------
    RegionSet or None
        ``None`` (with a warning) if the file cannot be opened or holds a
        malformed row; nothing read from a malformed file is kept.
    """
    name = str(path)
    fh = _open_bed(name)
    if fh is None:
        return None
    with fh:
        return _region_from_handle(fh, name, chrom_order)


def _open_bed(name):
    """Open a BED file, or warn and return ``None`` if it cannot be read."""
    try:
        return _open_text(name)
    except OSError:
        warnings.warn(f"{name} cannot be open. It will be ignored", stacklevel=3)
        return None


def _region_from_handle(fh, name, chrom_order):
    try:
        intervals = _read_bed(fh, chrom_order)
    except (BedFormatError, OSError, EOFError) as exc:
        warnings.warn(f"{name}: {exc}. This file will be ignored", stacklevel=3)
        return None
    return RegionSet(name, intervals)


def regions_load_bed(catalog, paths):
    """
    Add one region set per BED file to ``catalog``.

    Files that cannot be opened, whose path is already a registered set
    name, or that contain a malformed row are skipped with a warning.

    Parameters
    ----------
    catalog : RegionCatalog
        Catalog in its loading phase.
    paths : iterable of str or Path

    Returns
    -------
    list of int
        Catalog indices of the sets that were added.
    """
    added = []
    for path in paths:
        name = str(path)
        _logger.info("Reading: %s", name)
        fh = _open_bed(name)
        if fh is None:
            continue
        with fh:
            if name in catalog:
                warnings.warn(f"{name} is duplicated, it will be ignored", stacklevel=2)
                continue
            region = _region_from_handle(fh, name, catalog.chrom_order)
        if region is not None:
            index = catalog.add(region.name, region.intervals)
            if index is not None:
                added.append(index)
    return added

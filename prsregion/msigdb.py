"""Region sets from MSigDB-style gene-set files."""

import logging as _logging
import warnings

from ._shared import _open_text
from .intervals import sort_intervals

_logger = _logging.getLogger(__name__)


def _resolve_gene(token, boundaries, aliases):
    """Return the boundaries a gene token refers to.

    A gene id maps to its own boundary. Otherwise a gene name maps to the
    boundary of every id sharing that name. Unknown tokens map to nothing.
    """
    bound = boundaries.get(token)
    if bound is not None:
        return [bound]
    return [
        boundaries[gene_id]
        for gene_id in sorted(aliases.get(token, ()))
        if gene_id in boundaries
    ]


def gene_set_intervals(genes, boundaries, aliases):
    """Collect and sort the boundaries of ``genes``."""
    intervals = []
    for gene in genes:
        intervals.extend(_resolve_gene(gene, boundaries, aliases))
    return sort_intervals(intervals)


def regions_load_msigdb(catalog, path, boundaries, aliases):
    """
    Add one region set per gene-set row of ``path`` to ``catalog``.

    Each row is ``name [url] gene1 gene2 ...``, whitespace-delimited. The
    URL column is not treated specially: it is looked up like any gene
    token and dropped when it matches nothing. A set whose genes all fail
    to resolve is still added, with no intervals.

    Parameters
    ----------
    catalog : RegionCatalog
        Catalog in its loading phase.
    path : str or Path or None
        Gene-set file. Nothing is done when ``None`` or empty.
    boundaries : dict
        ``gene_id -> GeneBoundary`` from :class:`~prsregion.gtf.GtfGeneIndex`.
        Nothing is done when empty.
    aliases : dict
        ``gene_name -> set of gene_id``.

    Returns
    -------
    list of int
        Catalog indices of the sets that were added.
    """
    if not path or not boundaries:
        return []
    try:
        fh = _open_text(path)
    except OSError:
        warnings.warn(f"Cannot open {path}. Will skip this file", stacklevel=2)
        return []

    added = []
    with fh:
        for raw_line in fh:
            line = raw_line.strip()
            if not line:
                continue
            fields = line.split()
            if len(fields) < 2:
                warnings.warn(
                    f"Each line require at least 2 information: {line}",
                    stacklevel=2,
                )
                continue
            name = fields[0]
            if name in catalog:
                warnings.warn(f"Duplicated Set: {name}. It will be ignored", stacklevel=2)
                continue
            index = catalog.add(name, gene_set_intervals(fields[1:], boundaries, aliases))
            if index is not None:
                added.append(index)
    _logger.info("%d gene sets read from %s", len(added), path)
    return added

"""Gene boundaries and gene-name aliases from GTF annotation files."""

import logging as _logging
import warnings

from ._shared import CONFIG, _open_text
from .intervals import GenomicInterval

_logger = _logging.getLogger(__name__)

# GTF column layout
CHROM, _SOURCE, FEATURE, START, END = 0, 1, 2, 3, 4
_SCORE, _STRAND, _FRAME, ATTRIBUTE = 5, 6, 7, 8
NUM_COLS = 9


class GtfFormatError(ValueError):
    """A GTF record that invalidates the whole annotation file."""


class GeneChromosomeConflictError(GtfFormatError):
    """The same gene_id was seen on two different chromosomes."""


# A merged gene span has the same shape as any other interval.
GeneBoundary = GenomicInterval


def _attribute_value(token):
    """Return the unquoted value of a ``key "value"`` attribute token."""
    parts = token.split()
    if len(parts) < 2:
        return ""
    return parts[1].replace('"', "")


def _parse_attributes(attributes):
    """Extract (gene_id, gene_name) from a GTF attribute column."""
    gene_id = ""
    gene_name = ""
    for token in attributes.split(";"):
        parts = token.split()
        if not parts:
            continue
        if parts[0] == "gene_id":
            value = _attribute_value(token)
            if value:
                gene_id = value
        elif parts[0] == "gene_name":
            value = _attribute_value(token)
            if value:
                gene_name = value
    return gene_id, gene_name


def _parse_gtf_coordinate(token, what, lineno):
    try:
        value = int(token)
    except ValueError:
        raise GtfFormatError(
            f"Cannot convert the {what} coordinate! (line: {lineno})"
        ) from None
    if value < 0:
        raise GtfFormatError(f"Negative {what} coordinate! (line: {lineno})")
    return value


class GtfGeneIndex:
    """
    Merged gene boundaries and a gene-name alias index built from a GTF file.

    Every accepted record widens the boundary of its ``gene_id`` to the
    minimum start and maximum end seen so far. Records whose ``gene_name``
    is set also register that name as an alias of the id. GTF coordinates
    are already 1-based and closed, so they are stored unchanged.

    Parameters
    ----------
    chrom_order : Mapping[str, int]
        Chromosome label to rank lookup. Records on other chromosomes are
        skipped.
    features : iterable of str, optional
        Accepted values of the feature column. Defaults to
        ``CONFIG['gtf_features']``.

    Attributes
    ----------
    boundaries : dict
        ``gene_id -> GeneBoundary``.
    aliases : dict
        ``gene_name -> set of gene_id``.
    excluded : int
        Records skipped by the last load because of their feature type.
    """

    def __init__(self, chrom_order, features=None):
        if features is None:
            features = CONFIG['gtf_features']
        self.chrom_order = chrom_order
        self.features = frozenset(features)
        self.boundaries = {}
        self.aliases = {}
        self.excluded = 0

    def __len__(self):
        return len(self.boundaries)

    def __bool__(self):
        return bool(self.boundaries)

    def clear(self):
        self.boundaries = {}
        self.aliases = {}

    def load(self, path):
        """
        Parse ``path`` (plain or ``.gz``) and return (boundaries, aliases).

        Any malformed record, or a gene found on two chromosomes, discards
        everything read so far: a warning is issued and both mappings are
        returned empty. Gene sets must not be built from an empty index.
        """
        self.clear()
        self.excluded = 0
        try:
            fh = _open_text(path)
        except OSError as exc:
            warnings.warn(f"Cannot open GTF file {path}: {exc}", stacklevel=2)
            return self.boundaries, self.aliases
        try:
            with fh:
                self._parse(fh)
        except (GtfFormatError, OSError, EOFError) as exc:
            self.clear()
            warnings.warn(
                f"Cannot process GTF file {path}: {exc}. "
                "Will not process any of the gene sets",
                stacklevel=2,
            )
            return self.boundaries, self.aliases

        if self.excluded == 1:
            _logger.info("A total of 1 entry removed due to feature selection")
        elif self.excluded > 1:
            _logger.info(
                "A total of %d entries removed due to feature selection",
                self.excluded,
            )
        return self.boundaries, self.aliases

    def _parse(self, fh):
        lineno = 0
        for raw_line in fh:
            lineno += 1
            line = raw_line.strip()
            if not line or line.startswith("#"):
                continue
            fields = line.split("\t")
            if len(fields) < NUM_COLS:
                raise GtfFormatError(
                    f"line {lineno}: expected {NUM_COLS} columns, got {len(fields)}"
                )
            if fields[FEATURE] not in self.features:
                self.excluded += 1
                continue
            rank = self.chrom_order.get(fields[CHROM])
            if rank is None:
                continue

            start = _parse_gtf_coordinate(fields[START], "start", lineno)
            end = _parse_gtf_coordinate(fields[END], "end", lineno)
            gene_id, gene_name = _parse_attributes(fields[ATTRIBUTE])
            if not gene_id:
                continue
            if gene_name:
                self.aliases.setdefault(gene_name, set()).add(gene_id)
            self._add_boundary(gene_id, rank, start, end, lineno)

    def _add_boundary(self, gene_id, rank, start, end, lineno):
        bound = self.boundaries.get(gene_id)
        if bound is None:
            self.boundaries[gene_id] = GeneBoundary(rank, start, end)
            return
        if bound.chrom != rank:
            raise GeneChromosomeConflictError(
                f"Gene {gene_id} occurs on two separate chromosomes (line: {lineno})"
            )
        self.boundaries[gene_id] = GeneBoundary(
            rank, min(bound.start, start), max(bound.end, end)
        )


def genes_import_gtf(path, chrom_order, features=None):
    """
    Read gene boundaries and name aliases from a GTF file.

    Shortcut for ``GtfGeneIndex(chrom_order, features).load(path)``.

    Returns
    -------
    tuple of dict
        ``(boundaries, aliases)``; both empty if the file was rejected.

    Examples
    --------
    >>> bounds, aliases = genes_import_gtf("genes.gtf.gz", {"chr1": 0})  # doctest: +SKIP
    """
    return GtfGeneIndex(chrom_order, features).load(path)

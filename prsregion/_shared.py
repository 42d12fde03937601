"""
Shared globals and utilities for prsregion modules.

Thread-safety note:
`CONFIG` is process-global and not synchronized for concurrent mutation.
Build catalogs and scan positions from a single controlling thread.
"""

import gzip

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "surrogateescape"

# Configuration dictionary
CONFIG = {
    'base_name': 'Base',            # Universal set at catalog index 0
    'gtf_features': (               # Accepted GTF feature tags
        'exon', 'gene', 'protein_coding', 'CDS'
    ),
    'report_header': ('Region', '#SNPs'),
    'debug': False,                 # Debug log records from the scanner
}


def make_chrom_order(labels):
    """Build a dense chromosome label -> rank mapping.

    Ranks follow the order of ``labels``; repeated labels keep their
    first rank.
    """
    order = {}
    for label in labels:
        if label not in order:
            order[label] = len(order)
    return order


def _interval_sort_key(interval):
    """Order intervals by chromosome rank, then start, then end."""
    return (interval[0], interval[1], interval[2])


def _open_text(path):
    """Open ``path`` for text reading, decompressing ``.gz`` files.

    Bytes that are not valid UTF-8 are kept as surrogate escapes, so a
    stray Latin-1 character never aborts a load and round-trips on output.
    Returns an open text-mode file handle (caller must close).
    """
    path = str(path)
    if path.endswith(".gz"):
        return gzip.open(path, "rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
    return open(path, encoding=TEXT_ENCODING, errors=TEXT_ERRORS)  # noqa: SIM115

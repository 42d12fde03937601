"""Per-set hit count report."""

import logging as _logging

from ._shared import TEXT_ENCODING, TEXT_ERRORS

_logger = _logging.getLogger(__name__)


class ReportWriteError(OSError):
    """The region report could not be written."""


def write_report(catalog, path):
    """
    Write the tab-separated ``Region``/``#SNPs`` table of a frozen catalog.

    Raises
    ------
    ReportWriteError
        If ``path`` cannot be opened or written.
    """
    df = catalog.counts_frame()
    try:
        df.to_csv(path, sep="\t", index=False, lineterminator="\n",
                  encoding=TEXT_ENCODING, errors=TEXT_ERRORS)
    except OSError as exc:
        raise ReportWriteError(
            f"Cannot open region information file to write: {path}"
        ) from exc
    _logger.info("Region information written to %s", path)
    return path

"""
prsregion - Named genomic region sets for annotating SNP positions
"""

__version__ = '0.1.0'

from ._shared import CONFIG, make_chrom_order
from .bed import BedFormatError, regions_from_bed, regions_load_bed
from .catalog import RegionCatalog, build_catalog
from .gtf import (
    GeneBoundary,
    GeneChromosomeConflictError,
    GtfFormatError,
    GtfGeneIndex,
    genes_import_gtf,
)
from .intervals import GenomicInterval, RegionSet, sort_intervals
from .msigdb import gene_set_intervals, regions_load_msigdb
from .report import ReportWriteError, write_report
from .scanner import MembershipScanner

__all__ = [
    # Configuration
    'CONFIG',
    'make_chrom_order',

    # Intervals
    'GenomicInterval',
    'RegionSet',
    'sort_intervals',

    # Loaders
    'BedFormatError',
    'regions_from_bed',
    'regions_load_bed',
    'GeneBoundary',
    'GeneChromosomeConflictError',
    'GtfFormatError',
    'GtfGeneIndex',
    'genes_import_gtf',
    'gene_set_intervals',
    'regions_load_msigdb',

    # Catalog and scanning
    'RegionCatalog',
    'build_catalog',
    'MembershipScanner',

    # Reporting
    'ReportWriteError',
    'write_report',
]

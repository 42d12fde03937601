import gzip

import pytest

import prsregion as pr

CHROMS = ["chr1", "chr2", "chr3"]


@pytest.fixture
def chrom_order():
    return pr.make_chrom_order(CHROMS)


def write_lines(path, lines, compress=False):
    text = "\n".join(lines) + "\n"
    if compress:
        with gzip.open(str(path), "wt") as fh:
            fh.write(text)
    else:
        path.write_text(text)
    return str(path)


def gtf_line(chrom, feature, start, end, gene_id=None, gene_name=None):
    """Build a single 9-column GTF line."""
    attrs = []
    if gene_id is not None:
        attrs.append(f'gene_id "{gene_id}"')
    if gene_name is not None:
        attrs.append(f'gene_name "{gene_name}"')
    attributes = "; ".join(attrs) + ";"
    return "\t".join([
        chrom, "test", feature, str(start), str(end), ".", "+", ".", attributes,
    ])


@pytest.fixture
def genes_gtf(tmp_path):
    """Three genes; GENE_A and GENE_A2 share the name DUP."""
    lines = [
        "#!genome-build test",
        gtf_line("chr1", "gene", 100, 200, "GENE_A", "DUP"),
        gtf_line("chr1", "exon", 150, 250, "GENE_A", "DUP"),
        gtf_line("chr2", "gene", 1000, 2000, "GENE_A2", "DUP"),
        gtf_line("chr1", "gene", 500, 600, "GENE_B", "BNAME"),
        gtf_line("chr1", "transcript", 1, 10000, "GENE_B", "BNAME"),
    ]
    return write_lines(tmp_path / "genes.gtf", lines)

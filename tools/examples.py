"""
Run a small prsregion example on generated input files.

Usage:
    python tools/examples.py
"""

import tempfile
from pathlib import Path

import prsregion as pr


def main():
    tmpdir = Path(tempfile.mkdtemp(prefix="prsregion_example_"))
    bed = tmpdir / "peaks.bed"
    bed.write_text("chr1\t0\t100\nchr2\t499\t600\n")
    gtf = tmpdir / "genes.gtf"
    gtf.write_text(
        'chr1\tdemo\tgene\t200\t300\t.\t+\t.\tgene_id "G1"; gene_name "ALPHA";\n'
        'chr2\tdemo\tgene\t10\t90\t.\t-\t.\tgene_id "G2"; gene_name "BETA";\n'
    )
    msigdb = tmpdir / "sets.txt"
    msigdb.write_text("PATHWAY_1\thttp://example.org\tALPHA\tG2\n")

    order = pr.make_chrom_order(["chr1", "chr2"])
    catalog = pr.build_catalog(order, bed=[bed], gtf=gtf, msigdb=msigdb, reporter=print)
    scanner = pr.MembershipScanner(catalog)

    for chrom, pos in [("chr1", 50), ("chr1", 250), ("chr2", 50), ("chr2", 550)]:
        print(chrom, pos, scanner.classify(chrom, pos).astype(int).tolist())

    print(catalog.counts_frame())


if __name__ == "__main__":
    main()

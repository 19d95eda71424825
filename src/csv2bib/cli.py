# csv2bib/cli.py
# Convert an IEEE Xplore "Download Citations" CSV export to BibTeX (or RIS).
# Usage:
#   python -m csv2bib.cli --in data/input/export.csv --out data/output/ieee.bib
#   python -m csv2bib.cli --in data/input/export.csv --out data/output/ieee.ris --format ris

import argparse
import sys

from loguru import logger

from .convert import run
from .models import ConverterConfig
from .writers import FORMATS


def configure_logging(verbose: bool = False):
    logger.remove()
    logger.add(sys.stderr, level="DEBUG" if verbose else "WARNING")


def build_parser():
    ap = argparse.ArgumentParser(description="IEEE Xplore CSV export to BibTeX")
    ap.add_argument("--in", dest="in_csv", required=True, help="CSV file from ieeexplore.ieee.org")
    ap.add_argument("--out", dest="out_path", required=True)
    ap.add_argument("--format", dest="output_format", choices=FORMATS, default="bibtex")
    ap.add_argument("--key-prefix", dest="key_prefix", default="ieee",
                    help="Prefix of auto-generated keys (<prefix>-autogen-<n>)")
    ap.add_argument("--encoding", default="utf-8-sig")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    config = ConverterConfig(key_prefix=args.key_prefix, encoding=args.encoding,
                             output_format=args.output_format)
    stats = run(args.in_csv, args.out_path, config)
    print(f"[csv2bib] wrote {args.out_path} ({stats.converted} entries)")
    print(f"[csv2bib] rejected entries (no author): {stats.rejected}")
    print(f"[csv2bib] auto-generated keys: {stats.auto_generated}")
    return 0


if __name__ == "__main__":
    main()

"""
FASTA input parsing.

Reads named sequences for tree building. Gzip-compressed files
(.gz suffix) are decompressed transparently.
"""

from __future__ import annotations

import gzip
import logging
from pathlib import Path

from Bio import SeqIO

from seqtree.core.exceptions import EmptySequenceFileError, InvalidSequenceFileError
from seqtree.models.taxa import Taxon

logger = logging.getLogger(__name__)


def read_fasta_taxa(path: Path) -> list[Taxon]:
    """Read all records of a FASTA file as taxa.

    The record id (first word of the header) becomes the identifier and
    the sequence is kept exactly as written, in file order.

    Args:
        path: FASTA file, optionally gzipped.

    Returns:
        Taxa in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        EmptySequenceFileError: If the file has no FASTA records.
        InvalidSequenceFileError: If the file cannot be decoded or is not
            FASTA (for example, sequence lines before the first header).
    """
    if not path.exists():
        raise FileNotFoundError(f"FASTA file not found: {path}")

    open_func = gzip.open if path.suffix == ".gz" else Path.open
    try:
        with open_func(path, "rt", encoding="utf-8") as handle:
            taxa = [
                Taxon(identifier=record.id, sequence=str(record.seq))
                for record in SeqIO.parse(handle, "fasta")
            ]
    except (ValueError, gzip.BadGzipFile, EOFError) as e:
        # UnicodeDecodeError is a ValueError
        raise InvalidSequenceFileError(str(path), str(e)) from e

    if not taxa:
        raise EmptySequenceFileError(str(path))

    logger.info(f"Read {len(taxa)} sequences from {path}")
    return taxa

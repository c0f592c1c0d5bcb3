"""Tests for FASTA parsing and taxon models."""

from __future__ import annotations

import gzip
from pathlib import Path

import pytest
from pydantic import ValidationError

from seqtree.core.exceptions import (
    EmptySequenceFileError,
    InvalidSequenceFileError,
    SequenceFileError,
)
from seqtree.core.parsers import read_fasta_taxa
from seqtree.models.taxa import Taxon, coerce_taxa
from tests.factories import random_taxa, write_fasta


class TestReadFastaTaxa:
    """Tests for read_fasta_taxa."""

    def test_reads_records_in_order(self, fasta_file: Path) -> None:
        taxa = read_fasta_taxa(fasta_file)

        assert [t.identifier for t in taxa] == ["S1", "S2", "S3"]
        assert [t.sequence for t in taxa] == ["AAAA", "AAAT", "TTTT"]

    def test_identifier_is_first_header_word(self, fasta_file: Path) -> None:
        """Header descriptions after the id are dropped."""
        assert read_fasta_taxa(fasta_file)[0].identifier == "S1"

    def test_wrapped_sequences(self, tmp_path: Path) -> None:
        taxa = random_taxa(3, length=150)
        path = write_fasta(tmp_path / "wrapped.fa", taxa, line_width=60)

        assert read_fasta_taxa(path) == taxa

    def test_gzipped(self, tmp_path: Path) -> None:
        path = tmp_path / "seqs.fa.gz"
        with gzip.open(path, "wt") as handle:
            handle.write(">A\nACGT\n>B\nACGA\n")

        taxa = read_fasta_taxa(path)

        assert [t.identifier for t in taxa] == ["A", "B"]

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "empty.fa"
        path.write_text("")

        with pytest.raises(EmptySequenceFileError):
            read_fasta_taxa(path)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError, match="FASTA file not found"):
            read_fasta_taxa(tmp_path / "missing.fa")

    def test_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "binary.fa"
        path.write_bytes(b">S1\nAC\xff\xfeGT\n>S2\nACGT\n")

        with pytest.raises(InvalidSequenceFileError, match="binary.fa"):
            read_fasta_taxa(path)

    def test_headerless_file(self, tmp_path: Path) -> None:
        """Sequence lines without any '>' header are not taxa."""
        path = tmp_path / "headerless.fa"
        path.write_text("ACGT\nACGA\n")

        with pytest.raises(SequenceFileError):
            read_fasta_taxa(path)

    def test_corrupt_gzip(self, tmp_path: Path) -> None:
        path = tmp_path / "seqs.fa.gz"
        path.write_text(">A\nACGT\n")

        with pytest.raises(InvalidSequenceFileError):
            read_fasta_taxa(path)


class TestTaxon:
    """Tests for the Taxon model."""

    def test_frozen(self) -> None:
        taxon = Taxon(identifier="A", sequence="ACGT")
        with pytest.raises(ValidationError):
            taxon.sequence = "TTTT"

    def test_from_pair(self) -> None:
        taxon = Taxon.from_pair(("A", "ACGT"))
        assert taxon.identifier == "A"
        assert taxon.sequence == "ACGT"

    def test_from_pair_passes_taxon_through(self) -> None:
        taxon = Taxon(identifier="A", sequence="ACGT")
        assert Taxon.from_pair(taxon) is taxon

    def test_coerce_mixed(self) -> None:
        taxa = coerce_taxa([("A", "ACGT"), Taxon(identifier="B", sequence="TTTT")])
        assert [t.identifier for t in taxa] == ["A", "B"]

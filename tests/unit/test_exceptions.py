"""Unit tests for custom exceptions module."""

import pytest

from seqtree.core.exceptions import (
    ConfigurationError,
    DistanceMatrixError,
    DuplicateTaxonError,
    EmptySequenceError,
    EmptySequenceFileError,
    InsufficientTaxaError,
    InvalidSequenceFileError,
    SeqtreeError,
    SequenceFileError,
    TreeBuildError,
    UnsupportedModelError,
)


class TestSeqtreeError:
    """Tests for base exception class."""

    def test_basic_message(self):
        """Should create exception with just message."""
        error = SeqtreeError("Test error")
        assert error.message == "Test error"
        assert error.suggestion is None
        assert str(error) == "Test error"

    def test_message_with_suggestion(self):
        """Should include suggestion in full message."""
        error = SeqtreeError("Test error", suggestion="Try this fix")
        assert error.message == "Test error"
        assert error.suggestion == "Try this fix"
        assert "Suggestion: Try this fix" in str(error)


class TestTreeBuildErrors:
    """Tests for tree building error classes."""

    def test_insufficient_taxa(self):
        error = InsufficientTaxaError(1)
        assert "need at least 2, got 1" in str(error)
        assert error.count == 1

    def test_unsupported_model(self):
        error = UnsupportedModelError("UNKNOWN")
        assert error.message == "Unsupported model: 'UNKNOWN'"
        assert "NJ" in error.suggestion
        assert "ML" in error.suggestion
        assert error.model == "UNKNOWN"

    def test_duplicate_taxon(self):
        error = DuplicateTaxonError(["B", "A", "A"])
        assert error.identifiers == ["A", "B"]
        assert "A, B" in str(error)

    def test_duplicate_taxon_truncates(self):
        error = DuplicateTaxonError([f"T{i}" for i in range(8)])
        assert "and 3 more" in error.message

    def test_empty_sequence(self):
        error = EmptySequenceError("S1")
        assert "'S1'" in error.message
        assert error.identifier == "S1"

    def test_distance_matrix(self):
        error = DistanceMatrixError(rows=3, cols=3, names=2)
        assert "3 rows x 3 columns" in str(error)
        assert "2 taxon names" in str(error)

    @pytest.mark.parametrize(
        "error",
        [
            InsufficientTaxaError(0),
            UnsupportedModelError("X"),
            DuplicateTaxonError(["A"]),
            EmptySequenceError("A"),
            DistanceMatrixError(1, 2, 3),
        ],
    )
    def test_hierarchy(self, error):
        assert isinstance(error, TreeBuildError)
        assert isinstance(error, SeqtreeError)


class TestFileAndConfigErrors:
    """Tests for input file and configuration errors."""

    def test_empty_sequence_file(self):
        error = EmptySequenceFileError("/data/seqs.fa")
        assert "/data/seqs.fa" in str(error)
        assert "FASTA" in error.suggestion
        assert isinstance(error, SequenceFileError)

    def test_invalid_sequence_file(self):
        error = InvalidSequenceFileError("/data/seqs.fa", "bad header")
        assert "/data/seqs.fa" in error.message
        assert "bad header" in error.message
        assert error.reason == "bad header"
        assert isinstance(error, SequenceFileError)

    def test_configuration_error(self):
        error = ConfigurationError("bad config")
        assert isinstance(error, SeqtreeError)
        assert str(error) == "bad config"

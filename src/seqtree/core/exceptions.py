"""
Custom exceptions with actionable guidance.

Provides specific error types for tree building failures,
each with helpful suggestions for resolution.
"""

from __future__ import annotations

from collections.abc import Iterable


class SeqtreeError(Exception):
    """Base exception for seqtree errors."""

    def __init__(self, message: str, suggestion: str | None = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.full_message)

    @property
    def full_message(self) -> str:
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class TreeBuildError(SeqtreeError):
    """Base class for tree construction errors."""



class InsufficientTaxaError(TreeBuildError):
    """Raised when fewer than two taxa are supplied."""

    def __init__(self, count: int):
        super().__init__(
            message=f"Insufficient taxa for tree building: need at least 2, got {count}",
            suggestion=(
                "Provide a FASTA file with two or more sequences. "
                "A single sequence has no relatives to join."
            ),
        )
        self.count = count


class UnsupportedModelError(TreeBuildError):
    """Raised when the tree building model selector is not recognised."""

    def __init__(self, model: str):
        super().__init__(
            message=f"Unsupported model: '{model}'",
            suggestion=(
                "Choose one of the supported models:\n"
                "  NJ : Neighbor-joining on Hamming distances\n"
                "  ML : Greedy tree with heuristic likelihood search"
            ),
        )
        self.model = model


class DuplicateTaxonError(TreeBuildError):
    """Raised when taxon identifiers are not unique."""

    def __init__(self, identifiers: Iterable[str]):
        duplicates = sorted(set(identifiers))
        shown = ", ".join(duplicates[:5])
        if len(duplicates) > 5:
            shown += f"... and {len(duplicates) - 5} more"

        super().__init__(
            message=f"Duplicate taxon identifiers: {shown}",
            suggestion=(
                "Every sequence needs a unique identifier. "
                "Rename or remove the repeated FASTA records."
            ),
        )
        self.identifiers = duplicates


class EmptySequenceError(TreeBuildError):
    """Raised when a taxon has no sequence symbols."""

    def __init__(self, identifier: str):
        super().__init__(
            message=f"Taxon '{identifier}' has an empty sequence",
            suggestion="Remove the record or supply its sequence.",
        )
        self.identifier = identifier


class DistanceMatrixError(TreeBuildError):
    """Raised when a distance matrix does not match its taxon names."""

    def __init__(self, rows: int, cols: int, names: int):
        super().__init__(
            message=(
                f"Distance matrix is {rows} rows x {cols} columns "
                f"but {names} taxon names were given"
            ),
            suggestion=(
                "The matrix must be square with one row and one column "
                "per taxon name, in the same order."
            ),
        )
        self.rows = rows
        self.cols = cols
        self.names = names


class SequenceFileError(SeqtreeError):
    """Base class for sequence input file errors."""



class EmptySequenceFileError(SequenceFileError):
    """Raised when a FASTA file contains no records."""

    def __init__(self, path: str):
        super().__init__(
            message=f"FASTA file is empty or contains no records: {path}",
            suggestion=(
                "Check that the file is in FASTA format:\n"
                "  - Each record starts with a '>' header line\n"
                "  - Sequence lines follow the header\n"
                "  - The file is not truncated"
            ),
        )
        self.path = path


class InvalidSequenceFileError(SequenceFileError):
    """Raised when a FASTA file cannot be decoded or parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            message=f"Could not read FASTA file {path}: {reason}",
            suggestion=(
                "Check that the file is plain-text or gzipped FASTA:\n"
                "  - The first non-blank line is a '>' header\n"
                "  - The file is UTF-8 or ASCII encoded\n"
                "  - Files ending in .gz are gzip-compressed"
            ),
        )
        self.path = path
        self.reason = reason


class ConfigurationError(SeqtreeError):
    """Raised when configuration is invalid."""

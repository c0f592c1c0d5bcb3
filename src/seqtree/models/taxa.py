"""
Data models for named sequences.

A taxon is the unit that tree building operates on: an identifier
paired with its sequence, read once from input and never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Self

from pydantic import BaseModel, Field


class Taxon(BaseModel):
    """Named biological sequence participating in tree construction.

    Attributes:
        identifier: Sequence identifier, unique within one run
        sequence: Sequence symbols (typically nucleotide letters)
    """

    identifier: str = Field(description="Sequence identifier (FASTA record id)")
    sequence: str = Field(description="Sequence symbols")

    model_config = {"frozen": True}

    @classmethod
    def from_pair(cls, pair: tuple[str, str] | Taxon) -> Self:
        """Create a taxon from an (identifier, sequence) pair.

        Taxon instances are passed through unchanged.
        """
        if isinstance(pair, cls):
            return pair
        identifier, sequence = pair
        return cls(identifier=identifier, sequence=sequence)


def coerce_taxa(taxa: Iterable[tuple[str, str] | Taxon]) -> list[Taxon]:
    """Normalize a mix of Taxon objects and (identifier, sequence) pairs."""
    return [Taxon.from_pair(item) for item in taxa]

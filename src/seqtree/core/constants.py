"""
Constants used throughout the seqtree package.

Centralizes model names, default values, and numerical thresholds
to improve maintainability and consistency.
"""

from __future__ import annotations

# =============================================================================
# Tree Building Models
# =============================================================================

MODEL_NEIGHBOR_JOINING = "NJ"
MODEL_MAXIMUM_LIKELIHOOD = "ML"

# Minimum number of taxa a tree can be built from
MIN_TAXA = 2

# =============================================================================
# Jukes-Cantor Model
#
# Reference:
# - Jukes & Cantor 1969, Mammalian Protein Metabolism
#
# d = -3/4 * ln(1 - 4/3 * p), undefined once p reaches 3/4 (saturation,
# two random nucleotide sequences differ at 75% of sites).
# =============================================================================

JC_SATURATION_PROPORTION = 0.75
JC_COEFFICIENT = 0.75

# =============================================================================
# Heuristic Likelihood Search Defaults
# =============================================================================

# Substitution rate used in exp(-rate * branch_distance)
DEFAULT_SUBSTITUTION_RATE = 0.1

# Fixed number of local-search iterations
DEFAULT_OPTIMIZATION_ITERATIONS = 100

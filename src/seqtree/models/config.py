"""
Pydantic configuration models for seqtree.

These models define configuration for the heuristic likelihood tree
search. Configuration can be loaded from YAML files or CLI arguments.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from seqtree.core.constants import (
    DEFAULT_OPTIMIZATION_ITERATIONS,
    DEFAULT_SUBSTITUTION_RATE,
)
from seqtree.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


class TreeConfig(BaseModel):
    """
    Configuration for tree building.

    Only the heuristic likelihood (ML) model is parameterized; the
    neighbor-joining model has no tunable settings.

    Likelihood score:
        - Leaf likelihood is 1
        - Internal node likelihood is left * right * exp(-rate * distance)

    The local search runs a fixed number of iterations with no early exit.
    """

    substitution_rate: float = Field(
        default=DEFAULT_SUBSTITUTION_RATE,
        gt=0,
        allow_inf_nan=False,
        description="Substitution rate in the exp(-rate * distance) branch term",
    )
    optimization_iterations: int = Field(
        default=DEFAULT_OPTIMIZATION_ITERATIONS,
        ge=0,
        description="Number of local-search iterations for the ML model",
    )

    model_config = {"frozen": True}

    @classmethod
    def from_yaml(cls, path: Path) -> TreeConfig:
        """
        Load tree configuration from a YAML file.

        The file uses a nested structure:

            likelihood:
              substitution_rate: 0.1
              optimization_iterations: 100

        Unknown keys are ignored (forward compatibility).

        Args:
            path: Path to YAML configuration file.

        Returns:
            TreeConfig populated from YAML values merged with defaults.

        Raises:
            FileNotFoundError: If YAML file does not exist.
            ConfigurationError: If the document is not a mapping.
            ValueError: If YAML contains out-of-range values.
        """
        import yaml

        try:
            raw = yaml.safe_load(path.read_text())
        except yaml.YAMLError as e:
            raise ConfigurationError(
                f"Could not parse YAML config {path}: {e}",
                suggestion="Check the file for indentation or syntax errors.",
            ) from e
        if raw is None:
            raw = {}
        if not isinstance(raw, dict):
            raise ConfigurationError(
                f"YAML config must be a mapping, got {type(raw).__name__}",
                suggestion="Use the layout written by TreeConfig.to_yaml().",
            )

        flat = _flatten_yaml_config(raw)
        logger.debug(f"Loaded tree config from {path}: {flat}")
        return cls(**flat)

    def to_yaml(self, path: Path) -> None:
        """Write tree configuration to a YAML file."""
        path.write_text(self.to_yaml_str())

    def to_yaml_str(self) -> str:
        """Serialize tree configuration to a YAML string."""
        import yaml

        data = {
            "likelihood": {
                "substitution_rate": self.substitution_rate,
                "optimization_iterations": self.optimization_iterations,
            },
        }
        return yaml.dump(data, default_flow_style=False, sort_keys=False)


def _flatten_yaml_config(raw: dict[str, Any]) -> dict[str, Any]:
    """Map the nested YAML layout onto TreeConfig field names."""
    flat: dict[str, Any] = {}
    likelihood = raw.get("likelihood") or {}
    if not isinstance(likelihood, dict):
        raise ConfigurationError(
            "YAML section 'likelihood' must be a mapping",
            suggestion="Nest substitution_rate and optimization_iterations under 'likelihood:'.",
        )

    for key in ("substitution_rate", "optimization_iterations"):
        if likelihood.get(key) is not None:
            flat[key] = likelihood[key]
    return flat

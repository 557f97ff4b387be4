"""Simplifier configuration."""

from __future__ import annotations

from dataclasses import dataclass

# Largest value of an unsigned 64-bit machine word.
MAX_MACHINE_UINT = 2**64 - 1


@dataclass(frozen=True)
class SimplifyConfig:
    """Limits applied while simplifying.

    max_exponent: largest exponent numerator that a literal may be raised to
        by repeated multiplication before ExponentTooLarge is raised.
    """

    max_exponent: int = MAX_MACHINE_UINT

    def __post_init__(self):
        if self.max_exponent < 0:
            raise ValueError(f"max_exponent must be non-negative, got {self.max_exponent}")


DEFAULT_CONFIG = SimplifyConfig()

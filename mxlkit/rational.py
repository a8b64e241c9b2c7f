"""Rational numbers as used for edit and sample rates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(eq=False)
class Rational:
    """A numerator/denominator pair, compared by cross multiplication."""

    numerator: int
    denominator: int

    def is_valid(self) -> bool:
        """A rational is valid when its denominator is non-zero."""
        return self.denominator != 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rational):
            return NotImplemented
        return self.numerator * other.denominator == self.denominator * other.numerator

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
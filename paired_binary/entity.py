"""
Paired Entity Module

An N-bit value X together with its bitwise complement X' = 2^N - 1 - X.

Pairs are always stored in canonical form: the numerically smaller member is
``x``. Because 2^N - 1 is odd for N >= 1, X and X' always differ, so the
canonical ordering is total and there is no self-complementary value.
"""

from __future__ import annotations
from typing import Any, Dict
from dataclasses import dataclass

from .constants import MIN_N_BITS
from .digits import to_decimal
from .errors import InvalidBaseBitWidth, NonComplementaryPair, NotAMember, NotCanonical, OutOfRange


def _check_n_bits(n_bits: int) -> None:
    if n_bits < MIN_N_BITS:
        raise InvalidBaseBitWidth(n_bits)


def mask_for(n_bits: int) -> int:
    """All-ones mask of width ``n_bits`` (2^N - 1)."""
    _check_n_bits(n_bits)
    return (1 << n_bits) - 1


def fits(value: int, n_bits: int) -> bool:
    """True if ``value`` is representable as an unsigned ``n_bits`` integer."""
    return 0 <= value < (1 << n_bits)


def complement_of(value: int, n_bits: int) -> int:
    """
    Bitwise complement of ``value`` within ``n_bits``.

    Raises:
        InvalidBaseBitWidth: if n_bits < 1
        OutOfRange: if value does not fit in n_bits
    """
    all_ones = mask_for(n_bits)
    if not fits(value, n_bits):
        raise OutOfRange(value, n_bits)
    return all_ones - value


def canonical(value: int, n_bits: int) -> int:
    """Smaller member of the pair containing ``value``."""
    return min(value, complement_of(value, n_bits))


@dataclass(frozen=True)
class PairedEntity:
    """
    Canonical (X, X') pair at a fixed bit-width.

    Attributes:
        x: Smaller member of the pair
        x_prime: Larger member, equal to 2^n_bits - 1 - x
        n_bits: Bit-width N of both members

    Example:
        >>> PairedEntity.from_value(12, 4)
        PairedEntity(x=3, x_prime=12, n_bits=4)
    """
    x: int
    x_prime: int
    n_bits: int

    def __post_init__(self):
        _check_n_bits(self.n_bits)
        for v in (self.x, self.x_prime):
            if not fits(v, self.n_bits):
                raise OutOfRange(v, self.n_bits)
        if self.x + self.x_prime != mask_for(self.n_bits):
            raise NonComplementaryPair(self.x, self.x_prime, self.n_bits)
        if self.x > self.x_prime:
            raise NotCanonical(self.x, self.n_bits)

    @classmethod
    def from_value(cls, x: int, n_bits: int) -> 'PairedEntity':
        """
        Build the canonical pair containing ``x``.

        ``x`` may be either member of the pair; the complement is derived.

        Args:
            x: Either member of the pair
            n_bits: Bit-width N (must be >= 1)

        Returns:
            Canonical PairedEntity

        Raises:
            InvalidBaseBitWidth: if n_bits < 1
            OutOfRange: if x is negative or x >= 2^n_bits
        """
        x_prime = complement_of(x, n_bits)
        if x <= x_prime:
            return cls(x=x, x_prime=x_prime, n_bits=n_bits)
        return cls(x=x_prime, x_prime=x, n_bits=n_bits)

    @classmethod
    def from_pair(cls, first: int, second: int, n_bits: int) -> 'PairedEntity':
        """
        Build a pair from two values that are asserted to be complements.

        Raises:
            NonComplementaryPair: if first + second != 2^n_bits - 1
        """
        return cls(x=min(first, second), x_prime=max(first, second), n_bits=n_bits)

    def complement(self, value: int) -> int:
        """Other member of this pair. ``value`` must be x or x_prime."""
        if value == self.x:
            return self.x_prime
        if value == self.x_prime:
            return self.x
        raise NotAMember(
            value, self.n_bits,
            f"Value {to_decimal(value)} is not a member of the pair "
            f"({to_decimal(self.x)}, {to_decimal(self.x_prime)}) at {self.n_bits} bits.",
        )

    def contains(self, value: int) -> bool:
        return value == self.x or value == self.x_prime

    def to_dict(self) -> Dict[str, Any]:
        return {"x": self.x, "x_prime": self.x_prime, "n_bits": self.n_bits}


def create_paired_entity(x: int, n_bits: int) -> Dict[str, Any]:
    """Canonical pair containing ``x`` as plain data."""
    return PairedEntity.from_value(x, n_bits).to_dict()


__all__ = [
    'PairedEntity',
    'create_paired_entity',
    'mask_for',
    'fits',
    'complement_of',
    'canonical',
]

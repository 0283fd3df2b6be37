# paired_binary/propagator.py
"""
Propagator: Self-Similar Selection Across Doubling Bit-Widths

This module implements the propagation rule of the paired hierarchy:

    S_base → S_2N → S_4N → ... → S_(N·2^k)

A value X of width N = 2M is selected iff both of its halves are selected at
width M:

    X ∈ S_N  ⇔  (X >> M) ∈ S_M  ∧  (X & (2^M - 1)) ∈ S_M

================================================================================
NOTHING IS MATERIALIZED
================================================================================

|S_N| = |leaves|^(N / N_base) grows exponentially in N. Every operation here
walks the bit halves of a single value instead of building sets:

1. Membership: split, recurse, test leaves against S_base
2. Decomposition: same split, collect leaves upper-first
3. Composition: pair adjacent leaves (upper << w | lower), level by level
4. Random sampling: draw each leaf independently, then compose

Recursion depth is log2(N / N_base).

================================================================================
LEAF MATCHING
================================================================================

By default halves are tested raw: a leaf matches only if it is one of the
stored canonical values. With ``canonical_halves=True`` a leaf matches if
either member of a selected pair appears, i.e. the leaf set is S_base plus
the complements of its values.

Design Principles:
- Immutable: a Propagator never changes after construction
- Deterministic: same (pattern, width, value) → same answer
- Thread-safe by construction (read-only sharing)
"""

from __future__ import annotations
from typing import FrozenSet, Iterator, List, Optional, Sequence, Tuple
from itertools import product
import logging

import numpy as np

from .constants import DEFAULT_SEED, SEED_MODULUS
from .digits import to_decimal
from .entity import PairedEntity, complement_of, fits
from .errors import (
    BitWidthMismatch,
    EmptyPattern,
    InvalidBaseBitWidth,
    InvalidComponentCount,
    NotAMember,
    OutOfRange,
)
from .pattern import InitialPattern

logger = logging.getLogger(__name__)


def is_power_of_two(n: int) -> bool:
    return n > 0 and (n & (n - 1)) == 0


def split_halves(x: int, n_bits: int) -> Tuple[int, int]:
    """
    Split an ``n_bits`` value into (upper, lower) halves of n_bits/2 each.

    Example:
        >>> split_halves(0b1101, 4)
        (3, 1)
    """
    half = n_bits // 2
    return x >> half, x & ((1 << half) - 1)


class Propagator:
    """
    Applies the propagation rule to an InitialPattern.

    Answers membership, decomposition, composition and random sampling
    queries at any width ``n_bits_base * 2^k``.

    Example:
        >>> p = Propagator(InitialPattern.new(3, [0, 1, 2]))
        >>> p.is_member(0b001010, 6)
        True
        >>> p.decompose_to_base(0b001010, 6)
        [1, 2]
        >>> p.compose_from_base([1, 2])
        (10, 6)
    """

    def __init__(self, pattern: Optional[InitialPattern], canonical_halves: bool = False):
        """
        Args:
            pattern: Validated base pattern
            canonical_halves: Match either member of a base pair at the leaves

        Raises:
            InvalidBaseBitWidth: if no pattern is supplied
            EmptyPattern: if the pattern selects nothing
        """
        if pattern is None:
            raise InvalidBaseBitWidth(None, "No base pattern supplied to Propagator.")
        if len(pattern) == 0:
            raise EmptyPattern(pattern.n_bits_base)

        leaves = set(pattern.selected)
        if canonical_halves:
            leaves.update(complement_of(v, pattern.n_bits_base) for v in pattern.selected)

        self._pattern = pattern
        self._canonical_halves = bool(canonical_halves)
        self._leaves: Tuple[int, ...] = tuple(sorted(leaves))
        self._leaf_set: FrozenSet[int] = frozenset(leaves)

        logger.debug(
            "Propagator ready: base=%d bits, %d pair(s), %d leaf value(s), canonical_halves=%s",
            pattern.n_bits_base, len(pattern), len(self._leaves), self._canonical_halves,
        )

    # =========================================================================
    # Properties
    # =========================================================================

    @property
    def pattern(self) -> InitialPattern:
        return self._pattern

    @property
    def n_bits_base(self) -> int:
        return self._pattern.n_bits_base

    @property
    def canonical_halves(self) -> bool:
        return self._canonical_halves

    @property
    def leaves(self) -> Tuple[int, ...]:
        """Values accepted at the base level, ascending."""
        return self._leaves

    def __repr__(self) -> str:
        return (f"Propagator(n_bits_base={self.n_bits_base}, "
                f"selected={list(self._pattern.values())}, "
                f"canonical_halves={self._canonical_halves})")

    # =========================================================================
    # Hierarchical levels
    # =========================================================================

    def is_valid_level(self, n_bits: int) -> bool:
        """True iff ``n_bits == n_bits_base * 2^k`` for some k >= 0."""
        base = self.n_bits_base
        if n_bits < base or n_bits % base != 0:
            return False
        return is_power_of_two(n_bits // base)

    def level_of(self, n_bits: int) -> int:
        """
        Number of doublings k from the base width to ``n_bits``.

        Raises:
            BitWidthMismatch: if n_bits is not a valid level
        """
        self._check_level(n_bits)
        return (n_bits // self.n_bits_base).bit_length() - 1

    def levels(self, max_n_bits: int) -> List[int]:
        """All valid widths from the base up to ``max_n_bits`` inclusive."""
        widths = []
        n = self.n_bits_base
        while n <= max_n_bits:
            widths.append(n)
            n *= 2
        return widths

    def _check_level(self, n_bits: int) -> None:
        if not self.is_valid_level(n_bits):
            logger.debug("Rejected width %d for base %d", n_bits, self.n_bits_base)
            raise BitWidthMismatch(n_bits, self.n_bits_base)

    def _check_query(self, x: int, n_bits: int) -> None:
        # Width sanity first: a non-positive width has no range to test against
        if n_bits < 1:
            raise BitWidthMismatch(n_bits, self.n_bits_base)
        if not fits(x, n_bits):
            raise OutOfRange(x, n_bits)
        self._check_level(n_bits)

    # =========================================================================
    # Membership
    # =========================================================================

    def is_member(self, x: int, n_bits: int) -> bool:
        """
        Test whether ``x`` belongs to S_{n_bits}.

        Args:
            x: Candidate value
            n_bits: Target width (n_bits_base * 2^k)

        Returns:
            True if every base-width block of x is a leaf

        Raises:
            OutOfRange: if x does not fit in n_bits
            BitWidthMismatch: if n_bits is not a valid level
        """
        self._check_query(x, n_bits)
        return self._is_member(x, n_bits)

    def _is_member(self, x: int, n_bits: int) -> bool:
        if n_bits == self.n_bits_base:
            return x in self._leaf_set
        upper, lower = split_halves(x, n_bits)
        half = n_bits // 2
        return self._is_member(upper, half) and self._is_member(lower, half)

    # =========================================================================
    # Decomposition / Composition
    # =========================================================================

    def decompose_to_base(self, x: int, n_bits: int) -> List[int]:
        """
        Decompose a member of S_{n_bits} into its base-level components.

        Components are ordered upper half before lower half at every level,
        i.e. most significant block first.

        Returns:
            List of n_bits / n_bits_base leaf values

        Raises:
            OutOfRange, BitWidthMismatch: as for is_member
            NotAMember: if x is not in S_{n_bits}
        """
        self._check_query(x, n_bits)

        components: List[int] = []
        self._collect(x, n_bits, components)

        for c in components:
            if c not in self._leaf_set:
                raise NotAMember(
                    x, n_bits,
                    f"Value {to_decimal(x)} is not a member of S_{n_bits}: "
                    f"base component {to_decimal(c)} is not selected.",
                )
        return components

    def _collect(self, x: int, n_bits: int, out: List[int]) -> None:
        if n_bits == self.n_bits_base:
            out.append(x)
            return
        upper, lower = split_halves(x, n_bits)
        half = n_bits // 2
        self._collect(upper, half, out)
        self._collect(lower, half, out)

    def compose_from_base(self, components: Sequence[int]) -> Tuple[int, int]:
        """
        Compose a member from ordered base-level components.

        Inverse of ``decompose_to_base``.

        Args:
            components: Leaf values, most significant first; the count must
                be a non-zero power of two

        Returns:
            (value, n_bits) with n_bits = n_bits_base * len(components)

        Raises:
            InvalidComponentCount: if the count is 0 or not a power of two
            NotAMember: if any component is not a base member
        """
        components = list(components)
        if not is_power_of_two(len(components)):
            raise InvalidComponentCount(len(components))

        for c in components:
            if c not in self._leaf_set:
                raise NotAMember(
                    c, self.n_bits_base,
                    f"Base component {to_decimal(c)} is not a member of S_base "
                    f"at {self.n_bits_base} bits.",
                )
        return self._compose(components)

    def _compose(self, components: List[int]) -> Tuple[int, int]:
        level = components
        width = self.n_bits_base
        while len(level) > 1:
            level = [(level[i] << width) | level[i + 1] for i in range(0, len(level), 2)]
            width *= 2
        return level[0], width

    # =========================================================================
    # Sampling and enumeration
    # =========================================================================

    def generate_random_member(self,
                               n_bits: int,
                               seed_offset: int = 0,
                               rng: Optional[np.random.Generator] = None,
                               seed: int = DEFAULT_SEED) -> int:
        """
        Draw a uniformly random member of S_{n_bits}.

        Each of the n_bits / n_bits_base leaves is drawn independently and
        uniformly from the leaf set, then composed. This is uniform over
        S_{n_bits}, not over all n_bits-bit integers.

        Args:
            n_bits: Target width
            seed_offset: Offset added to ``seed`` for the generator
            rng: Explicit generator (overrides seed and seed_offset)
            seed: Base seed

        Returns:
            A value v with is_member(v, n_bits) == True

        Raises:
            BitWidthMismatch: if n_bits is not a valid level
            EmptyPattern: if there are no leaves to draw from
        """
        self._check_level(n_bits)
        if not self._leaves:
            raise EmptyPattern(self.n_bits_base)

        if rng is None:
            rng = np.random.default_rng((seed + seed_offset) % SEED_MODULUS)

        count = n_bits // self.n_bits_base
        picks = rng.integers(0, len(self._leaves), size=count)
        value, _ = self._compose([self._leaves[i] for i in picks])
        return value

    def count_members(self, n_bits: int) -> int:
        """|S_{n_bits}| = |leaves| ** (n_bits / n_bits_base)."""
        self._check_level(n_bits)
        return len(self._leaves) ** (n_bits // self.n_bits_base)

    def iter_members(self, n_bits: int) -> Iterator[int]:
        """
        Lazily enumerate S_{n_bits} in ascending order.

        Only practical for small widths; the set size is count_members().
        """
        self._check_level(n_bits)
        return self._iter_members(n_bits // self.n_bits_base)

    def _iter_members(self, count: int) -> Iterator[int]:
        for combo in product(self._leaves, repeat=count):
            yield self._compose(list(combo))[0]

    def pair_at(self, x: int, n_bits: int) -> PairedEntity:
        """
        Paired entity of a member of S_{n_bits}.

        Raises:
            NotAMember: if x is not in S_{n_bits}
        """
        if not self.is_member(x, n_bits):
            raise NotAMember(x, n_bits)
        return PairedEntity.from_value(x, n_bits)


__all__ = [
    'Propagator',
    'split_halves',
    'is_power_of_two',
]

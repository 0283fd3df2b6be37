"""
Initial Pattern (S_base)

The seed set of canonical values at the base bit-width. Every derived set
S_N is defined in terms of this one; it is the only set that is stored.
"""

from __future__ import annotations
from typing import Any, Dict, FrozenSet, Iterable, Iterator, Tuple
from dataclasses import dataclass, field
import logging

from .entity import PairedEntity, canonical, fits
from .errors import BitWidthMismatch, EmptyPattern, InvalidBaseBitWidth, NotCanonical, OutOfRange
from .constants import MIN_N_BITS

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InitialPattern:
    """
    Base pattern S_base at width ``n_bits_base``.

    Use ``InitialPattern.new`` to build one from arbitrary values; the
    constructor expects an already canonical, deduplicated frozenset.

    Attributes:
        n_bits_base: Bit-width of the base level
        selected: Canonical representatives (value <= complement)
    """
    n_bits_base: int
    selected: FrozenSet[int] = field(default_factory=frozenset)

    def __post_init__(self):
        if self.n_bits_base < MIN_N_BITS:
            raise InvalidBaseBitWidth(self.n_bits_base)
        for v in self.selected:
            if not fits(v, self.n_bits_base):
                raise OutOfRange(v, self.n_bits_base)
            if canonical(v, self.n_bits_base) != v:
                raise NotCanonical(v, self.n_bits_base)

    @classmethod
    def new(cls, n_bits_base: int, values: Iterable[int]) -> 'InitialPattern':
        """
        Validate, canonicalize and deduplicate ``values``.

        Either member of a pair selects the pair, so {1, 6} at 3 bits
        collapses to {1}.

        Args:
            n_bits_base: Base bit-width (must be >= 1)
            values: Base values, each in [0, 2^n_bits_base - 1]

        Returns:
            InitialPattern over canonical representatives

        Raises:
            InvalidBaseBitWidth: if n_bits_base < 1
            OutOfRange: if any value does not fit in n_bits_base
        """
        if n_bits_base < MIN_N_BITS:
            raise InvalidBaseBitWidth(n_bits_base)

        selected = set()
        for v in values:
            if not fits(v, n_bits_base):
                raise OutOfRange(v, n_bits_base)
            selected.add(canonical(v, n_bits_base))

        pattern = cls(n_bits_base=n_bits_base, selected=frozenset(selected))
        logger.debug("Built S_base at %d bits with %d pair(s)", n_bits_base, len(pattern))
        return pattern

    @classmethod
    def from_paired_entities(cls, entities: Iterable[PairedEntity]) -> 'InitialPattern':
        """
        Build a pattern from pairs that all share one bit-width.

        Raises:
            EmptyPattern: if no pairs are given
            BitWidthMismatch: if the pairs have different widths
        """
        entities = list(entities)
        if not entities:
            raise EmptyPattern()
        widths = sorted({e.n_bits for e in entities})
        if len(widths) != 1:
            raise BitWidthMismatch(
                widths[-1], widths[0],
                f"Paired entities must share one bit-width, got {widths}.",
            )
        return cls.new(widths[0], (e.x for e in entities))

    def contains(self, value: int) -> bool:
        """
        Pair-level membership: True if the pair containing ``value`` is
        selected. Both members of a pair give the same answer.
        """
        if not fits(value, self.n_bits_base):
            return False
        return canonical(value, self.n_bits_base) in self.selected

    def selects(self, value: int) -> bool:
        """Raw membership: True only for the stored canonical values."""
        return value in self.selected

    def values(self) -> Tuple[int, ...]:
        """Selected canonical values in ascending order."""
        return tuple(sorted(self.selected))

    def pairs(self) -> Tuple[PairedEntity, ...]:
        return tuple(PairedEntity.from_value(v, self.n_bits_base) for v in self.values())

    def to_dict(self) -> Dict[str, Any]:
        return {"n_bits_base": self.n_bits_base, "selected": list(self.values())}

    def __len__(self) -> int:
        return len(self.selected)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values())

    def __contains__(self, value: int) -> bool:
        return self.contains(value)


__all__ = ['InitialPattern']

"""
Paired Binary - Self-Similar Hierarchies of Complementary Bit Patterns

Every N-bit value X is paired with its complement X' = 2^N - 1 - X. A seed
pattern at a small base width propagates to every doubled width: a value is
selected iff both of its halves are selected one level down.
"""

__version__ = "0.1.0"

from .errors import (
    HierarchyError,
    InvalidBaseBitWidth,
    EmptyPattern,
    OutOfRange,
    BitWidthMismatch,
    NotAMember,
    InvalidComponentCount,
    NotConfigured,
    ParseError,
    NonComplementaryPair,
    NotCanonical,
)
from .entity import PairedEntity, create_paired_entity
from .pattern import InitialPattern
from .propagator import Propagator
from .config import PropagatorConfig
from .api import PropagatorSession

__all__ = [
    "PairedEntity",
    "create_paired_entity",
    "InitialPattern",
    "Propagator",
    "PropagatorConfig",
    "PropagatorSession",
    "HierarchyError",
    "InvalidBaseBitWidth",
    "EmptyPattern",
    "OutOfRange",
    "BitWidthMismatch",
    "NotAMember",
    "InvalidComponentCount",
    "NotConfigured",
    "ParseError",
    "NonComplementaryPair",
    "NotCanonical",
]

"""
Boundary Adapter - Decimal Strings In, Decimal Strings Out

Callers outside Python (or at a serialization boundary) exchange big integers
as decimal strings and widths as plain integers. ``PropagatorSession`` holds
exactly one active Propagator configuration and marshals every call:

    setup_propagator(["0", "1", "2"], 3)
    is_member("10", 6)            → True
    decompose_to_base("10", 6)    → ["1", "2"]
    compose_from_base(["1", "2"]) → {"value": "10", "n_bits": 6}

The module-level functions operate on a default session. Create a separate
``PropagatorSession`` when independent configurations are needed.
"""

from __future__ import annotations
from typing import Any, Dict, Iterable, List, Optional, Union
import logging
import operator
import threading

from .config import PropagatorConfig
from .constants import COMPONENT_SEPARATOR, DECIMAL_PATTERN, DEFAULT_SEED
from .digits import from_decimal, to_decimal
from .entity import create_paired_entity as _create_pair
from .errors import NotConfigured, ParseError
from .propagator import Propagator

logger = logging.getLogger(__name__)


# =============================================================================
# Parsing
# =============================================================================

def parse_decimal(text: Any, field: str = "value") -> int:
    """
    Parse an unsigned decimal integer string.

    Only ASCII digits are accepted (surrounding whitespace is ignored); signs,
    underscores and other numeric spellings are rejected. Strings of any length
    are accepted.

    Raises:
        ParseError: if ``text`` is not a decimal digit string
    """
    if not isinstance(text, str):
        raise ParseError(text, field)
    stripped = text.strip()
    if not DECIMAL_PATTERN.fullmatch(stripped):
        raise ParseError(text, field)
    return from_decimal(stripped)


def parse_n_bits(value: Any, field: str = "n_bits") -> int:
    """Coerce a bit-width to int, rejecting bools, floats and strings."""
    if isinstance(value, bool):
        raise ParseError(value, field)
    try:
        return operator.index(value)
    except TypeError:
        raise ParseError(value, field) from None


def parse_decimal_list(values: Union[str, Iterable[str]], field: str = "values") -> List[int]:
    """
    Parse a sequence of decimal strings, or one comma-separated string.

    Empty pieces of a comma-separated string are skipped.
    """
    if isinstance(values, str):
        pieces = [p for p in values.split(COMPONENT_SEPARATOR) if p.strip()]
    else:
        pieces = list(values)
    return [parse_decimal(p, field) for p in pieces]


# =============================================================================
# Session
# =============================================================================

class PropagatorSession:
    """
    Owns the single active Propagator for a boundary.

    ``setup_propagator`` builds and validates the new Propagator completely
    before swapping it in, so a failed setup leaves the previous one active.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._propagator: Optional[Propagator] = None
        self._config: Optional[PropagatorConfig] = None

    @property
    def is_configured(self) -> bool:
        return self._propagator is not None

    @property
    def propagator(self) -> Propagator:
        return self._require("propagator access")

    @property
    def config(self) -> Optional[PropagatorConfig]:
        return self._config

    def _require(self, operation: str) -> Propagator:
        propagator = self._propagator
        if propagator is None:
            raise NotConfigured(operation)
        return propagator

    def setup_propagator(self,
                         base_values: Union[str, Iterable[str]],
                         n_base_bits: int,
                         canonical_halves: bool = False,
                         seed: Optional[int] = None) -> None:
        """
        Configure the session from decimal-string base values.

        Raises:
            ParseError: malformed value or width
            InvalidBaseBitWidth: n_base_bits < 1
            OutOfRange: base value does not fit in n_base_bits
            EmptyPattern: no base values
        """
        config = PropagatorConfig(
            n_bits_base=parse_n_bits(n_base_bits, "n_base_bits"),
            base_values=tuple(parse_decimal_list(base_values, "base_values")),
            canonical_halves=canonical_halves,
            seed=DEFAULT_SEED if seed is None else parse_n_bits(seed, "seed"),
        )
        self.setup_from_config(config)

    def setup_from_config(self, config: PropagatorConfig) -> None:
        propagator = config.build_propagator()
        with self._lock:
            self._propagator = propagator
            self._config = config
        logger.info(
            "Propagator configured: base=%d bits, selected=%s, canonical_halves=%s",
            config.n_bits_base, [to_decimal(v) for v in propagator.pattern.values()],
            config.canonical_halves,
        )

    def reset(self) -> None:
        """Drop the active configuration."""
        with self._lock:
            self._propagator = None
            self._config = None

    def is_member(self, x: str, n_bits: int) -> bool:
        propagator = self._require("is_member")
        return propagator.is_member(parse_decimal(x, "x"), parse_n_bits(n_bits))

    def decompose_to_base(self, x: str, n_bits: int) -> List[str]:
        propagator = self._require("decompose_to_base")
        components = propagator.decompose_to_base(parse_decimal(x, "x"), parse_n_bits(n_bits))
        return [to_decimal(c) for c in components]

    def compose_from_base(self, components: Union[str, Iterable[str]]) -> Dict[str, Any]:
        propagator = self._require("compose_from_base")
        value, n_bits = propagator.compose_from_base(parse_decimal_list(components, "components"))
        return {"value": to_decimal(value), "n_bits": n_bits}

    def generate_random_member(self, n_bits: int, seed_offset: int = 0) -> str:
        """
        Random member of S_{n_bits}, seeded by ``config.seed + seed_offset``.

        The same (n_bits, seed_offset) always yields the same member for a
        given configuration.
        """
        with self._lock:
            propagator, config = self._propagator, self._config
        if propagator is None:
            raise NotConfigured("generate_random_member")
        value = propagator.generate_random_member(
            parse_n_bits(n_bits),
            seed_offset=parse_n_bits(seed_offset, "seed_offset"),
            seed=config.seed,
        )
        return to_decimal(value)

    def create_paired_entity(self, x: str, n_bits: int) -> Dict[str, Any]:
        """Canonical pair for ``x``; does not require setup."""
        return create_paired_entity(x, n_bits)


def create_paired_entity(x: str, n_bits: int) -> Dict[str, Any]:
    """Canonical pair containing ``x`` as ``{x, x_prime, n_bits}`` strings."""
    pair = _create_pair(parse_decimal(x, "x"), parse_n_bits(n_bits))
    return {
        "x": to_decimal(pair["x"]),
        "x_prime": to_decimal(pair["x_prime"]),
        "n_bits": pair["n_bits"],
    }


# =============================================================================
# Default session
# =============================================================================

_default_session = PropagatorSession()


def get_default_session() -> PropagatorSession:
    return _default_session


def setup_propagator(base_values: Union[str, Iterable[str]], n_base_bits: int,
                     canonical_halves: bool = False, seed: Optional[int] = None) -> None:
    _default_session.setup_propagator(base_values, n_base_bits,
                                      canonical_halves=canonical_halves, seed=seed)


def is_member(x: str, n_bits: int) -> bool:
    return _default_session.is_member(x, n_bits)


def decompose_to_base(x: str, n_bits: int) -> List[str]:
    return _default_session.decompose_to_base(x, n_bits)


def compose_from_base(components: Union[str, Iterable[str]]) -> Dict[str, Any]:
    return _default_session.compose_from_base(components)


def generate_random_member(n_bits: int, seed_offset: int = 0) -> str:
    return _default_session.generate_random_member(n_bits, seed_offset)


__all__ = [
    'PropagatorSession',
    'get_default_session',
    'parse_decimal',
    'parse_decimal_list',
    'parse_n_bits',
    'setup_propagator',
    'is_member',
    'decompose_to_base',
    'compose_from_base',
    'generate_random_member',
    'create_paired_entity',
]

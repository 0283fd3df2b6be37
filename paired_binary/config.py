"""
Configuration for a propagator setup.

A ``PropagatorConfig`` captures everything needed to rebuild a Propagator:
base width, base values, leaf-matching mode and the random seed. It can be
loaded from and saved to YAML.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union

import yaml

from .constants import DEFAULT_N_BITS_BASE, DEFAULT_SEED, DECIMAL_PATTERN, MIN_N_BITS
from .digits import from_decimal, to_decimal
from .errors import InvalidBaseBitWidth, ParseError
from .pattern import InitialPattern
from .propagator import Propagator


def _to_int(value: Any, field_name: str) -> int:
    # YAML gives ints for bare numbers; big values are often quoted strings
    if isinstance(value, bool):
        raise ParseError(value, field_name)
    if isinstance(value, int):
        return value
    if isinstance(value, str) and DECIMAL_PATTERN.fullmatch(value.strip()):
        return from_decimal(value.strip())
    raise ParseError(value, field_name)


def _to_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.strip().lower() in ("true", "false"):
        return value.strip().lower() == "true"
    raise ParseError(value, field_name)


@dataclass(frozen=True)
class PropagatorConfig:
    """
    Propagator setup parameters.

    Attributes:
        n_bits_base: Base bit-width
        base_values: Base values (any member of each selected pair)
        canonical_halves: Match either member of a base pair at the leaves
        seed: Base seed for random member generation
    """
    n_bits_base: int = DEFAULT_N_BITS_BASE
    base_values: Tuple[int, ...] = field(default_factory=tuple)
    canonical_halves: bool = False
    seed: int = DEFAULT_SEED

    def __post_init__(self):
        if self.n_bits_base < MIN_N_BITS:
            raise InvalidBaseBitWidth(self.n_bits_base)
        object.__setattr__(self, "base_values", tuple(self.base_values))

    def build_pattern(self) -> InitialPattern:
        return InitialPattern.new(self.n_bits_base, self.base_values)

    def build_propagator(self) -> Propagator:
        return Propagator(self.build_pattern(), canonical_halves=self.canonical_halves)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary representation (values as decimal strings)."""
        return {
            "n_bits_base": self.n_bits_base,
            "base_values": [to_decimal(v) for v in self.base_values],
            "canonical_halves": self.canonical_halves,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "PropagatorConfig":
        """Create from dictionary representation."""
        if not isinstance(data, dict):
            raise ParseError(data, "config")
        raw_values = data.get("base_values") or []
        if isinstance(raw_values, str):
            raw_values = raw_values.split(",")
        elif isinstance(raw_values, int):
            raw_values = [raw_values]
        values = [_to_int(v, "base_values") for v in raw_values
                  if not (isinstance(v, str) and not v.strip())]

        return cls(
            n_bits_base=_to_int(data.get("n_bits_base", DEFAULT_N_BITS_BASE), "n_bits_base"),
            base_values=tuple(values),
            canonical_halves=_to_bool(data.get("canonical_halves", False), "canonical_halves"),
            seed=_to_int(data.get("seed", DEFAULT_SEED), "seed"),
        )

    @classmethod
    def from_values(cls, n_bits_base: int, values: Iterable[int], **kwargs) -> "PropagatorConfig":
        return cls(n_bits_base=n_bits_base, base_values=tuple(values), **kwargs)

    def save_to_file(self, file_path: Union[str, Path]) -> None:
        """Save configuration to YAML file."""
        file_path = Path(file_path)
        file_path.parent.mkdir(parents=True, exist_ok=True)

        with open(file_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    @classmethod
    def load_from_file(cls, file_path: Union[str, Path]) -> "PropagatorConfig":
        """Load configuration from YAML file."""
        file_path = Path(file_path)

        if not file_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {file_path}")

        with open(file_path, "r") as f:
            data = yaml.safe_load(f)

        return cls.from_dict(data or {})


__all__ = ['PropagatorConfig']

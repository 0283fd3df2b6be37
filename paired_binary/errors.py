"""
Error taxonomy for the paired binary hierarchy.

Every failure is a deterministic function of caller input, so errors carry a
stable ``kind`` tag and enough detail to be reported unchanged at the
boundary (see ``HierarchyError.to_dict``).
"""

from typing import Any, Dict, Optional

from .digits import to_decimal


class HierarchyError(Exception):
    """
    Base exception for all hierarchy errors.

    Attributes:
        kind: Stable tag naming the failure (class name by default)
        message: Human-readable message
        details: Structured context (values rendered as decimal strings)
    """

    kind = "HierarchyError"

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        cls.kind = cls.__name__

    def to_dict(self) -> Dict[str, Any]:
        """Tagged failure record for the boundary."""
        return {
            "kind": self.kind,
            "message": self.message,
            "details": dict(self.details),
        }


class InvalidBaseBitWidth(HierarchyError):
    """Bit-width is zero, negative, or the base pattern is missing."""

    def __init__(self, n_bits: Optional[int], message: Optional[str] = None):
        super().__init__(
            message or f"N-bits value ({n_bits}) must be a positive integer.",
            {"n_bits": n_bits},
        )
        self.n_bits = n_bits


class EmptyPattern(HierarchyError):
    """Base pattern has no selected values, so nothing can propagate."""

    def __init__(self, n_bits_base: Optional[int] = None):
        super().__init__(
            "Base pattern has no selected values; no member can propagate.",
            {"n_bits_base": n_bits_base},
        )


class OutOfRange(HierarchyError):
    """Value does not fit in the stated bit-width."""

    def __init__(self, value: int, n_bits: int):
        super().__init__(
            f"Value {to_decimal(value)} does not fit in {n_bits} bits "
            f"(must satisfy 0 <= value < 2^{n_bits}).",
            {"value": to_decimal(value), "n_bits": n_bits},
        )
        self.value = value
        self.n_bits = n_bits


class BitWidthMismatch(HierarchyError):
    """Requested width is not the base width times a power of two."""

    def __init__(self, n_bits: int, n_bits_base: int, message: Optional[str] = None):
        super().__init__(
            message or f"Target N-bits ({n_bits}) is not a valid hierarchical level from "
            f"base N-bits ({n_bits_base}); must be {n_bits_base} * 2^k for k >= 0.",
            {"n_bits": n_bits, "n_bits_base": n_bits_base},
        )
        self.n_bits = n_bits
        self.n_bits_base = n_bits_base


class NotAMember(HierarchyError):
    """Value fails membership of S_N or of a pair."""

    def __init__(self, value: int, n_bits: int, message: Optional[str] = None):
        super().__init__(
            message or f"Value {to_decimal(value)} is not a member of S_{n_bits}.",
            {"value": to_decimal(value), "n_bits": n_bits},
        )
        self.value = value
        self.n_bits = n_bits


class InvalidComponentCount(HierarchyError):
    """Compose argument length is zero or not a power of two."""

    def __init__(self, count: int):
        super().__init__(
            f"Number of base components ({count}) must be a non-zero power of 2.",
            {"count": count},
        )
        self.count = count


class NotConfigured(HierarchyError):
    """Operation invoked before a propagator exists."""

    def __init__(self, operation: str = "operation"):
        super().__init__(
            f"Propagator not initialized; call setup_propagator before {operation}.",
            {"operation": operation},
        )


class ParseError(HierarchyError):
    """Malformed numeric input at the boundary."""

    def __init__(self, text: Any, field: str = "value"):
        super().__init__(
            f"Invalid decimal integer for {field}: {text!r}",
            {"text": repr(text), "field": field},
        )
        self.text = text
        self.field = field


class NonComplementaryPair(HierarchyError):
    """Two values offered as a pair are not N-bit complements."""

    def __init__(self, first: int, second: int, n_bits: int):
        super().__init__(
            f"Values {to_decimal(first)} and {to_decimal(second)} are not {n_bits}-bit complements; "
            f"their sum should be 2^{n_bits} - 1.",
            {"first": to_decimal(first), "second": to_decimal(second), "n_bits": n_bits},
        )


class NotCanonical(HierarchyError):
    """Value was given where the smaller member of its pair is required."""

    def __init__(self, value: int, n_bits: int):
        super().__init__(
            f"Value {to_decimal(value)} is not canonical at {n_bits} bits; "
            f"the smaller member of its pair is required.",
            {"value": to_decimal(value), "n_bits": n_bits},
        )
        self.value = value
        self.n_bits = n_bits


__all__ = [
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

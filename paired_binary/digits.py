"""
Decimal string conversion for integers of any size.

CPython 3.11+ caps ``int(str)`` and ``str(int)`` at a few thousand digits
(``sys.get_int_max_str_digits``). Members of wide levels easily exceed that,
so conversions split the number into blocks below the cap and join them.
The process-wide limit is never touched.
"""

from .constants import SAFE_STR_DIGITS

# log10(2) ~= 0.30103, so this many bits always stays under SAFE_STR_DIGITS
_SAFE_BITS = SAFE_STR_DIGITS * 3


def to_decimal(value: int) -> str:
    """
    Decimal representation of ``value``.

    Example:
        >>> to_decimal(10 ** 5000) == "1" + "0" * 5000
        True
    """
    if value < 0:
        return "-" + to_decimal(-value)
    if value.bit_length() <= _SAFE_BITS:
        return str(value)
    # Lower bound on the digit count; the upper block is always non-zero
    half = value.bit_length() * 30103 // 100000 // 2
    upper, lower = divmod(value, 10 ** half)
    return to_decimal(upper) + to_decimal(lower).zfill(half)


def from_decimal(text: str) -> int:
    """
    Integer value of an unsigned decimal digit string.

    Callers validate the text first; only the length is handled here.
    """
    if len(text) <= SAFE_STR_DIGITS:
        return int(text)
    half = len(text) // 2
    return from_decimal(text[:-half]) * 10 ** half + from_decimal(text[-half:])


__all__ = ['to_decimal', 'from_decimal']

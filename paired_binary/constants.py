# paired_binary/constants.py
"""
Paired Binary Constants

This module defines constants used throughout the paired binary hierarchy:

LAYER 1: Pair Constants (Entity Layer)
- MIN_N_BITS: Smallest bit-width a pair or base pattern may have

LAYER 2: Propagation Constants (Hierarchy Layer)
- DEFAULT_N_BITS_BASE: Base width used when a config omits one
- DEFAULT_SEED: Seed for the deterministic random member source

LAYER 3: Boundary Constants (String Marshalling)
- DECIMAL_PATTERN: Accepted form of decimal big-integer strings
- COMPONENT_SEPARATOR: Separator for comma-joined base value lists
- SAFE_STR_DIGITS: Longest digit block converted by a single int()/str() call
"""
import re


# =============================================================================
# LAYER 1: Pair Constants (Entity Layer)
# =============================================================================

MIN_N_BITS = 1       # 2^N - 1 is odd for N >= 1, so no value is its own complement


# =============================================================================
# LAYER 2: Propagation Constants (Hierarchy Layer)
# =============================================================================

DEFAULT_N_BITS_BASE = 2
DEFAULT_SEED = 12345  # Leaf draws use default_rng(DEFAULT_SEED + seed_offset)
SEED_MODULUS = 2 ** 32


# =============================================================================
# LAYER 3: Boundary Constants (String Marshalling)
# =============================================================================

DECIMAL_PATTERN = re.compile(r"[0-9]+")
COMPONENT_SEPARATOR = ","
SAFE_STR_DIGITS = 4000  # below the 4300-digit default of sys.get_int_max_str_digits

LOGGER_NAME = "paired_binary"

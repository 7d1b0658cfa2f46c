"""
Constants for equity input handling.

Centralizes the field defaults and parsing limits shared by the validator,
the normalizer and the configuration schema.
"""

# =============================================================================
# Card list syntax
# =============================================================================

# Separator between card tokens in a hand or board string, e.g. "As,Kd"
CARD_DELIMITER = ","

# Ranks and suits in treys notation
RANKS = "23456789TJQKA"
SUITS = "shdc"

# =============================================================================
# Field defaults
# =============================================================================

DEFAULT_BOARD = ""
DEFAULT_BOARD_SIZE = 5
DEFAULT_HAND_SIZE = 2
DEFAULT_NUMBER_OF_DECKS = 1

# Monte Carlo samples handed to the engine when the caller sets none
DEFAULT_ITERATIONS = 100_000

# =============================================================================
# Numeric limits
# =============================================================================

# Largest integer a JSON client can represent exactly (2**53 - 1)
MAX_SAFE_INTEGER = 9_007_199_254_740_991

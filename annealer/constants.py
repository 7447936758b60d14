"""Package‑wide constants and defaults."""

# Default schedule used by the CLI when no flags are given.
DEFAULT_STEPS = 10_000
DEFAULT_LIMIT_TEMP = 1e-3
DEFAULT_RESTART = 1
DEFAULT_THREADS = 1

# Improvements smaller than this are recorded but not reported.
BEST_EPSILON = 1e-6

# Seeds are unsigned 64-bit integers.
SEED_BITS = 64
MAX_SEED = (1 << SEED_BITS) - 1

__all__ = [
    "DEFAULT_STEPS",
    "DEFAULT_LIMIT_TEMP",
    "DEFAULT_RESTART",
    "DEFAULT_THREADS",
    "BEST_EPSILON",
    "SEED_BITS",
    "MAX_SEED",
]

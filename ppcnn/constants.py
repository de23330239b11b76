"""Protocol codes, defaults and model option enumerations."""

from __future__ import annotations

from enum import IntEnum

__all__ = [
    "TIMEOUT_SEC",
    "RETRY_INTERVAL_USEC",
    "DEFAULT_MAX_CONCURRENT_QUERIES",
    "DEFAULT_MAX_RESULTS",
    "DEFAULT_MAX_RESULT_LIFETIME_SEC",
    "DEFAULT_PLAINTEXT_EXPERIMENT_PATH",
    "DEFAULT_DATASETS_PATH",
    "ControlCode",
    "PRE_SUF_PRIME_BIT_SIZE",
    "INTERMEDIATE_PRIMES_BIT_SIZE",
    "EPSILON_MAP",
    "EPSILON",
    "epsilon_for",
    "SWISH_RG4_DEG4_COEFFS",
    "SWISH_RG6_DEG4_COEFFS",
    "SWISH_RG4_DEG4_OPT_COEFFS",
    "SWISH_RG6_DEG4_OPT_COEFFS",
    "MISH_RG4_DEG4_COEFFS",
    "MISH_RG6_DEG4_COEFFS",
    "MISH_RG4_DEG4_OPT_COEFFS",
    "MISH_RG6_DEG4_OPT_COEFFS",
    "OptLevel",
    "Activation",
    "LayerClass",
]

TIMEOUT_SEC = 60
RETRY_INTERVAL_USEC = 2_000_000

DEFAULT_MAX_CONCURRENT_QUERIES = 128
DEFAULT_MAX_RESULTS = 128
DEFAULT_MAX_RESULT_LIFETIME_SEC = 50000

DEFAULT_PLAINTEXT_EXPERIMENT_PATH = "../../../plaintext_experiment/"
DEFAULT_DATASETS_PATH = "../../../datasets/"


class ControlCode(IntEnum):
    """Control codes of packets exchanged between client and server."""

    # Data packets: 0x401-0x4FF
    DATA_ENC_KEYS = 0x401
    DATA_PARAM = 0x402
    DATA_QUERY_ID = 0x403
    DATA_RESULT = 0x404
    # Upload/download packets: 0x1000-0x10FF
    UP_DOWNLOAD_QUERY = 0x1001
    UP_DOWNLOAD_RESULT = 0x1002


PRE_SUF_PRIME_BIT_SIZE = 50
INTERMEDIATE_PRIMES_BIT_SIZE = 30

# Smallest magnitude worth encoding, keyed by (outer prime bits, inner prime bits)
# of a coefficient modulus such as {50, 30, ..., 30, 50}.
EPSILON_MAP: dict[tuple[int, int], float] = {
    (50, 30): 0.0000001,
    (60, 40): 0.0000001,
}


def epsilon_for(pre_suffix_bits: int, intermediate_bits: int) -> float:
    """Return the rounding epsilon for a coefficient-modulus layout."""
    try:
        return EPSILON_MAP[(pre_suffix_bits, intermediate_bits)]
    except KeyError:
        raise KeyError(
            f"no epsilon for modulus bits ({pre_suffix_bits}, {intermediate_bits})"
        ) from None


EPSILON = epsilon_for(PRE_SUF_PRIME_BIT_SIZE, INTERMEDIATE_PRIMES_BIT_SIZE)

# Swish approximation: ax^4 + bx^2 + cx + d
SWISH_RG4_DEG4_COEFFS = (-0.005075, 0.19566, 0.5, 0.03347)
SWISH_RG6_DEG4_COEFFS = (-0.002012, 0.1473, 0.5, 0.1198)
# Normalised form: x^4 + b'x^2 + c'x + d'
SWISH_RG4_DEG4_OPT_COEFFS = (-38.5537, -98.52222, -6.59507)
SWISH_RG6_DEG4_OPT_COEFFS = (-73.2107, -248.5089, -59.5427)

# Mish approximation: ax^4 + bx^3 + cx^2 + dx + e
MISH_RG4_DEG4_COEFFS = (-0.00609, -0.004142, 0.21051, 0.565775, 0.06021)
MISH_RG6_DEG4_COEFFS = (-0.002096, -0.001277, 0.148529, 0.53663, 0.169)
# Normalised form: x^4 + b'x^3 + c'x^2 + d'x + e'
MISH_RG4_DEG4_OPT_COEFFS = (0.68013, -34.5665, -92.9023, -9.8867)
MISH_RG6_DEG4_OPT_COEFFS = (0.60926, -70.86307, -256.02576, -80.62977)


class OptLevel(IntEnum):
    NO_OPT = 0
    FUSE_LAYERS = 1
    OPT_ACTIVATION = 2
    OPT_POOLING = 3
    ALL_OPT = 4


class Activation(IntEnum):
    DEFAULT = 0
    SQUARE = 1
    SWISH_RG4_DEG4 = 2
    SWISH_RG6_DEG4 = 3
    MISH_RG4_DEG4 = 4
    MISH_RG6_DEG4 = 5


class LayerClass(IntEnum):
    CONV2D = 0
    AVERAGE_POOLING2D = 1
    ACTIVATION = 2
    BATCH_NORMALIZATION = 3
    DENSE = 4
    FLATTEN = 5
    GLOBAL_AVERAGE_POOLING2D = 6
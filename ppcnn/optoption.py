"""Optimisation switches and running state for encrypted inference."""

from __future__ import annotations

from .constants import INTERMEDIATE_PRIMES_BIT_SIZE, Activation, OptLevel

__all__ = ["OptOption"]

_LEVEL_FLAGS: dict[OptLevel, tuple[bool, bool, bool]] = {
    OptLevel.NO_OPT: (False, False, False),
    OptLevel.FUSE_LAYERS: (True, False, False),
    OptLevel.OPT_ACTIVATION: (False, True, False),
    OptLevel.OPT_POOLING: (False, False, True),
    OptLevel.ALL_OPT: (True, True, True),
}


class OptOption:
    """Which optimisations are enabled, plus state carried between layers.

    An unknown optimisation level enables nothing.
    """

    def __init__(self, opt_level: int, activation: int, slot_count: int) -> None:
        if slot_count < 0:
            raise ValueError(f"slot_count must not be negative: {slot_count}")
        try:
            level = OptLevel(opt_level)
        except ValueError:
            level = OptLevel.NO_OPT
        (
            self.enable_fuse_layers,
            self.enable_optimize_activation,
            self.enable_optimize_pooling,
        ) = _LEVEL_FLAGS[level]

        self.should_multiply_coeff = False
        self.should_multiply_pool = False
        self.activation = Activation(activation)
        self.highest_deg_coeff = 0.0
        self.current_pooling_mul_factor = 0.0
        self.consumed_level = 0
        self.slot_count = slot_count
        self.scale_param = 2.0**INTERMEDIATE_PRIMES_BIT_SIZE

    def __repr__(self) -> str:
        return (
            f"OptOption(fuse_layers={self.enable_fuse_layers}, "
            f"optimize_activation={self.enable_optimize_activation}, "
            f"optimize_pooling={self.enable_optimize_pooling}, "
            f"activation={self.activation.name}, slot_count={self.slot_count})"
        )
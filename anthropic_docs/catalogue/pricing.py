"""
Global pricing multipliers and context limits.

Multipliers apply to a model's current input/output price.
"""
from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class PricingMultipliers:
    cache_write_5min: float = 1.25   # 25% premium on base input
    cache_write_1hr: float = 2.00    # 100% premium on base input
    cache_read: float = 0.10         # 90% discount on base input
    batch_discount: float = 0.50     # 50% discount on all tokens
    long_context_input: float = 2.00   # 2x input price for >200K
    long_context_output: float = 1.50  # 1.5x output price for >200K

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ContextLimits:
    standard: int = 200_000
    extended: int = 1_000_000
    max_output: int = 64_000
    long_context_threshold: int = 200_000

    def to_dict(self) -> dict:
        return asdict(self)


PRICING_MULTIPLIERS = PricingMultipliers()
CONTEXT_LIMITS = ContextLimits()

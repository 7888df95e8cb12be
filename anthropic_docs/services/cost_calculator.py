"""
Cost calculation for a single Claude API request.

Applies the pricing rules in a fixed order:
1. Thinking tokens are billed as output tokens
2. Long-context prices replace base prices for the whole request
3. Prompt caching reprices input tokens (reads discounted, writes at a premium)
4. Batch API discount on the combined post-cache cost

All amounts are USD floats. Nothing here does I/O or keeps state.
"""
from dataclasses import dataclass, field

from anthropic_docs.catalogue import PRICING_MULTIPLIERS, get_model
from anthropic_docs.catalogue.models import ModelEntry
from anthropic_docs.catalogue.pricing import PricingMultipliers

TOKENS_PER_MILLION = 1_000_000


@dataclass
class UsageProfile:
    """Token counts and pricing options for one request."""
    input_tokens: int = 0
    output_tokens: int = 0
    thinking_tokens: int = 0
    use_cache: bool = False
    cache_hit_ratio: float = 0.9
    use_batch: bool = False
    long_context: bool = False

    def __post_init__(self):
        # Out-of-range values are clamped rather than rejected
        self.input_tokens = max(int(self.input_tokens), 0)
        self.output_tokens = max(int(self.output_tokens), 0)
        self.thinking_tokens = max(int(self.thinking_tokens), 0)
        self.cache_hit_ratio = min(max(float(self.cache_hit_ratio), 0.0), 1.0)

    @property
    def total_output_tokens(self) -> int:
        return self.output_tokens + self.thinking_tokens


@dataclass
class CostBreakdown:
    input_cost: float = 0.0
    output_cost: float = 0.0


@dataclass
class CostResult:
    """
    Itemized cost of a request.

    base_cost is the cost at the selected price tier before caching and batching.
    final_cost == base_cost - cache_discount + cache_write_premium - batch_discount.
    long_context_premium is informational; it is already part of base_cost.
    """
    model: str
    input_tokens: int
    output_tokens: int
    thinking_tokens: int
    total_output_tokens: int
    base_cost: float
    cache_discount: float
    cache_write_premium: float
    batch_discount: float
    long_context_premium: float
    final_cost: float
    breakdown: CostBreakdown = field(default_factory=CostBreakdown)

    def to_dict(self) -> dict:
        return {
            "model": self.model,
            "input_tokens": self.input_tokens,
            "output_tokens": self.output_tokens,
            "thinking_tokens": self.thinking_tokens,
            "total_output_tokens": self.total_output_tokens,
            "base_cost": self.base_cost,
            "cache_discount": self.cache_discount,
            "cache_write_premium": self.cache_write_premium,
            "batch_discount": self.batch_discount,
            "long_context_premium": self.long_context_premium,
            "final_cost": self.final_cost,
            "breakdown": {
                "input_cost": self.breakdown.input_cost,
                "output_cost": self.breakdown.output_cost,
            },
        }


def select_prices(model: ModelEntry, long_context: bool) -> tuple[float, float]:
    """
    Get the (input, output) price per 1M tokens for a request.

    Long-context prices apply to the entire request, not just the tokens
    above the threshold.
    """
    pricing = model.pricing
    input_price = pricing.input
    output_price = pricing.output

    if long_context and pricing.long_context_input:
        input_price = pricing.long_context_input
    if long_context and pricing.long_context_output:
        output_price = pricing.long_context_output

    return input_price, output_price


def calculate_model_cost(
    model: ModelEntry,
    usage: UsageProfile,
    multipliers: PricingMultipliers = PRICING_MULTIPLIERS,
) -> CostResult:
    """
    Calculate the itemized cost of a request against a catalogue entry.

    Returns:
        CostResult with all amounts in USD
    """
    total_output_tokens = usage.total_output_tokens
    input_price, output_price = select_prices(model, usage.long_context)

    input_cost = (usage.input_tokens / TOKENS_PER_MILLION) * input_price
    output_cost = (total_output_tokens / TOKENS_PER_MILLION) * output_price
    base_cost = input_cost + output_cost

    # Cache hits are billed at the read rate, misses at the 5-minute write rate
    cache_discount = 0.0
    cache_write_premium = 0.0
    if usage.use_cache:
        cache_hits = usage.input_tokens * usage.cache_hit_ratio
        cache_misses = usage.input_tokens * (1 - usage.cache_hit_ratio)

        cache_hit_cost = (cache_hits / TOKENS_PER_MILLION) * input_price * multipliers.cache_read
        cache_miss_cost = (cache_misses / TOKENS_PER_MILLION) * input_price * multipliers.cache_write_5min

        original_input_cost = input_cost
        input_cost = cache_hit_cost + cache_miss_cost
        delta = original_input_cost - input_cost
        if delta >= 0:
            cache_discount = delta
        else:
            cache_write_premium = -delta

    pre_batch_cost = input_cost + output_cost
    final_cost = pre_batch_cost

    batch_discount = 0.0
    if usage.use_batch:
        final_cost = pre_batch_cost * multipliers.batch_discount
        batch_discount = pre_batch_cost - final_cost
        input_cost = input_cost * multipliers.batch_discount
        output_cost = output_cost * multipliers.batch_discount

    long_context_premium = 0.0
    if usage.long_context:
        long_context_premium = (input_price - model.pricing.input) * (usage.input_tokens / TOKENS_PER_MILLION)

    return CostResult(
        model=model.name,
        input_tokens=usage.input_tokens,
        output_tokens=usage.output_tokens,
        thinking_tokens=usage.thinking_tokens,
        total_output_tokens=total_output_tokens,
        base_cost=base_cost,
        cache_discount=cache_discount,
        cache_write_premium=cache_write_premium,
        batch_discount=batch_discount,
        long_context_premium=long_context_premium,
        final_cost=max(final_cost, 0.0),
        breakdown=CostBreakdown(input_cost=input_cost, output_cost=output_cost),
    )


def calculate_cost(model_key: str, usage: UsageProfile) -> CostResult:
    """
    Calculate the cost of a request for a catalogue model.

    Raises:
        UnknownModelError: If the model key is not in the catalogue
    """
    return calculate_model_cost(get_model(model_key), usage)

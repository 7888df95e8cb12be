"""
Claude 4.5 model catalogue.

Each model has fixed specifications, limits and per-million-token pricing (USD).
Entries are frozen and exposed through a read-only mapping keyed by model key.
"""
from dataclasses import asdict, dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional


class ModelTier(str, Enum):
    """Position of a model in the lineup."""
    FLAGSHIP = "flagship"
    BALANCED = "balanced"
    FAST = "fast"


class ModelKey(str, Enum):
    """Known model keys."""
    OPUS_4_5 = "opus_4_5"
    SONNET_4_5 = "sonnet_4_5"
    HAIKU_4_5 = "haiku_4_5"


class UnknownModelError(LookupError):
    """Requested model key is not in the catalogue."""
    def __init__(self, model_key: str):
        self.model_key = model_key
        super().__init__(f"Model '{model_key}' not found")


@dataclass(frozen=True)
class PricingTable:
    """
    Pricing for a single model.
    All prices are in USD per 1M tokens.
    """
    input: float
    output: float
    cache_write_5min: float
    cache_write_1hr: float
    cache_read: float

    # Only models with a 1M context window price requests above 200K differently
    long_context_input: Optional[float] = None
    long_context_output: Optional[float] = None

    batch_discount: float = 0.5

    @property
    def has_long_context_pricing(self) -> bool:
        return self.long_context_input is not None and self.long_context_output is not None

    @property
    def batch_discount_label(self) -> str:
        return f"{round(self.batch_discount * 100)}%"

    def to_dict(self) -> dict:
        data = asdict(self)
        data["batch_discount"] = self.batch_discount_label
        return data


@dataclass(frozen=True)
class ModelEntry:
    """Specification of a Claude model."""
    key: str
    name: str
    api_id: str
    alias: str
    tier: ModelTier
    release_date: str
    knowledge_cutoff: str
    context_window: int
    max_output: int
    pricing: PricingTable
    features: tuple = ()
    context_window_extended: Optional[int] = None

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "api_id": self.api_id,
            "alias": self.alias,
            "tier": self.tier.value,
            "release_date": self.release_date,
            "knowledge_cutoff": self.knowledge_cutoff,
            "context_window": self.context_window,
            "context_window_extended": self.context_window_extended,
            "max_output": self.max_output,
            "pricing": self.pricing.to_dict(),
            "features": list(self.features),
        }


_MODELS = (
    ModelEntry(
        key=ModelKey.OPUS_4_5.value,
        name="Claude Opus 4.5",
        api_id="claude-opus-4-5-20251101",
        alias="claude-opus-4-5",
        tier=ModelTier.FLAGSHIP,
        release_date="2025-11-24",
        knowledge_cutoff="March 2025",
        context_window=200_000,
        max_output=64_000,
        pricing=PricingTable(
            input=5.00,
            output=25.00,
            cache_write_5min=6.25,
            cache_write_1hr=10.00,
            cache_read=0.50,
        ),
        features=(
            "Extended thinking (preserved across turns by default)",
            "Effort parameter (low/medium/high)",
            "Computer use + zoom tool",
            "Context awareness",
            "Vision (images, PDFs, spreadsheets)",
            "Best-in-class coding (80.9% SWE-bench Verified)",
            "Memory tool for persistent state",
            "Context compaction",
        ),
    ),
    ModelEntry(
        key=ModelKey.SONNET_4_5.value,
        name="Claude Sonnet 4.5",
        api_id="claude-sonnet-4-5-20250929",
        alias="claude-sonnet-4-5",
        tier=ModelTier.BALANCED,
        release_date="2025-09-29",
        knowledge_cutoff="January 2025",
        context_window=200_000,
        context_window_extended=1_000_000,
        max_output=64_000,
        pricing=PricingTable(
            input=3.00,
            output=15.00,
            cache_write_5min=3.75,
            cache_write_1hr=6.00,
            cache_read=0.30,
            long_context_input=6.00,
            long_context_output=22.50,
        ),
        features=(
            "Extended thinking",
            "1M context window (beta, tier 4+)",
            "Computer use",
            "Context awareness",
            "Vision",
            "77.2% SWE-bench Verified",
            "Best balance of speed/cost/quality",
        ),
    ),
    ModelEntry(
        key=ModelKey.HAIKU_4_5.value,
        name="Claude Haiku 4.5",
        api_id="claude-haiku-4-5-20251001",
        alias="claude-haiku-4-5",
        tier=ModelTier.FAST,
        release_date="2025-10-15",
        knowledge_cutoff="February 2025",
        context_window=200_000,
        max_output=64_000,
        pricing=PricingTable(
            input=1.00,
            output=5.00,
            cache_write_5min=1.25,
            cache_write_1hr=2.00,
            cache_read=0.10,
        ),
        features=(
            "Extended thinking",
            "Computer use",
            "Context awareness",
            "Vision",
            "73.3% SWE-bench Verified",
            "4-5x faster than Sonnet 4.5",
            "Best for high-volume, latency-sensitive tasks",
        ),
    ),
)

# Insertion order is the catalogue order used for listings and search ties
CLAUDE_MODELS = MappingProxyType({m.key: m for m in _MODELS})

MODEL_KEYS = tuple(CLAUDE_MODELS)


def get_model(model_key: str) -> ModelEntry:
    """
    Look up a model by key.

    Raises:
        UnknownModelError: If the key is not in the catalogue
    """
    if isinstance(model_key, Enum):
        model_key = model_key.value
    try:
        return CLAUDE_MODELS[model_key]
    except KeyError:
        raise UnknownModelError(model_key) from None


def models_for(model_key: str) -> list[ModelEntry]:
    """
    Resolve a key or 'all' to a list of entries.

    Returns an empty list for unknown keys.
    """
    if isinstance(model_key, Enum):
        model_key = model_key.value
    if model_key == "all":
        return list(CLAUDE_MODELS.values())
    model = CLAUDE_MODELS.get(model_key)
    return [model] if model else []

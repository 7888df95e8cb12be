"""
Read-only reference data for Claude 4.5 models.

Built once at import time; nothing here is mutated afterwards.
"""
from anthropic_docs.catalogue.guidance import (
    API_MODES,
    BEST_PRACTICE_TOPICS,
    BEST_PRACTICES,
    BETA_HEADERS,
    DOC_URLS,
    EFFORT_LEVELS,
    THINKING_CONFIG,
)
from anthropic_docs.catalogue.models import (
    CLAUDE_MODELS,
    MODEL_KEYS,
    ModelEntry,
    ModelKey,
    ModelTier,
    PricingTable,
    UnknownModelError,
    get_model,
    models_for,
)
from anthropic_docs.catalogue.pricing import CONTEXT_LIMITS, PRICING_MULTIPLIERS

__all__ = [
    "API_MODES",
    "BEST_PRACTICE_TOPICS",
    "BEST_PRACTICES",
    "BETA_HEADERS",
    "CLAUDE_MODELS",
    "CONTEXT_LIMITS",
    "DOC_URLS",
    "EFFORT_LEVELS",
    "MODEL_KEYS",
    "ModelEntry",
    "ModelKey",
    "ModelTier",
    "PRICING_MULTIPLIERS",
    "PricingTable",
    "THINKING_CONFIG",
    "UnknownModelError",
    "get_model",
    "models_for",
]

"""
JSON rendering of catalogue sections and computed results.
"""
import json

from anthropic_docs.catalogue import (
    API_MODES,
    BEST_PRACTICES,
    BETA_HEADERS,
    CLAUDE_MODELS,
    CONTEXT_LIMITS,
    DOC_URLS,
    EFFORT_LEVELS,
    PRICING_MULTIPLIERS,
    THINKING_CONFIG,
    ModelEntry,
)


def dumps(data) -> str:
    return json.dumps(data, indent=2)


def _effort_levels() -> dict:
    return {key: level.to_dict() for key, level in EFFORT_LEVELS.items()}


def render_model(model: ModelEntry) -> str:
    return dumps(model.to_dict())


def render_models(models: list[ModelEntry]) -> str:
    return dumps({m.key: m.to_dict() for m in models})


def render_pricing(models: list[ModelEntry], include_discounts: bool) -> str:
    pricing = {}
    for model in models:
        entry = {"model": model.name, "pricing": model.pricing.to_dict()}
        if include_discounts:
            entry["multipliers"] = PRICING_MULTIPLIERS.to_dict()
        pricing[model.key] = entry
    return dumps(pricing)


def render_token_limits(models: list[ModelEntry]) -> str:
    return dumps({
        "models": {
            m.key: {
                "context_window": m.context_window,
                "context_window_extended": m.context_window_extended,
                "max_output": m.max_output,
            }
            for m in models
        },
        "limits": CONTEXT_LIMITS.to_dict(),
        "thinking": {
            "min_budget": THINKING_CONFIG.min_budget,
            "recommended_start": THINKING_CONFIG.recommended_start,
            "large_budget_threshold": THINKING_CONFIG.large_budget_threshold,
        },
    })


def render_thinking_config(include_rules: bool = True, include_api_modes: bool = True) -> str:
    config = THINKING_CONFIG.to_dict()
    if not include_rules:
        config.pop("rules")
    data = {"config": config}
    if include_api_modes:
        data["api_modes"] = [mode.to_dict() for mode in API_MODES]
    data["effort_levels"] = _effort_levels()
    return dumps(data)


def render_beta_headers() -> str:
    return dumps([header.to_dict() for header in BETA_HEADERS])


def render_cost(result) -> str:
    return dumps(result.to_dict())


def render_best_practices(topics: list[str]) -> str:
    return dumps({topic: list(BEST_PRACTICES[topic]) for topic in topics})


def render_search(response) -> str:
    """Render a SearchResponse with every match."""
    return dumps(response.to_dict())


def render_full_docs() -> str:
    return dumps({
        "models": {key: m.to_dict() for key, m in CLAUDE_MODELS.items()},
        "thinking": THINKING_CONFIG.to_dict(),
        "beta_headers": [h.to_dict() for h in BETA_HEADERS],
        "api_modes": [mode.to_dict() for mode in API_MODES],
        "pricing_multipliers": PRICING_MULTIPLIERS.to_dict(),
        "context_limits": CONTEXT_LIMITS.to_dict(),
        "effort_levels": _effort_levels(),
        "best_practices": {topic: list(items) for topic, items in BEST_PRACTICES.items()},
        "doc_urls": dict(DOC_URLS),
    })

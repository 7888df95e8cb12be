"""
Documentation query operations.

Each operation takes plain, already-validated arguments and returns the
rendered text (markdown or JSON). Unknown model keys produce an error
message instead of raising, so a bad lookup never fails the caller.
"""
import logging

from anthropic_docs.catalogue import (
    BEST_PRACTICE_TOPICS,
    MODEL_KEYS,
    UnknownModelError,
    get_model,
    models_for,
)
from anthropic_docs.rendering import ResponseFormat, markdown, structured
from anthropic_docs.services.cost_calculator import UsageProfile, calculate_cost as compute_cost
from anthropic_docs.services.search_service import search_docs as run_search

logger = logging.getLogger(__name__)


def _renderer(response_format: str):
    return structured if ResponseFormat(response_format) == ResponseFormat.JSON else markdown


def model_not_found(model_key: str, list_available: bool = False) -> str:
    """Error text returned in place of a result for unknown model keys."""
    message = f"Error: Model '{model_key}' not found."
    if list_available:
        message = f"Error: Model '{model_key}' not found. Available: {', '.join(MODEL_KEYS)}"
    return message


def get_model_info(model: str = "all", response_format: str = "markdown") -> str:
    renderer = _renderer(response_format)
    if model == "all":
        return renderer.render_models(models_for("all"))

    try:
        entry = get_model(model)
    except UnknownModelError:
        logger.warning(f"Model info requested for unknown model {model}", extra={"model": model})
        return model_not_found(model, list_available=True)

    return renderer.render_model(entry)


def get_pricing(model: str = "all", include_discounts: bool = True, response_format: str = "markdown") -> str:
    models = models_for(model)
    if not models:
        logger.warning(f"Pricing requested for unknown model {model}", extra={"model": model})
        return model_not_found(model)
    return _renderer(response_format).render_pricing(models, include_discounts)


def get_token_limits(model: str = "all", response_format: str = "markdown") -> str:
    models = models_for(model)
    if not models:
        logger.warning(f"Token limits requested for unknown model {model}", extra={"model": model})
        return model_not_found(model)
    return _renderer(response_format).render_token_limits(models)


def get_thinking_config(
    include_rules: bool = True,
    include_api_modes: bool = True,
    response_format: str = "markdown",
) -> str:
    return _renderer(response_format).render_thinking_config(include_rules, include_api_modes)


def get_beta_headers(response_format: str = "markdown") -> str:
    return _renderer(response_format).render_beta_headers()


def calculate_cost(
    model: str,
    input_tokens: int,
    output_tokens: int,
    thinking_tokens: int = 0,
    use_cache: bool = False,
    cache_hit_ratio: float = 0.9,
    use_batch: bool = False,
    long_context: bool = False,
    response_format: str = "markdown",
) -> str:
    """
    Calculate and render the cost of a request.

    Returns:
        Rendered CostResult, or an error message for unknown models
    """
    usage = UsageProfile(
        input_tokens=input_tokens,
        output_tokens=output_tokens,
        thinking_tokens=thinking_tokens,
        use_cache=use_cache,
        cache_hit_ratio=cache_hit_ratio,
        use_batch=use_batch,
        long_context=long_context,
    )
    try:
        result = compute_cost(model, usage)
    except UnknownModelError:
        logger.warning(f"Cost requested for unknown model {model}", extra={"model": model})
        return model_not_found(model)

    return _renderer(response_format).render_cost(result)


def get_best_practices(topic: str = "all", response_format: str = "markdown") -> str:
    if topic != "all" and topic not in BEST_PRACTICE_TOPICS:
        return f"Error: Topic '{topic}' not found. Available: {', '.join(BEST_PRACTICE_TOPICS)}, all"
    topics = list(BEST_PRACTICE_TOPICS) if topic == "all" else [topic]
    return _renderer(response_format).render_best_practices(topics)


def search_docs(query: str, response_format: str = "markdown") -> str:
    response = run_search(query)
    logger.debug(
        f"Search for {query!r} returned {len(response.results)} result(s)",
        extra={"query": query, "result_count": len(response.results)},
    )
    return _renderer(response_format).render_search(response)


def get_full_docs(response_format: str = "markdown") -> str:
    if ResponseFormat(response_format) == ResponseFormat.JSON:
        return structured.render_full_docs()
    return markdown.render_full_docs(models_for("all"))

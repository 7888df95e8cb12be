"""
Tool registry.

Maps each documentation tool to its input schema, handler and metadata.
Transports (HTTP, JSON-RPC, CLI) look tools up here and call them with
raw argument dicts.
"""
import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Callable, Mapping, Type

from anthropic_docs import schemas
from anthropic_docs.config import settings
from anthropic_docs.services import docs_service

logger = logging.getLogger(__name__)

READ_ONLY_ANNOTATIONS = MappingProxyType({
    "readOnlyHint": True,
    "destructiveHint": False,
    "idempotentHint": True,
    "openWorldHint": False,
})


class UnknownToolError(LookupError):
    """Requested tool is not registered."""
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown tool: {name}")


@dataclass(frozen=True)
class Tool:
    name: str
    title: str
    description: str
    input_model: Type[schemas.ToolInput]
    handler: Callable[..., str]
    annotations: Mapping = field(default_factory=lambda: READ_ONLY_ANNOTATIONS)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "title": self.title,
            "description": self.description,
            "inputSchema": self.input_model.model_json_schema(),
            "annotations": dict(self.annotations),
        }

    def call(self, arguments: dict) -> str:
        """
        Validate arguments and run the tool.

        Raises:
            pydantic.ValidationError: If arguments do not match the input schema
        """
        params = self.input_model.model_validate(arguments or {})
        return truncate(self.handler(params), settings.CHARACTER_LIMIT)


def truncate(text: str, limit: int) -> str:
    """Cut text at limit characters and say so."""
    if len(text) <= limit:
        return text
    logger.warning(
        f"Response truncated from {len(text)} to {limit} characters",
        extra={"length": len(text), "limit": limit},
    )
    return text[:limit] + f"\n\n[Response truncated at {limit:,} characters]"


def _fmt(params: schemas.ToolInput) -> str:
    return params.response_format.value


_TOOLS = (
    Tool(
        name="anthropic_get_model_info",
        title="Get Claude Model Information",
        description="""Get detailed information about Claude 4.5 models including specifications, features, and capabilities.

Available models:
- opus_4_5: Flagship model, best for complex reasoning and coding
- sonnet_4_5: Balanced model, best value for most use cases
- haiku_4_5: Fast model, best for high-volume tasks

Examples:
- Get Opus 4.5 specs: model="opus_4_5"
- Get all models: model="all\"""",
        input_model=schemas.GetModelInfoInput,
        handler=lambda p: docs_service.get_model_info(p.model, _fmt(p)),
    ),
    Tool(
        name="anthropic_get_pricing",
        title="Get Claude Pricing",
        description="""Get pricing information for Claude 4.5 models.

Includes base input/output pricing, cache pricing (5min and 1hr durations),
batch API discounts and long context pricing (>200K tokens).
All prices in USD per million tokens (MTok).""",
        input_model=schemas.GetPricingInput,
        handler=lambda p: docs_service.get_pricing(p.model, p.include_discounts, _fmt(p)),
    ),
    Tool(
        name="anthropic_get_token_limits",
        title="Get Token Limits",
        description="""Get context window and output token limits for Claude 4.5 models.

Key limits: 200K standard context, 1M extended context (Sonnet only, beta),
64K max output, 1,024 minimum thinking budget.""",
        input_model=schemas.GetTokenLimitsInput,
        handler=lambda p: docs_service.get_token_limits(p.model, _fmt(p)),
    ),
    Tool(
        name="anthropic_get_thinking_config",
        title="Get Extended Thinking Configuration",
        description="""Get configuration details for Claude's extended thinking feature.

Includes budget token limits, rules for budget_tokens vs max_tokens,
API modes (Standard, Thinking, Interleaved) and effort levels.
Thinking tokens are billed as OUTPUT tokens.""",
        input_model=schemas.GetThinkingConfigInput,
        handler=lambda p: docs_service.get_thinking_config(p.include_rules, p.include_api_modes, _fmt(p)),
    ),
    Tool(
        name="anthropic_get_beta_headers",
        title="Get Beta Headers",
        description="""Get information about available beta headers for Claude API.

Includes usage examples and when each header is required.""",
        input_model=schemas.GetBetaHeadersInput,
        handler=lambda p: docs_service.get_beta_headers(_fmt(p)),
    ),
    Tool(
        name="anthropic_search_docs",
        title="Search Documentation",
        description="""Search Claude 4.5 documentation for specific topics.

Examples:
- Find pricing: query="pricing"
- Find thinking config: query="budget tokens"
- Find Opus features: query="opus 4.5\"""",
        input_model=schemas.SearchDocsInput,
        handler=lambda p: docs_service.search_docs(p.query, _fmt(p)),
    ),
    Tool(
        name="anthropic_calculate_cost",
        title="Calculate API Cost",
        description="""Calculate the cost for a Claude API request.

Factors: input and output tokens, thinking tokens (counted as output),
prompt caching, batch API (50% discount) and long context premium pricing.

Examples:
- Basic: model="sonnet_4_5", input_tokens=10000, output_tokens=2000
- With thinking: thinking_tokens=5000 (adds to output)
- With cache: use_cache=true, cache_hit_ratio=0.9""",
        input_model=schemas.CalculateCostInput,
        handler=lambda p: docs_service.calculate_cost(
            p.model.value,
            p.input_tokens,
            p.output_tokens,
            p.thinking_tokens,
            p.use_cache,
            p.cache_hit_ratio,
            p.use_batch,
            p.long_context,
            _fmt(p),
        ),
    ),
    Tool(
        name="anthropic_get_best_practices",
        title="Get Best Practices",
        description="""Get best practices for using Claude 4.5 models.

Topics: thinking, model_selection, cost_optimization, context_management, all.""",
        input_model=schemas.GetBestPracticesInput,
        handler=lambda p: docs_service.get_best_practices(p.topic, _fmt(p)),
    ),
    Tool(
        name="anthropic_get_full_docs",
        title="Get Full Documentation",
        description="""Get the complete Claude 4.5 documentation in one response.

Includes all model specifications, pricing tables, token limits, extended
thinking config, beta headers, best practices and documentation URLs.""",
        input_model=schemas.GetFullDocsInput,
        handler=lambda p: docs_service.get_full_docs(_fmt(p)),
    ),
)

TOOLS = MappingProxyType({tool.name: tool for tool in _TOOLS})


def get_tool(name: str) -> Tool:
    """
    Look up a registered tool.

    Raises:
        UnknownToolError: If no tool has this name
    """
    if not isinstance(name, str) or name not in TOOLS:
        raise UnknownToolError(name)
    return TOOLS[name]


def call_tool(name: str, arguments: dict = None) -> str:
    """Validate arguments against the tool schema and return its text result."""
    tool = get_tool(name)
    logger.debug(f"Calling tool {name}", extra={"tool": name})
    return tool.call(arguments or {})

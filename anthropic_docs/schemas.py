"""
Input schemas for the documentation tools.

Validation and defaults happen here; the services trust these values.
"""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from anthropic_docs.catalogue import ModelKey
from anthropic_docs.rendering import ResponseFormat

ModelSelector = Literal["opus_4_5", "sonnet_4_5", "haiku_4_5", "all"]
PracticeTopic = Literal["thinking", "model_selection", "cost_optimization", "context_management", "all"]


class ToolInput(BaseModel):
    """Base for tool inputs. Unknown fields are rejected."""
    model_config = ConfigDict(extra="forbid")

    response_format: ResponseFormat = Field(
        ResponseFormat.MARKDOWN,
        description="Output format: 'markdown' for human-readable or 'json' for machine-readable",
    )


class GetModelInfoInput(ToolInput):
    model: ModelSelector = Field(
        "all",
        description="Model to get info for: opus_4_5, sonnet_4_5, haiku_4_5, or 'all' for all models",
    )


class GetPricingInput(ToolInput):
    model: ModelSelector = Field("all", description="Model to get pricing for")
    include_discounts: bool = Field(True, description="Include cache and batch discount information")


class GetTokenLimitsInput(ToolInput):
    model: ModelSelector = Field("all", description="Model to get token limits for")


class GetThinkingConfigInput(ToolInput):
    include_rules: bool = Field(True, description="Include detailed rules about thinking budget")
    include_api_modes: bool = Field(True, description="Include API mode comparisons")


class GetBetaHeadersInput(ToolInput):
    pass


class SearchDocsInput(ToolInput):
    query: str = Field(
        ...,
        min_length=2,
        max_length=200,
        description="Search query to find relevant documentation",
    )


class CalculateCostInput(ToolInput):
    model: ModelKey = Field(..., description="Model to calculate cost for")
    input_tokens: int = Field(..., ge=0, description="Number of input tokens")
    output_tokens: int = Field(..., ge=0, description="Number of output tokens")
    thinking_tokens: int = Field(0, ge=0, description="Number of thinking tokens (counted as output tokens)")
    use_cache: bool = Field(False, description="Whether using prompt caching")
    cache_hit_ratio: float = Field(0.9, ge=0, le=1, description="Ratio of cache hits (0-1)")
    use_batch: bool = Field(False, description="Whether using batch API (50% discount)")
    long_context: bool = Field(False, description="Whether using >200K context (premium pricing)")


class GetBestPracticesInput(ToolInput):
    topic: PracticeTopic = Field("all", description="Topic to get best practices for")


class GetFullDocsInput(ToolInput):
    pass

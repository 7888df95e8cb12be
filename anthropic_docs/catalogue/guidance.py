"""
Usage guidance: extended thinking, beta headers, API modes, effort levels,
best practices and documentation links.
"""
from dataclasses import asdict, dataclass
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True)
class ThinkingConfig:
    min_budget: int
    recommended_start: int
    large_budget_threshold: int
    max_with_interleaved: int
    rules: tuple = ()

    def to_dict(self) -> dict:
        data = asdict(self)
        data["rules"] = list(self.rules)
        return data


@dataclass(frozen=True)
class BetaHeader:
    name: str
    value: str
    purpose: str
    required_for: str
    models: Optional[tuple] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["models"] = list(self.models) if self.models else None
        return data


@dataclass(frozen=True)
class ApiMode:
    name: str
    function: str
    api_call: str
    max_output: int
    thinking_budget_rule: str
    description: str
    beta_headers: tuple = ()

    def to_dict(self) -> dict:
        data = asdict(self)
        data["beta_headers"] = list(self.beta_headers)
        return data


@dataclass(frozen=True)
class EffortLevel:
    name: str
    description: str
    token_usage: str

    def to_dict(self) -> dict:
        return asdict(self)


THINKING_CONFIG = ThinkingConfig(
    min_budget=1_024,
    recommended_start=16_000,
    large_budget_threshold=32_000,
    max_with_interleaved=200_000,
    rules=(
        "budget_tokens must be at least 1,024",
        "Standard mode: budget_tokens must be LESS than max_tokens",
        "Interleaved mode with tools: budget_tokens can EXCEED max_tokens (uses full context window)",
        "Thinking tokens are billed as OUTPUT tokens",
        "Previous thinking blocks are auto-stripped from context (except Opus 4.5 which preserves them by default)",
        "For budgets above 32K, use batch processing to avoid networking issues",
        "Opus 4.5 preserves thinking blocks across turns for better multi-step reasoning",
    ),
)

BETA_HEADERS = (
    BetaHeader(
        name="Interleaved Thinking",
        value="interleaved-thinking-2025-05-14",
        purpose="Enable thinking between tool calls",
        required_for="Extended thinking WITH tools (uses beta.messages.create)",
    ),
    BetaHeader(
        name="Context Management",
        value="context-management-2025-06-27",
        purpose="Auto-compaction when approaching context limits",
        required_for="Long-running agent sessions, automatic context management",
    ),
    BetaHeader(
        name="Long Context (1M)",
        value="context-1m-2025-08-07",
        purpose="Enable 1 million token context window",
        required_for="Processing very large documents or codebases",
        models=("claude-sonnet-4-5-20250929", "claude-sonnet-4-20250514"),
    ),
)

API_MODES = (
    ApiMode(
        name="Standard",
        function="chat()",
        api_call="anthropic.messages.create()",
        max_output=64_000,
        thinking_budget_rule="N/A - no thinking",
        description="Regular chat without extended thinking. Use for simple queries and conversations.",
    ),
    ApiMode(
        name="Extended Thinking",
        function="chat_with_thinking()",
        api_call="anthropic.messages.create()",
        max_output=64_000,
        thinking_budget_rule="budget_tokens < max_tokens",
        description="Extended thinking WITHOUT tools. NO beta headers needed. Model reasons before responding.",
    ),
    ApiMode(
        name="Interleaved Thinking",
        function="chat_with_interleaved_thinking()",
        api_call="anthropic.beta.messages.create()",
        beta_headers=("interleaved-thinking-2025-05-14",),
        max_output=64_000,
        thinking_budget_rule="budget_tokens can exceed max_tokens (uses full 200K context)",
        description="Thinking BETWEEN tool calls. REQUIRES beta headers. Best for complex agentic workflows.",
    ),
)

# Opus 4.5 only
EFFORT_LEVELS = MappingProxyType({
    "low": EffortLevel(
        name="Low",
        description="Fast, minimal thinking. Good for simple tasks or high-volume automation.",
        token_usage="Lowest",
    ),
    "medium": EffortLevel(
        name="Medium",
        description="Balanced. Matches Sonnet 4.5's peak performance while using 76% fewer output tokens than High.",
        token_usage="Moderate",
    ),
    "high": EffortLevel(
        name="High",
        description="Default. Exhaustive reasoning. Best for complex problems requiring deep analysis.",
        token_usage="Highest",
    ),
})

# Format: {topic: (practice, ...)}
BEST_PRACTICES = MappingProxyType({
    "thinking": (
        "Start with 16K tokens and increase incrementally",
        "For budgets above 32K, use batch processing",
        "Monitor actual usage vs. budget to optimize costs",
        "Thinking tokens count as OUTPUT tokens for billing",
    ),
    "model_selection": (
        "Opus 4.5: Complex reasoning, coding, agents, highest quality",
        "Sonnet 4.5: Best balance of speed/cost/quality for most use cases",
        "Haiku 4.5: High-volume, latency-sensitive, cost-optimized tasks",
    ),
    "cost_optimization": (
        "Use prompt caching (90% savings on cache reads)",
        "Use batch API (50% discount on all tokens)",
        "Start with lower effort levels and escalate as needed",
        "Use Haiku for sub-agents and parallelized tasks",
    ),
    "context_management": (
        "Enable context-management beta header for long sessions",
        "Previous thinking blocks are auto-stripped (saves context)",
        "Opus 4.5 preserves thinking blocks by default (better continuity)",
        "Monitor context usage in long conversations",
    ),
})

BEST_PRACTICE_TOPICS = tuple(BEST_PRACTICES)

DOC_URLS = MappingProxyType({
    "models": "https://docs.anthropic.com/en/docs/about-claude/models",
    "pricing": "https://docs.anthropic.com/en/docs/about-claude/pricing",
    "extended_thinking": "https://docs.anthropic.com/en/docs/build-with-claude/extended-thinking",
    "context_windows": "https://docs.anthropic.com/en/docs/build-with-claude/context-windows",
    "computer_use": "https://docs.anthropic.com/en/docs/build-with-claude/computer-use",
    "prompt_caching": "https://docs.anthropic.com/en/docs/build-with-claude/prompt-caching",
    "batch_api": "https://docs.anthropic.com/en/docs/build-with-claude/batch-api",
})

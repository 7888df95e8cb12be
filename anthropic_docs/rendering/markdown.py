"""
Markdown rendering of catalogue sections and computed results.
"""
from anthropic_docs.catalogue import (
    API_MODES,
    BEST_PRACTICES,
    BETA_HEADERS,
    DOC_URLS,
    EFFORT_LEVELS,
    PRICING_MULTIPLIERS,
    THINKING_CONFIG,
    ModelEntry,
)

SECTION_SEPARATOR = "\n\n---\n\n"
SEARCH_RESULT_LIMIT = 3


def _tokens(count: int) -> str:
    return f"{count:,}"


def _kilo(count: int) -> str:
    return f"{count // 1000:,}K"


def _title(topic: str) -> str:
    return topic.replace("_", " ").title()


def render_model(model: ModelEntry) -> str:
    pricing = model.pricing
    lines = [
        f"## {model.name}",
        "",
        f"**API ID:** `{model.api_id}`",
        f"**Alias:** `{model.alias}`",
        f"**Tier:** {model.tier.value}",
        f"**Release Date:** {model.release_date}",
        f"**Knowledge Cutoff:** {model.knowledge_cutoff}",
        "",
        "### Token Limits",
        f"- **Context Window:** {_tokens(model.context_window)} tokens",
    ]
    if model.context_window_extended:
        lines.append(f"- **Extended Context (beta):** {_tokens(model.context_window_extended)} tokens")
    lines += [
        f"- **Max Output:** {_tokens(model.max_output)} tokens",
        "",
        "### Pricing (per million tokens)",
        f"- **Input:** ${pricing.input:.2f}",
        f"- **Output:** ${pricing.output:.2f}",
    ]
    if pricing.long_context_input:
        lines.append(f"- **Long Context Input (>200K):** ${pricing.long_context_input:.2f}")
    if pricing.long_context_output:
        lines.append(f"- **Long Context Output (>200K):** ${pricing.long_context_output:.2f}")
    lines += [
        f"- **Batch Discount:** {pricing.batch_discount_label}",
        "",
        "### Features",
    ]
    lines += [f"- {feature}" for feature in model.features]
    return "\n".join(lines)


def render_models(models: list[ModelEntry]) -> str:
    return SECTION_SEPARATOR.join(render_model(m) for m in models)


def render_pricing(models: list[ModelEntry], include_discounts: bool) -> str:
    md = "# Claude 4.5 Pricing\n\n"
    md += "| Model | Input ($/MTok) | Output ($/MTok) | Batch Discount |\n"
    md += "|-------|----------------|-----------------|----------------|\n"

    for model in models:
        p = model.pricing
        md += f"| {model.name} | ${p.input:.2f} | ${p.output:.2f} | {p.batch_discount_label} |\n"

    if include_discounts:
        m = PRICING_MULTIPLIERS
        md += "\n## Discount Multipliers\n\n"
        md += f"- **Cache Write (5min):** {m.cache_write_5min}x base input\n"
        md += f"- **Cache Write (1hr):** {m.cache_write_1hr}x base input\n"
        md += f"- **Cache Read:** {m.cache_read}x base input (90% savings)\n"
        md += f"- **Batch API:** {m.batch_discount}x all tokens (50% savings)\n"
        md += f"- **Long Context Input (>200K):** {m.long_context_input}x input\n"
        md += f"- **Long Context Output (>200K):** {m.long_context_output}x output\n"

    return md


def _thinking_limits() -> str:
    t = THINKING_CONFIG
    md = f"- **Minimum:** {_tokens(t.min_budget)} tokens\n"
    md += f"- **Recommended Start:** {_tokens(t.recommended_start)} tokens\n"
    md += f"- **Large Budget Threshold:** {_tokens(t.large_budget_threshold)} tokens (use batch processing above this)\n"
    md += f"- **Max with Interleaved:** {_tokens(t.max_with_interleaved)} tokens (full context window)\n"
    return md


def render_token_limits(models: list[ModelEntry]) -> str:
    md = "# Token Limits\n\n"
    md += "| Model | Context Window | Extended Context | Max Output |\n"
    md += "|-------|----------------|------------------|------------|\n"

    for model in models:
        extended = f"{_kilo(model.context_window_extended)} (beta)" if model.context_window_extended else "N/A"
        md += f"| {model.name} | {_kilo(model.context_window)} | {extended} | {_kilo(model.max_output)} |\n"

    md += "\n## Thinking Budget Limits\n\n"
    md += _thinking_limits()
    return md


def render_thinking_config(include_rules: bool = True, include_api_modes: bool = True) -> str:
    t = THINKING_CONFIG
    md = "# Extended Thinking Configuration\n\n"

    md += "## Budget Limits\n\n"
    md += f"- **Minimum budget_tokens:** {_tokens(t.min_budget)}\n"
    md += f"- **Recommended start:** {_tokens(t.recommended_start)}\n"
    md += f"- **Large budget threshold:** {_tokens(t.large_budget_threshold)} (use batch processing)\n"
    md += f"- **Max with interleaved thinking:** {_tokens(t.max_with_interleaved)} (full context window)\n"

    if include_rules:
        md += "\n## Rules\n\n"
        for rule in t.rules:
            md += f"- {rule}\n"

    if include_api_modes:
        md += "\n## API Modes\n\n"
        md += "| Mode | API Call | Beta Headers | Budget Rule |\n"
        md += "|------|----------|--------------|-------------|\n"
        for mode in API_MODES:
            headers = ", ".join(mode.beta_headers) if mode.beta_headers else "None"
            md += f"| {mode.name} | `{mode.api_call}` | {headers} | {mode.thinking_budget_rule} |\n"

    md += "\n## Effort Levels (Opus 4.5 only)\n\n"
    for level in EFFORT_LEVELS.values():
        md += f"### {level.name}\n"
        md += f"- **Token Usage:** {level.token_usage}\n"
        md += f"- **Description:** {level.description}\n\n"

    return md


_BETA_USAGE_EXAMPLE = """## Usage Examples

```python
# Interleaved thinking with tools
response = client.beta.messages.create(
    model="claude-sonnet-4-5-20250929",
    betas=["interleaved-thinking-2025-05-14"],
    thinking={"type": "enabled", "budget_tokens": 32000},
    tools=[...],
    # ...
)

# 1M context (Sonnet only)
response = client.beta.messages.create(
    model="claude-sonnet-4-5-20250929",
    betas=["context-1m-2025-08-07"],
    # ...
)
```
"""


def render_beta_headers() -> str:
    md = "# Beta Headers\n\n"
    md += "| Name | Value | Purpose | Required For |\n"
    md += "|------|-------|---------|---------------|\n"

    for header in BETA_HEADERS:
        models = f" ({', '.join(header.models)})" if header.models else ""
        md += f"| {header.name} | `{header.value}` | {header.purpose} | {header.required_for}{models} |\n"

    md += "\n" + _BETA_USAGE_EXAMPLE
    return md


def render_cost(result) -> str:
    """Render a CostResult. Savings and premium lines appear only when non-zero."""
    md = f"# Cost Calculation: {result.model}\n\n"
    md += "## Tokens\n"
    md += f"- **Input:** {_tokens(result.input_tokens)}\n"
    md += f"- **Output:** {_tokens(result.output_tokens)}\n"
    md += f"- **Thinking:** {_tokens(result.thinking_tokens)}\n"
    md += f"- **Total Output (output + thinking):** {_tokens(result.total_output_tokens)}\n\n"

    md += "## Cost Breakdown\n"
    md += f"- **Input Cost:** ${result.breakdown.input_cost:.6f}\n"
    md += f"- **Output Cost:** ${result.breakdown.output_cost:.6f}\n"

    if result.cache_discount > 0:
        md += f"- **Cache Savings:** -${result.cache_discount:.6f}\n"
    if result.cache_write_premium > 0:
        md += f"- **Cache Write Premium:** +${result.cache_write_premium:.6f}\n"
    if result.batch_discount > 0:
        md += f"- **Batch Savings:** -${result.batch_discount:.6f}\n"
    if result.long_context_premium > 0:
        md += f"- **Long Context Premium:** +${result.long_context_premium:.6f}\n"

    md += f"\n## Final Cost: **${result.final_cost:.6f}**\n"
    return md


def render_best_practices(topics: list[str]) -> str:
    md = "# Best Practices\n\n"
    for topic in topics:
        md += f"## {_title(topic)}\n\n"
        for practice in BEST_PRACTICES[topic]:
            md += f"- {practice}\n"
        md += "\n"
    return md


def render_search(response) -> str:
    """Render a SearchResponse, showing at most the top three sections."""
    if not response.results:
        return (
            f'No results found for: "{response.query}"\n\n'
            f"Try searching for: {', '.join(response.suggestions)}"
        )

    md = f'# Search Results for: "{response.query}"\n\n'
    md += f"Found {len(response.results)} result(s)\n\n"

    for result in response.results[:SEARCH_RESULT_LIMIT]:
        md += f"---\n\n## {result.section}\n\n"
        md += result.content + "\n\n"

    return md


def render_doc_urls() -> str:
    md = "# Documentation URLs\n\n"
    for key, url in DOC_URLS.items():
        md += f"- **{key}:** {url}\n"
    return md


def render_full_docs(models: list[ModelEntry]) -> str:
    sections = [
        "# Claude 4.5 Complete Documentation\n\n*Last Updated: January 2026*",
        render_models(models),
        render_pricing(models, include_discounts=True),
        render_token_limits(models),
        render_thinking_config(),
        render_beta_headers(),
        render_best_practices(list(BEST_PRACTICES)),
        render_doc_urls(),
    ]
    return SECTION_SEPARATOR.join(sections)

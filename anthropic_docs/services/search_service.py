"""
Keyword relevance search over the documentation catalogue.

Matching is plain substring containment on the lower-cased query. Each
matching group contributes one whole rendered section, not an excerpt.
"""
from dataclasses import dataclass, field
from typing import Callable

from anthropic_docs.catalogue import CLAUDE_MODELS
from anthropic_docs.rendering import markdown

MODEL_NAME_RELEVANCE = 1.0
MODEL_DETAIL_RELEVANCE = 0.7

SEARCH_SUGGESTIONS = ("models", "pricing", "tokens", "thinking", "beta headers")


@dataclass(frozen=True)
class SearchTopic:
    """A fixed documentation section matched by keywords in the query."""
    section: str
    keywords: tuple
    relevance: float
    render: Callable[[], str]

    def matches(self, query: str) -> bool:
        return any(keyword in query for keyword in self.keywords)


@dataclass
class SearchResult:
    section: str
    content: str
    relevance: float

    def to_dict(self) -> dict:
        return {"section": self.section, "content": self.content, "relevance": self.relevance}


@dataclass
class SearchResponse:
    query: str
    results: list = field(default_factory=list)

    @property
    def found(self) -> bool:
        return bool(self.results)

    @property
    def suggestions(self) -> tuple:
        return () if self.results else SEARCH_SUGGESTIONS

    def to_dict(self) -> dict:
        data = {"query": self.query, "results": [r.to_dict() for r in self.results]}
        if not self.results:
            data["message"] = "No results found"
            data["suggestions"] = list(SEARCH_SUGGESTIONS)
        return data


# Checked in this order after the models
SEARCH_TOPICS = (
    SearchTopic(
        section="Extended Thinking",
        keywords=("think", "budget", "reasoning"),
        relevance=0.9,
        render=lambda: markdown.render_thinking_config(include_rules=True, include_api_modes=True),
    ),
    SearchTopic(
        section="Pricing",
        keywords=("price", "pricing", "cost", "token", "$"),
        relevance=0.9,
        render=lambda: markdown.render_pricing(list(CLAUDE_MODELS.values()), include_discounts=True),
    ),
    SearchTopic(
        section="Beta Headers",
        keywords=("beta", "header", "interleaved", "1m", "context"),
        relevance=0.8,
        render=markdown.render_beta_headers,
    ),
)


def _search_models(query: str) -> list[SearchResult]:
    results = []
    for model in CLAUDE_MODELS.values():
        name_match = query in model.name.lower()
        if (
            name_match
            or query in model.api_id.lower()
            or any(query in feature.lower() for feature in model.features)
        ):
            results.append(SearchResult(
                section="Models",
                content=markdown.render_model(model),
                relevance=MODEL_NAME_RELEVANCE if name_match else MODEL_DETAIL_RELEVANCE,
            ))
    return results


def search_docs(query: str) -> SearchResponse:
    """
    Search models and documentation topics for a query.

    Returns:
        SearchResponse with results sorted by relevance (highest first).
        Ties keep catalogue order. An empty result list carries suggestions.
    """
    lower_query = query.lower()
    results = _search_models(lower_query)

    for topic in SEARCH_TOPICS:
        if topic.matches(lower_query):
            results.append(SearchResult(
                section=topic.section,
                content=topic.render(),
                relevance=topic.relevance,
            ))

    # sorted() is stable, so equal relevance keeps insertion order
    results = sorted(results, key=lambda r: r.relevance, reverse=True)
    return SearchResponse(query=query, results=results)

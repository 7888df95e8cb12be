"""
Service layer for the docs server.

Pure computations (cost, search) and the text-returning query operations
built on top of them.
"""
from anthropic_docs.services.cost_calculator import CostResult, UsageProfile, calculate_cost
from anthropic_docs.services.search_service import SearchResponse, SearchResult, search_docs

__all__ = [
    "CostResult",
    "SearchResponse",
    "SearchResult",
    "UsageProfile",
    "calculate_cost",
    "search_docs",
]

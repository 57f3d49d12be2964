"""Domain services - Stateless operations on domain objects."""

from .expiry_ranker import DEFAULT_LIMIT, ExpiryRanker, days_until

__all__ = ["DEFAULT_LIMIT", "ExpiryRanker", "days_until"]

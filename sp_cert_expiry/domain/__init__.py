"""Domain layer - Entities, value objects and the expiry ranker."""

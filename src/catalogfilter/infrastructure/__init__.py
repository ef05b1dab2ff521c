"""Infrastructure layer: filter predicates over catalog events."""

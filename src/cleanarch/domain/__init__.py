"""Domain layer: graph model, patterns, predicates, exceptions."""

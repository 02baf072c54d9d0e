"""Domain layer: resource documents, reconciliation rules and ports."""

"""Domain layer: order entities, ports and the reconciliation engine."""

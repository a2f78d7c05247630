"""Domain layer: note records, reconciliation and querying."""

"""Infrastructure layer: adapters, database lifecycle, logging."""

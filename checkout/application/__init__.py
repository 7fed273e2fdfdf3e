"""Application layer: DTOs and services."""

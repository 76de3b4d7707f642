"""Core services and cross-cutting concerns."""

"""Core services: settings and logging."""

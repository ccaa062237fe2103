"""Provider registry and request preparation."""

"""Infrastructure adapters for the definition guard.

Adapters implement the ports defined in the application layer,
providing concrete implementations for external tools.
"""

__all__: list[str] = []

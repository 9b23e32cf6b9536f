"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- loading/: Module loaders (importlib, in-memory)
- logging/: Structured console logging (structlog)
"""

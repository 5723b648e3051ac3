"""Infrastructure layer - Adapters and external integrations.

This layer contains implementations of domain protocols (ports):
- Order service (in-memory store)
- Fragment rendering (Jinja2)
- Structured logging (structlog)

Structure:
- persistence/: Order service adapters
- rendering/: Template rendering adapters
- logging/: Logger adapters

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""

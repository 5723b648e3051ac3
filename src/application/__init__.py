"""Application layer - Use cases and orchestration.

This layer contains the ajax command pipeline and the checkout use cases:
- ajax/: Request lifecycle, optional operations, response envelope, views
- commands/: Command dataclasses and ajax handlers (write operations)
- cqrs/: Command registry (single source of truth for routing and wiring)
- errors/: ApplicationError, SystemFault and the per-request ErrorAggregator
- services/: Lifecycle composition per request

The application layer orchestrates domain logic but contains no business rules.
"""

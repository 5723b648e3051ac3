"""Domain layer - Pure business logic.

This layer contains the checkout entities and the protocols (ports) the
application layer depends on. The domain layer has NO dependencies on any
framework or infrastructure - it is pure Python.

Structure:
- entities/: Domain entities (mutable, have identity)
- protocols/: Domain protocols (service interfaces, document and renderer ports)

The domain layer defines WHAT the business does, not HOW it's implemented.
"""

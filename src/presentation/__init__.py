"""Presentation layer - API endpoints and HTTP concerns.

This layer contains FastAPI routers, middleware and the RFC 7807 error
handlers. The presentation layer is thin - it parses request parameters,
dispatches ajax commands to the application layer and writes the envelope.

Structure:
- routers/api/v1/: API version 1 endpoints (ajax commands)
- routers/api/middleware/: Request tracing
- routers/system.py: Root, health and configuration endpoints

The presentation layer depends on the application layer but contains NO
business logic.
"""

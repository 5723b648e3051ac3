"""API tests package.

Drives the FastAPI app through TestClient:
- Ajax envelopes for validation, success and fault paths
- Problem details for unknown commands and unparseable bodies
- System endpoints and trace headers
"""

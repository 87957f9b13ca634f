"""API tests package.

End-to-end tests for the HTTP endpoints using TestClient against an
in-memory database, with outbound email captured in memory.
"""

"""Test suite for the credential service.

- unit/: handlers, validators and adapters in isolation (mocked ports)
- integration/: real bcrypt, PyJWT and SQLAlchemy against in-memory SQLite
- api/: HTTP round trips through the FastAPI app
"""

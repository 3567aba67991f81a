"""
Test suite for the Transaction Ledger API.

- Unit tests: validators, CSV parser, SQL builder, repository adapters, use cases
- API tests: in-process FastAPI app over the in-memory store
- Integration tests (-m integration): PostgreSQL and Alembic, need TEST_DATABASE_URL
"""

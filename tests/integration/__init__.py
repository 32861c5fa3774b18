"""
Integration tests that talk to a real PostgreSQL database.

Skipped unless TEST_DATABASE_URL is set, e.g.:
    TEST_DATABASE_URL=postgresql+asyncpg://localhost:5432/story_test pytest tests/integration -v
"""

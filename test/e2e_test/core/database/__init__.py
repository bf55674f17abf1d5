"""End-to-end tests for the league database layer on PostgreSQL.

The schema is built by the migrations inside a testcontainers PostgreSQL
instance; the tests are skipped unless ENABLE_POSTGRES_TESTS is set.
"""

"""Root conftest — shared test configuration."""

import os

# Ensure tests never reach for a real PostgreSQL server
os.environ.setdefault("PGHOST", "localhost")
os.environ.setdefault("PGUSER", "users_api_test")
os.environ.setdefault("PGDATABASE", "users_api_test")
os.environ.setdefault("LOG_FORMAT", "text")

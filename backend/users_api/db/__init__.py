"""Database Metadata — SQLAlchemy declarative Base for the users table layout."""

"""SQLAlchemy database adapters."""

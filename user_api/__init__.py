"""In-memory user CRUD service."""

__version__ = "1.0.0"

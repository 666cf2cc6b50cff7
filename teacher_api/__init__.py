"""Teacher records CRUD service."""

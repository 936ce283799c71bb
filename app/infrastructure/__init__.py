"""
Infrastructure layer package.

Concrete adapters for the ports defined in the domain layer:
SQLAlchemy Core repositories and password hashing.
"""

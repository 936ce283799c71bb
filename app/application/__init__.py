"""
Application layer package.

Use cases orchestrate domain ports and translate between DTOs and entities.
"""

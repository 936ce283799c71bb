"""
Board bounded context — domain layer.

This module contains all domain logic for the board context:
- Users and their server-side sessions
- Posts and the ownership guard
- The closed set of classified errors
"""

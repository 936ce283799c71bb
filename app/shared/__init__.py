"""
Shared module package.

Cross-cutting concerns used by every router:
- Error dispatch and localized messages
- Security headers and rate limiting
- Logging configuration
"""

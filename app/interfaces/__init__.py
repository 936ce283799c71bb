"""
Interfaces layer package.

Contains FastAPI routers, Pydantic request/response schemas,
and the request-credential dependency. No business logic belongs here.
Routes call use cases and return envelopes.
"""

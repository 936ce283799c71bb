"""
Board API — token-authenticated posts with centralized error mapping.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - board: Accounts, sessions and ownership-guarded posts.

Layers:
    - domain: Entities, ports (ABCs), the classified error taxonomy.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: SQLAlchemy adapters implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas, auth dependencies.
    - shared: Cross-cutting concerns (error dispatch, security, logging).
"""

"""
Book API — CRUD service for book records.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - books: List, fetch, create, update and delete book records.

Layers:
    - domain: Entities, the repository port (ABC), errors.
    - application: Use cases, one per operation.
    - infrastructure: Repository adapters (SQL, in-memory).
    - interfaces: FastAPI routers, Pydantic schemas, dependency wiring.
    - shared: Cross-cutting concerns (errors, security, logging).
"""

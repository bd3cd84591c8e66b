"""Infrastructure Layer — database access, logging, clock, and credential helpers.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All storage calls wrapped with rollback and error mapping

Design Decisions:
    - Thin wrappers over third-party clients (SQLAlchemy, bcrypt, PyJWT)
"""

"""Database Package — SQLAlchemy declarative base and shared column mixins.

Invariants:
    - All ORM models inherit from Base
    - Engine and session lifecycle live in infrastructure/database.py, not here
"""

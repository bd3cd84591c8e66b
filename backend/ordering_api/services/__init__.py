"""Services Layer — composite writes, order assembly, and account bootstrap.

Invariants:
    - Multi-row writes go through CompositeWriteCoordinator (one transaction each)
    - Services raise typed OrderingError subclasses; routes never catch them

Design Decisions:
    - One module per concern for locality
"""

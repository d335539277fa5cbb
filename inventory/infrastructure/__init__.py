"""Infrastructure Layer — persistence adapter and cross-cutting concerns.

Invariants:
    - Infrastructure implements core protocols; core never imports it
    - All SQLAlchemy errors mapped to DatabaseError before leaving this layer
"""

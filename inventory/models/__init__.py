"""ORM Models — SQLAlchemy declarative models for stored entities.

Invariants:
    - All models inherit from Base (db/base.py)

Design Decisions:
    - All models imported here so Base.metadata is populated before
      create_all or alembic autogenerate runs
"""

from inventory.models.device import Device  # noqa: F401

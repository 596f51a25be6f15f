"""ORM Models — SQLAlchemy declarative models for all domain entities.

Invariants:
    - All models inherit from Base (db/base.py)
    - Every model is imported here so Base.metadata is complete for
      create_all and alembic autogenerate
"""

from app.models.user import User  # noqa: F401

"""
dscommerce.db

Persistence package (SQLAlchemy).

Responsibilities:
- Provide ORM models, engine/session setup, and repositories that implement
  the lookups consumed by the auth and order cores.
"""

# Package marker.

"""
dscommerce.db.repositories

Repository package.

Responsibilities:
- Group data-access repositories for the persistence layer.
"""

# Package marker; repositories are imported directly from submodules.


# --- Module Notes -----------------------------------------------------------
# Repositories take a synchronous `Session` and return domain objects, never ORM
# rows. The async services reach them through `AsyncSession.run_sync`.

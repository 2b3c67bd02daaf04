"""
dscommerce.auth

Authentication/authorization package.

Responsibilities:
- Identity and role models.
- Role-row aggregation, principal resolution and the self-or-admin policy.
- JWT claim decoding and FastAPI auth dependencies.
"""

# Package marker.

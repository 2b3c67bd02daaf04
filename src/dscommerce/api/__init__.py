"""
dscommerce.api

HTTP layer (FastAPI).

Responsibilities:
- App factory, dependencies and routers.
- Translation of domain errors into HTTP responses.
"""

# Package marker.

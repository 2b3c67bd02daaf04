"""
dscommerce.orders

Order domain package.

Responsibilities:
- Read-only order models.
- Order total aggregation.
- The ownership gate in front of order retrieval.
"""

# Package marker.

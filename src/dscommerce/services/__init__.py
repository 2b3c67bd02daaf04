"""
dscommerce.services

Service layer: binds repositories to the auth/order cores per request session.
"""

# Package marker.

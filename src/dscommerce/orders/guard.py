"""
dscommerce.orders.guard

Ownership gate in front of order retrieval.

Responsibilities:
- Load the order, resolve the caller, apply the self-or-admin policy, in that
  fixed order.
- Return the order only when every step passes; failures propagate unchanged.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from dscommerce.auth.models import IdentityLookup
from dscommerce.auth.policy import validate_self_or_admin
from dscommerce.auth.principal import resolve
from dscommerce.errors import Forbidden, NotFound
from dscommerce.observability.logging import get_logger
from dscommerce.orders.models import Order, OrderLookup

log = get_logger(__name__)


def authorize_view(
    order_id: int,
    claims: Mapping[str, Any],
    *,
    order_lookup: OrderLookup,
    identity_lookup: IdentityLookup,
) -> Order:
    # Existence comes first: an admin asking for a missing order gets NotFound.
    order = order_lookup(order_id)
    if order is None:
        raise NotFound("Order not found")

    caller = resolve(claims, identity_lookup)

    try:
        validate_self_or_admin(caller, order.owning_identity_id)
    except Forbidden:
        log.warning("order_access_denied", order_id=order_id, caller_id=caller.id)
        raise

    log.debug("order_access_granted", order_id=order_id, caller_id=caller.id)
    return order


# --- Module Notes -----------------------------------------------------------
# Lookups are plain synchronous callables; `services.order_service` binds them to
# repositories over the request's DB session.

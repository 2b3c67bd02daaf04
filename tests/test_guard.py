"""
tests.test_guard

Order retrieval gate: existence, then principal, then ownership.
"""

from __future__ import annotations

import pytest

from dscommerce.auth.models import Identity, Role
from dscommerce.errors import Forbidden, NotFound, Unauthenticated
from dscommerce.orders.guard import authorize_view
from dscommerce.orders.models import Order
from tests.factories import PASSWORD_HASH, make_admin, make_client, make_order


class Lookups:
    def __init__(self, orders: list[Order], identities: list[Identity]) -> None:
        self._orders = {o.id: o for o in orders}
        self._identities = {i.email: i for i in identities}
        self.identity_calls = 0

    def order(self, order_id: int) -> Order | None:
        return self._orders.get(order_id)

    def identity(self, email: str) -> Identity | None:
        self.identity_calls += 1
        return self._identities.get(email)

    def view(self, order_id: int, username: str | None) -> Order:
        claims = {} if username is None else {"username": username}
        return authorize_view(
            order_id,
            claims,
            order_lookup=self.order,
            identity_lookup=self.identity,
        )


def test_missing_order_is_not_found_before_resolving_the_caller() -> None:
    lookups = Lookups([], [make_admin(1)])

    with pytest.raises(NotFound):
        lookups.view(99, "alex@gmail.com")

    assert lookups.identity_calls == 0


def test_missing_order_is_not_found_even_without_claims() -> None:
    with pytest.raises(NotFound):
        Lookups([], []).view(99, None)


def test_other_client_is_forbidden() -> None:
    lookups = Lookups([make_order(1, owner_id=5)], [make_client(7)])

    with pytest.raises(Forbidden):
        lookups.view(1, "bob@gmail.com")


def test_admin_may_view_someone_elses_order() -> None:
    order = make_order(1, owner_id=5)
    lookups = Lookups([order], [make_admin(7)])

    assert lookups.view(1, "alex@gmail.com") is order


def test_owner_may_view_own_order() -> None:
    order = make_order(1, owner_id=7)
    lookups = Lookups([order], [make_client(7)])

    assert lookups.view(1, "bob@gmail.com") is order


def test_client_and_admin_roles_together_grant_access() -> None:
    both = Identity(
        id=7,
        email="alex@gmail.com",
        password_hash=PASSWORD_HASH,
        roles=frozenset({Role(1, "ROLE_CLIENT"), Role(2, "ROLE_ADMIN")}),
    )
    order = make_order(1, owner_id=5)

    assert Lookups([order], [both]).view(1, "alex@gmail.com") is order


def test_unresolvable_caller_is_unauthenticated() -> None:
    lookups = Lookups([make_order(1, owner_id=5)], [])

    with pytest.raises(Unauthenticated):
        lookups.view(1, "ghost@gmail.com")
    with pytest.raises(Unauthenticated):
        lookups.view(1, None)


def test_owner_without_roles_is_unauthenticated() -> None:
    roleless = Identity(
        id=7, email="bob@gmail.com", password_hash=PASSWORD_HASH, roles=frozenset()
    )
    lookups = Lookups([make_order(1, owner_id=7)], [roleless])

    with pytest.raises(Unauthenticated):
        lookups.view(1, "bob@gmail.com")

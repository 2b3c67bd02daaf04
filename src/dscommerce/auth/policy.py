from __future__ import annotations

from dscommerce.auth.models import Identity
from dscommerce.errors import Forbidden


def validate_self_or_admin(caller: Identity, target_id: int) -> None:
    # Admin bypass is checked first so it wins over an ownership mismatch.
    if caller.is_admin:
        return
    if caller.id != target_id:
        raise Forbidden("Access denied. Should be self or admin")


def require_any_role(caller: Identity, *authorities: str) -> None:
    if not caller.has_any_role(*authorities):
        raise Forbidden("Access denied. Insufficient role")

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from dscommerce.api.deps import read_only_session
from dscommerce.auth.deps import get_claims
from dscommerce.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])


class UserResponse(BaseModel):
    id: int | None
    name: str
    email: str
    roles: list[str]


@router.get("/me", response_model=UserResponse)
async def find_me(
    claims: dict[str, Any] = Depends(get_claims),
    session: AsyncSession = Depends(read_only_session),
) -> UserResponse:
    me = await UserService(session=session).find_me(claims)
    return UserResponse(
        id=me.id,
        name=me.display_name,
        email=me.email,
        roles=sorted(role.authority for role in me.roles),
    )

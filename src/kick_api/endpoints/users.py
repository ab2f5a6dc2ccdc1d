"""Usuários."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from kick_api.auth.permissions import requires
from kick_api.constants import Scope
from kick_api.endpoints.base import EndpointGroup
from kick_api.errors import EmptyResponseError
from kick_api.http.wire import WireContract


class User(BaseModel):
    email: str
    name: str
    profile_picture: str
    user_id: int


_USERS = WireContract[list[User]](list[User])


class UsersAPI(EndpointGroup):
    async def get_authenticated_user(self) -> dict[str, Any]:
        users = await self._api.execute(
            "users",
            response_contract=_USERS,
            requirement=requires(Scope.USER_READ, delegated=True),
        )
        if not users:
            raise EmptyResponseError(
                "A API não retornou o usuário autenticado",
                endpoint="users",
                method="GET",
            )
        return users[0]

    async def get_users(self, *user_ids: int) -> list[dict[str, Any]]:
        return await self._api.execute(
            "users",
            params={"id": list(user_ids)},
            response_contract=_USERS,
            requirement=requires(Scope.USER_READ),
        )

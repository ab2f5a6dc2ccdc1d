"""Categorias (jogos e temas de livestream)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel

from kick_api.endpoints.base import EndpointGroup
from kick_api.http.wire import WireContract


class CategoryRef(BaseModel):
    id: int
    name: str
    thumbnail: str


class Category(CategoryRef):
    tags: list[str]
    viewer_count: int


_CATEGORIES = WireContract[list[CategoryRef]](list[CategoryRef])
_CATEGORY = WireContract[Category](Category)


class CategoriesAPI(EndpointGroup):
    async def search(self, query: str, page: int | None = None) -> list[dict[str, Any]]:
        """Busca categorias por nome."""
        return await self._api.execute(
            "categories",
            params={"q": query, "page": page},
            response_contract=_CATEGORIES,
        )

    async def get(self, category_id: int) -> dict[str, Any]:
        return await self._api.execute(
            f"categories/{category_id}",
            response_contract=_CATEGORY,
        )

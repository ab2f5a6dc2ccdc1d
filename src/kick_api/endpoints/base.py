"""Base dos grupos de endpoints (call sites finos sobre o pipeline)."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from kick_api.http.pipeline import KickAPIClient


class EndpointGroup:
    """Grupo de endpoints que compartilha um KickAPIClient."""

    def __init__(self, api: KickAPIClient) -> None:
        self._api = api


def check_max_items(values: tuple[object, ...], limit: int, label: str) -> None:
    """Rejeita listas de filtros acima do limite aceito pela API."""
    if len(values) > limit:
        raise ValueError(f"Não é possível informar mais de {limit} {label}")

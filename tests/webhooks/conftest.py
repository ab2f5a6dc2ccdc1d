"""Fixtures de webhook: payloads wire de cada tipo de evento e cliente falso."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock

import pytest

from kick_api.constants import KickEventType

CREATED_AT = "2026-03-01T18:30:00Z"
EXPIRES_AT = "2026-04-01T18:30:00Z"


def _profile(user_id: int, username: str) -> dict[str, object]:
    return {
        "user_id": user_id,
        "username": username,
        "is_verified": False,
        "profile_picture": f"https://img.kick.test/{username}.png",
        "channel_slug": username,
    }


def _user(user_id: int, username: str) -> dict[str, object]:
    return {"is_anonymous": False, **_profile(user_id, username)}


@pytest.fixture
def event_payloads() -> dict[KickEventType, dict[str, object]]:
    broadcaster = _user(42, "canal")
    return {
        KickEventType.CHAT_MESSAGE_SENT: {
            "message_id": "msg-1",
            "broadcaster": broadcaster,
            "sender": {
                **_user(7, "viewer"),
                "identity": {
                    "username_color": "#FF0000",
                    "badges": [{"text": "Moderator", "type": "moderator"}],
                },
            },
            "replies_to": None,
            "content": "oi [emote:1:kappa]",
            "emotes": [{"emote_id": "1", "positions": [{"s": 3, "e": 18}]}],
        },
        KickEventType.CHANNEL_FOLLOWED: {
            "broadcaster": broadcaster,
            "follower": _user(7, "viewer"),
        },
        KickEventType.SUBSCRIPTION_RENEWAL: {
            "broadcaster": broadcaster,
            "subscriber": _user(7, "viewer"),
            "duration": 3,
            "created_at": CREATED_AT,
            "expires_at": EXPIRES_AT,
        },
        KickEventType.SUBSCRIPTION_GIFTS: {
            "broadcaster": broadcaster,
            "gifter": {"is_anonymous": True},
            "giftees": [_user(7, "viewer"), _user(8, "outro")],
            "created_at": CREATED_AT,
            "expires_at": EXPIRES_AT,
        },
        KickEventType.SUBSCRIPTION_NEW: {
            "broadcaster": broadcaster,
            "subscriber": _user(7, "viewer"),
            "duration": 1,
            "created_at": CREATED_AT,
            "expires_at": EXPIRES_AT,
        },
        KickEventType.REWARD_REDEMPTION_UPDATED: {
            "id": "red-1",
            "user_input": "",
            "status": "pending",
            "redeemed_at": CREATED_AT,
            "reward": {
                "id": "rw-1",
                "title": "Beber água",
                "cost": 100,
                "description": "Hidrate-se",
            },
            "redeemer": _profile(7, "viewer"),
            "broadcaster": _profile(42, "canal"),
        },
        KickEventType.LIVESTREAM_STATUS_UPDATED: {
            "broadcaster": broadcaster,
            "is_live": True,
            "title": "Ao vivo",
            "started_at": CREATED_AT,
            "ended_at": None,
        },
        KickEventType.LIVESTREAM_METADATA_UPDATED: {
            "broadcaster": broadcaster,
            "metadata": {
                "title": "Ao vivo",
                "language": "pt",
                "has_mature_content": False,
                "category": {
                    "id": 15,
                    "name": "Just Chatting",
                    "thumbnail": "https://img.kick.test/cat.png",
                },
            },
        },
        KickEventType.MODERATION_BANNED: {
            "broadcaster": broadcaster,
            "moderator": _user(9, "mod"),
            "banned_user": _user(7, "viewer"),
            "metadata": {"reason": "spam", "created_at": CREATED_AT, "expires_at": None},
        },
        KickEventType.KICKS_GIFTED: {
            "broadcaster": _profile(42, "canal"),
            "sender": _profile(7, "viewer"),
            "gift": {
                "amount": 100,
                "name": "Full Send",
                "type": "BASIC",
                "tier": "BASIC",
                "message": "valeu!",
                "pinned_time_seconds": 0,
            },
            "created_at": CREATED_AT,
        },
    }


@pytest.fixture
def fake_kick():
    """Factory de KickClient falso: grupos de endpoints como AsyncMock."""

    def _make(*, delegated: bool) -> SimpleNamespace:
        return SimpleNamespace(
            is_delegated=delegated,
            events=SimpleNamespace(create_subscriptions=AsyncMock(return_value=[])),
            channels=SimpleNamespace(get_by_broadcaster_ids=AsyncMock(return_value=[])),
            livestreams=SimpleNamespace(get_livestreams=AsyncMock(return_value=[])),
            moderation=SimpleNamespace(
                ban_user=AsyncMock(),
                timeout_user=AsyncMock(),
                remove_ban=AsyncMock(),
            ),
            channel_rewards=SimpleNamespace(
                update_reward=AsyncMock(return_value={}),
                delete_reward=AsyncMock(),
            ),
        )

    return _make

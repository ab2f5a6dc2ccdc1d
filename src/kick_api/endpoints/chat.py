"""Chat: envio e remoção de mensagens."""

from __future__ import annotations

from typing import Annotated, Any, Literal
from uuid import UUID

from pydantic import BaseModel, Field

from kick_api.auth.permissions import requires
from kick_api.constants import Scope
from kick_api.endpoints.base import EndpointGroup
from kick_api.http.wire import WireContract

MAX_MESSAGE_LENGTH = 500


class _ChatMessageBase(BaseModel):
    content: str = Field(max_length=MAX_MESSAGE_LENGTH)
    reply_to_message_id: UUID | None = None


class UserChatMessage(_ChatMessageBase):
    """Mensagem enviada como o usuário, no canal de ``broadcaster_user_id``."""

    type: Literal["user"]
    broadcaster_user_id: int


class BotChatMessage(_ChatMessageBase):
    """Mensagem enviada como o bot, no canal da credencial."""

    type: Literal["bot"]


class ChatMessageSent(BaseModel):
    is_sent: bool
    message_id: str


_POST_MESSAGE = WireContract[Any](
    Annotated[UserChatMessage | BotChatMessage, Field(discriminator="type")]
)
_MESSAGE_SENT = WireContract[ChatMessageSent](ChatMessageSent)


class ChatAPI(EndpointGroup):
    async def post_message(
        self,
        content: str,
        *,
        type: Literal["user", "bot"] = "user",
        broadcaster_user_id: int | None = None,
        reply_to_message_id: str | None = None,
    ) -> dict[str, Any]:
        """Envia mensagem ao chat.

        Returns:
            ``{"isSent": bool, "messageId": str}``
        """
        return await self._api.execute(
            "chat",
            "POST",
            {
                "type": type,
                "content": content,
                "broadcasterUserId": broadcaster_user_id,
                "replyToMessageId": reply_to_message_id,
            },
            request_contract=_POST_MESSAGE,
            response_contract=_MESSAGE_SENT,
            requirement=requires(Scope.CHAT_WRITE, delegated=True),
        )

    async def delete_message(self, message_id: str) -> None:
        await self._api.execute(
            f"chat/{message_id}",
            "DELETE",
            requirement=requires(Scope.MODERATION_CHAT_MESSAGE_MANAGE, delegated=True),
        )

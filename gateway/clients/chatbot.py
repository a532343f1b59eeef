"""
Placeholder chatbot.

Stateless: the caller sends the whole conversation with every message and
the reply only reflects the optional session context.
"""

from datetime import datetime, timezone
from uuid import uuid4

from ..schemas.chat import ChatHistoryInput, ChatResponse
from ..tools.context import ExecutionContext


class ChatBotClient:
    async def process_message(self, message: ChatHistoryInput, context: ExecutionContext) -> ChatResponse:
        return ChatResponse(
            id=str(uuid4()),
            content=generate_response(message),
            timestamp=datetime.now(timezone.utc).replace(microsecond=0).isoformat(),
        )

    async def aclose(self) -> None:
        return None


def generate_response(message: ChatHistoryInput) -> str:
    context_info = ""
    if message.context is not None:
        if message.context.user_role:
            context_info += f" As a {message.context.user_role},"
        if message.context.course_id:
            context_info += f" regarding course {message.context.course_id},"

    return (
        "Thank you for your message!"
        + context_info
        + " I'm a placeholder chatbot. In a real implementation, I would process your full chat"
        " history and provide helpful responses based on your class content."
    )

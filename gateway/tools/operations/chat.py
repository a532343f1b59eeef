"""Chatbot tool."""

from typing import Any, Dict, List, Mapping

from ...schemas.chat import ChatContextInput, ChatHistoryInput, ChatMessageInput
from ..protocol import Capability, Operation, ParameterSchema, array_param, string_param
from ..values import array_arg, optional_string_arg, string_arg

_CONTEXT_FIELDS = ("userId", "userRole", "courseId", "sessionId")


def _history(entries: List[Any]) -> List[ChatMessageInput]:
    # entries without both a role and content are dropped
    messages = []
    for entry in entries:
        if not isinstance(entry, Mapping):
            continue
        role = entry.get("role")
        content = entry.get("content")
        if isinstance(role, str) and isinstance(content, str) and role and content:
            messages.append(ChatMessageInput(role=role, content=content))
    return messages


class ProcessChatMessage(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        chat_context = None
        if any(args.get(field) is not None for field in _CONTEXT_FIELDS):
            chat_context = ChatContextInput(
                user_id=optional_string_arg(args, "userId"),
                user_role=optional_string_arg(args, "userRole"),
                course_id=optional_string_arg(args, "courseId"),
                session_id=optional_string_arg(args, "sessionId"),
            )

        message = ChatHistoryInput(
            new_message=string_arg(args, "newMessage"),
            chat_history=_history(array_arg(args, "chatHistory")),
            context=chat_context,
        )
        return await self.resolver.chatbot.process_message(message, context)


def chat_capabilities(resolver) -> List[Capability]:
    return [
        Capability(
            name="process_chat_message",
            description="Process a chat message with context and history",
            parameters=ParameterSchema.of(
                string_param("newMessage", "The new message to process"),
                array_param(
                    "chatHistory",
                    "Array of previous chat messages in the format "
                    "[{role: 'user|assistant', content: 'message'}]",
                ),
                string_param("userId", "ID of the user", required=False),
                string_param("userRole", "Role of the user (e.g., 'student', 'staff')", required=False),
                string_param("courseId", "ID of the course if the chat is course-specific", required=False),
                string_param("sessionId", "ID of the chat session", required=False),
            ),
            operation=ProcessChatMessage(resolver),
        ),
    ]

"""Chat message schemas for the placeholder chatbot."""

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ChatMessageInput(BaseModel):
    """A single message in the chat history."""
    role: str
    content: str


class ChatContextInput(BaseModel):
    """Contextual information about the chat session."""

    model_config = ConfigDict(populate_by_name=True)

    user_id: Optional[str] = Field(None, alias="userId")
    user_role: Optional[str] = Field(None, alias="userRole")
    course_id: Optional[str] = Field(None, alias="courseId")
    session_id: Optional[str] = Field(None, alias="sessionId")


class ChatHistoryInput(BaseModel):
    """Complete input for processing a chat message."""

    model_config = ConfigDict(populate_by_name=True)

    new_message: str = Field(..., alias="newMessage")
    chat_history: List[ChatMessageInput] = Field(default_factory=list, alias="chatHistory")
    context: Optional[ChatContextInput] = None


class ChatResponse(BaseModel):
    id: str
    content: str
    timestamp: str

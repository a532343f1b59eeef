"""Tests for the placeholder chatbot and the backend resolver."""

from datetime import datetime
from unittest.mock import AsyncMock, Mock

import pytest

from gateway.clients.chatbot import ChatBotClient, generate_response
from gateway.clients.resolver import BackendResolver
from gateway.schemas.chat import ChatContextInput, ChatHistoryInput
from gateway.tools.context import ExecutionContext

pytestmark = pytest.mark.clients

PLACEHOLDER = (
    " I'm a placeholder chatbot. In a real implementation, I would process your full chat"
    " history and provide helpful responses based on your class content."
)


def test_response_without_context():
    message = ChatHistoryInput(new_message="hi")
    assert generate_response(message) == "Thank you for your message!" + PLACEHOLDER


def test_response_mentions_role_and_course():
    message = ChatHistoryInput(
        new_message="hi",
        context=ChatContextInput(user_role="student", course_id="CS101"),
    )
    assert generate_response(message) == (
        "Thank you for your message! As a student, regarding course CS101," + PLACEHOLDER
    )


@pytest.mark.asyncio
async def test_process_message_builds_response():
    reply = await ChatBotClient().process_message(ChatHistoryInput(new_message="hi"), ExecutionContext())

    assert reply.id
    assert reply.content.startswith("Thank you for your message!")
    parsed = datetime.fromisoformat(reply.timestamp)
    assert parsed.utcoffset().total_seconds() == 0
    assert parsed.microsecond == 0


@pytest.mark.asyncio
async def test_process_message_ids_are_unique():
    client = ChatBotClient()
    first = await client.process_message(ChatHistoryInput(new_message="a"), ExecutionContext())
    second = await client.process_message(ChatHistoryInput(new_message="a"), ExecutionContext())
    assert first.id != second.id


def test_resolver_from_settings(settings):
    resolver = BackendResolver.from_settings(settings)

    assert resolver.students.base_url == settings.students_service_url.rstrip("/")
    assert resolver.grades.service_name == "grades"
    assert resolver.courses.timeout == settings.backend_timeout_seconds
    assert isinstance(resolver.chatbot, ChatBotClient)


@pytest.mark.asyncio
async def test_resolver_close_continues_after_failure():
    clients = [Mock(aclose=AsyncMock()) for _ in range(5)]
    clients[0].aclose.side_effect = RuntimeError("already closed")
    resolver = BackendResolver(*clients)

    await resolver.aclose()

    for client in clients:
        client.aclose.assert_awaited_once()

"""
Pytest configuration and fixtures.

Provides:
- A fake backend resolver whose client methods are AsyncMocks
- A sealed registry / dispatcher wired to that resolver
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, Mock

import pytest

# Allow running the suite from a checkout without installing the package
project_root = Path(__file__).resolve().parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from gateway.core.config import Settings
from gateway.tools.context import AuthPropagator
from gateway.tools.dispatcher import Dispatcher
from gateway.tools.operations import build_registry


@pytest.fixture
def fake_resolver():
    """Resolver double; every backend call is an AsyncMock."""
    resolver = Mock()
    resolver.students.get_student = AsyncMock(return_value={"id": "42", "firstName": "Ada"})
    resolver.students.create_student = AsyncMock(return_value={"id": "s-1"})
    resolver.staff.get_staff = AsyncMock(return_value={"id": "7", "firstName": "Grace"})
    resolver.staff.create_staff = AsyncMock(return_value={"id": "st-1"})
    resolver.courses.get_course = AsyncMock(return_value={"id": "c-1", "name": "Algorithms"})
    resolver.courses.create_course = AsyncMock(return_value={"id": "c-2"})
    resolver.courses.get_course_students = AsyncMock(return_value=[{"id": "42"}])
    resolver.courses.get_course_homework = AsyncMock(return_value=[{"id": "hw-1"}])
    resolver.courses.create_homework = AsyncMock(return_value={"id": "hw-2"})
    resolver.courses.get_course_announcements = AsyncMock(return_value=[{"id": "a-1"}])
    resolver.courses.create_announcement = AsyncMock(return_value={"id": "a-2"})
    resolver.grades.get_student_course_grades = AsyncMock(return_value=[{"id": "g-1"}])
    resolver.grades.create_grade = AsyncMock(return_value={"id": "g-2"})
    resolver.chatbot.process_message = AsyncMock(
        return_value={"id": "m-1", "content": "hi", "timestamp": "2025-01-01T00:00:00+00:00"}
    )
    resolver.aclose = AsyncMock()
    return resolver


@pytest.fixture
def registry(fake_resolver):
    return build_registry(fake_resolver)


@pytest.fixture
def dispatcher(registry):
    return Dispatcher(registry, AuthPropagator(default_timeout=5.0))


@pytest.fixture
def settings():
    return Settings(_env_file=None, tool_timeout_seconds=5.0)

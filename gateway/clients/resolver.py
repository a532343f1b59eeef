"""Backend resolver - the set of clients every tool operation talks to."""

from __future__ import annotations

import structlog

from ..core.config import Settings
from .chatbot import ChatBotClient
from .courses import CoursesClient
from .grades import GradesClient
from .staff import StaffClient
from .students import StudentsClient

logger = structlog.get_logger(__name__)


class BackendResolver:
    """Owns the backend clients for the lifetime of the application."""

    def __init__(
        self,
        students: StudentsClient,
        staff: StaffClient,
        courses: CoursesClient,
        grades: GradesClient,
        chatbot: ChatBotClient,
    ) -> None:
        self.students = students
        self.staff = staff
        self.courses = courses
        self.grades = grades
        self.chatbot = chatbot

    @classmethod
    def from_settings(cls, settings: Settings) -> "BackendResolver":
        timeout = settings.backend_timeout_seconds
        logger.info(
            "Configuring backend clients",
            students=settings.students_service_url,
            staff=settings.staff_service_url,
            courses=settings.courses_service_url,
            grades=settings.grades_service_url,
        )
        return cls(
            students=StudentsClient(settings.students_service_url, timeout=timeout),
            staff=StaffClient(settings.staff_service_url, timeout=timeout),
            courses=CoursesClient(settings.courses_service_url, timeout=timeout),
            grades=GradesClient(settings.grades_service_url, timeout=timeout),
            chatbot=ChatBotClient(),
        )

    async def aclose(self) -> None:
        """Close every client; keeps going if one of them fails."""
        for client in (self.students, self.staff, self.courses, self.grades, self.chatbot):
            try:
                await client.aclose()
            except Exception as exc:
                logger.warning(
                    "Failed to close backend client",
                    client=type(client).__name__,
                    error=str(exc),
                )

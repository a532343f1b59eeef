"""Courses microservice client (courses, enrolments, homework, announcements)."""

from typing import Any, Dict, List

from ..schemas.backend import NewAnnouncement, NewCourse, NewHomework
from ..tools.context import ExecutionContext
from .base import ServiceClient, path_segment


class CoursesClient(ServiceClient):
    service_name = "courses"

    async def get_course(self, course_id: str, context: ExecutionContext) -> Dict[str, Any]:
        return await self._get(f"/courses/{path_segment(course_id)}", context)

    async def create_course(self, course: NewCourse, context: ExecutionContext) -> Dict[str, Any]:
        return await self._post("/courses", context, course.model_dump(by_alias=True, exclude_none=True))

    async def get_course_students(self, course_id: str, context: ExecutionContext) -> List[Any]:
        return await self._get(f"/courses/{path_segment(course_id)}/students", context) or []

    async def get_course_homework(self, course_id: str, context: ExecutionContext) -> List[Any]:
        return await self._get(f"/courses/{path_segment(course_id)}/homework", context) or []

    async def create_homework(self, homework: NewHomework, context: ExecutionContext) -> Dict[str, Any]:
        return await self._post(
            f"/courses/{path_segment(homework.course_id)}/homework",
            context,
            homework.model_dump(by_alias=True),
        )

    async def get_course_announcements(self, course_id: str, context: ExecutionContext) -> List[Any]:
        return await self._get(f"/courses/{path_segment(course_id)}/announcements", context) or []

    async def create_announcement(self, announcement: NewAnnouncement, context: ExecutionContext) -> Dict[str, Any]:
        return await self._post(
            f"/courses/{path_segment(announcement.course_id)}/announcements",
            context,
            announcement.model_dump(by_alias=True),
        )

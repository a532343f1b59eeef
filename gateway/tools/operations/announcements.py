"""Announcement tools (served by the courses service)."""

from typing import Any, Dict, List

from ...schemas.backend import NewAnnouncement
from ..protocol import Capability, Operation, ParameterSchema, string_param
from ..values import id_arg, string_arg


class GetCourseAnnouncements(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        return await self.resolver.courses.get_course_announcements(id_arg(args, "courseId"), context)


class CreateAnnouncement(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        announcement = NewAnnouncement(
            course_id=id_arg(args, "courseId"),
            title=string_arg(args, "title"),
            content=string_arg(args, "content"),
        )
        return await self.resolver.courses.create_announcement(announcement, context)


def announcement_capabilities(resolver) -> List[Capability]:
    return [
        Capability(
            name="get_course_announcements",
            description="Get all announcements for a specific course",
            parameters=ParameterSchema.of(
                string_param("courseId", "The ID of the course"),
            ),
            operation=GetCourseAnnouncements(resolver),
        ),
        Capability(
            name="create_announcement",
            description="Create a new announcement for a course",
            parameters=ParameterSchema.of(
                string_param("courseId", "The ID of the course"),
                string_param("title", "Title of the announcement"),
                string_param("content", "Content of the announcement"),
            ),
            operation=CreateAnnouncement(resolver),
        ),
    ]

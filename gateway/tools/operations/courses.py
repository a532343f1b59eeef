"""Course tools."""

from typing import Any, Dict, List

from ...schemas.backend import NewCourse
from ..protocol import Capability, Operation, ParameterSchema, string_param
from ..values import id_arg, optional_string_arg, string_arg


class GetCourse(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        return await self.resolver.courses.get_course(id_arg(args, "id"), context)


class CreateCourse(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        course = NewCourse(
            name=string_arg(args, "name"),
            semester=string_arg(args, "semester"),
            description=optional_string_arg(args, "description"),
        )
        return await self.resolver.courses.create_course(course, context)


class GetCourseStudents(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        return await self.resolver.courses.get_course_students(id_arg(args, "courseId"), context)


def course_capabilities(resolver) -> List[Capability]:
    return [
        Capability(
            name="get_course",
            description="Get detailed information about a course by ID",
            parameters=ParameterSchema.of(
                string_param("id", "The ID of the course"),
            ),
            operation=GetCourse(resolver),
        ),
        Capability(
            name="create_course",
            description="Create a new course",
            parameters=ParameterSchema.of(
                string_param("name", "Course name"),
                string_param("semester", "Semester (e.g., 'Fall 2025')"),
                string_param("description", "Course description", required=False),
            ),
            operation=CreateCourse(resolver),
        ),
        Capability(
            name="get_course_students",
            description="Get all students enrolled in a specific course",
            parameters=ParameterSchema.of(
                string_param("courseId", "The ID of the course"),
            ),
            operation=GetCourseStudents(resolver),
        ),
    ]

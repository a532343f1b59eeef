"""Homework tools (served by the courses service)."""

from typing import Any, Dict, List

from ...schemas.backend import NewHomework
from ..protocol import Capability, Operation, ParameterSchema, string_param
from ..values import id_arg, string_arg


class GetCourseHomework(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        return await self.resolver.courses.get_course_homework(id_arg(args, "courseId"), context)


class CreateHomework(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        homework = NewHomework(
            course_id=id_arg(args, "courseId"),
            title=string_arg(args, "title"),
            description=string_arg(args, "description"),
            workflow=string_arg(args, "workflow"),
            due_date=string_arg(args, "dueDate"),
        )
        return await self.resolver.courses.create_homework(homework, context)


def homework_capabilities(resolver) -> List[Capability]:
    return [
        Capability(
            name="get_course_homework",
            description="Get all homework assignments for a specific course",
            parameters=ParameterSchema.of(
                string_param("courseId", "The ID of the course"),
            ),
            operation=GetCourseHomework(resolver),
        ),
        Capability(
            name="create_homework",
            description="Create a new homework assignment for a course",
            parameters=ParameterSchema.of(
                string_param("courseId", "The ID of the course"),
                string_param("title", "Title of the homework assignment"),
                string_param("description", "Detailed description of the homework"),
                string_param("workflow", "Workflow/instructions for completing the homework"),
                string_param("dueDate", "Due date in ISO format (e.g., '2025-07-15T23:59:59Z')"),
            ),
            operation=CreateHomework(resolver),
        ),
    ]

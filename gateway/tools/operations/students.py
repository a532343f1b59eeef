"""Student tools."""

from typing import Any, Dict, List

from ...schemas.backend import NewStudent
from ..protocol import Capability, Operation, ParameterSchema, string_param
from ..values import id_arg, string_arg


class GetStudent(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        return await self.resolver.students.get_student(id_arg(args, "id"), context)


class CreateStudent(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        student = NewStudent(
            first_name=string_arg(args, "firstName"),
            last_name=string_arg(args, "lastName"),
            email=string_arg(args, "email"),
            phone_number=string_arg(args, "phoneNumber"),
        )
        return await self.resolver.students.create_student(student, context)


def student_capabilities(resolver) -> List[Capability]:
    return [
        Capability(
            name="get_student",
            description="Get detailed information about a student by ID",
            parameters=ParameterSchema.of(
                string_param("id", "The ID of the student"),
            ),
            operation=GetStudent(resolver),
        ),
        Capability(
            name="create_student",
            description="Create a new student",
            parameters=ParameterSchema.of(
                string_param("firstName", "Student's first name"),
                string_param("lastName", "Student's last name"),
                string_param("email", "Student's email address"),
                string_param("phoneNumber", "Student's phone number"),
            ),
            operation=CreateStudent(resolver),
        ),
    ]

"""Staff tools."""

from typing import Any, Dict, List

from ...schemas.backend import NewStaff
from ..protocol import Capability, Operation, ParameterSchema, string_param
from ..values import id_arg, optional_string_arg, string_arg


class GetStaff(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        return await self.resolver.staff.get_staff(id_arg(args, "id"), context)


class CreateStaff(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        staff = NewStaff(
            first_name=string_arg(args, "firstName"),
            last_name=string_arg(args, "lastName"),
            email=string_arg(args, "email"),
            phone_number=string_arg(args, "phoneNumber"),
            title=optional_string_arg(args, "title"),
            office=optional_string_arg(args, "office"),
        )
        return await self.resolver.staff.create_staff(staff, context)


def staff_capabilities(resolver) -> List[Capability]:
    return [
        Capability(
            name="get_staff",
            description="Get detailed information about a staff member by ID",
            parameters=ParameterSchema.of(
                string_param("id", "The ID of the staff member"),
            ),
            operation=GetStaff(resolver),
        ),
        Capability(
            name="create_staff",
            description="Create a new staff member",
            parameters=ParameterSchema.of(
                string_param("firstName", "Staff's first name"),
                string_param("lastName", "Staff's last name"),
                string_param("email", "Staff's email address"),
                string_param("phoneNumber", "Staff's phone number"),
                string_param("title", "Staff's title/position", required=False),
                string_param("office", "Staff's office location", required=False),
            ),
            operation=CreateStaff(resolver),
        ),
    ]

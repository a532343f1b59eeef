"""Staff microservice client."""

from typing import Any, Dict

from ..schemas.backend import NewStaff
from ..tools.context import ExecutionContext
from .base import ServiceClient, path_segment


class StaffClient(ServiceClient):
    service_name = "staff"

    async def get_staff(self, staff_id: str, context: ExecutionContext) -> Dict[str, Any]:
        return await self._get(f"/staff/{path_segment(staff_id)}", context)

    async def create_staff(self, staff: NewStaff, context: ExecutionContext) -> Dict[str, Any]:
        return await self._post("/staff", context, staff.model_dump(by_alias=True, exclude_none=True))

"""Students microservice client."""

from typing import Any, Dict

from ..schemas.backend import NewStudent
from ..tools.context import ExecutionContext
from .base import ServiceClient, path_segment


class StudentsClient(ServiceClient):
    service_name = "students"

    async def get_student(self, student_id: str, context: ExecutionContext) -> Dict[str, Any]:
        return await self._get(f"/students/{path_segment(student_id)}", context)

    async def create_student(self, student: NewStudent, context: ExecutionContext) -> Dict[str, Any]:
        return await self._post("/students", context, student.model_dump(by_alias=True))

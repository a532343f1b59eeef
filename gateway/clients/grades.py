"""Grades microservice client."""

from typing import Any, Dict, List

from ..schemas.backend import NewGrade
from ..tools.context import ExecutionContext
from .base import ServiceClient, path_segment

DEFAULT_GRADER = "System"


def normalize_grade(raw: Dict[str, Any]) -> Dict[str, Any]:
    """
    Map a grades-service record onto the gateway's grade shape.

    The grades service currently reports the grading timestamp in its
    ``gradedBy`` field, so it is used for both timestamps and the grader
    falls back to DEFAULT_GRADER.
    """
    timestamp = raw.get("gradedBy") or ""
    return {
        "id": raw.get("gradeId", ""),
        "studentId": raw.get("studentId", ""),
        "courseId": raw.get("courseId", ""),
        "semester": raw.get("semester", ""),
        "gradeType": raw.get("gradeType", ""),
        "itemId": raw.get("itemId", ""),
        "gradeValue": raw.get("gradeValue", ""),
        "gradedBy": DEFAULT_GRADER,
        "comments": raw.get("comments"),
        "gradedAt": timestamp,
        "updatedAt": timestamp,
    }


class GradesClient(ServiceClient):
    service_name = "grades"

    async def get_student_course_grades(
        self,
        student_id: str,
        course_id: str,
        semester: str,
        context: ExecutionContext,
    ) -> List[Dict[str, Any]]:
        body = await self._get(
            f"/students/{path_segment(student_id)}/courses/{path_segment(course_id)}/grades",
            context,
            semester=semester,
        )
        if isinstance(body, dict):
            body = body.get("grades", [])
        return [normalize_grade(grade) for grade in body or []]

    async def create_grade(self, grade: NewGrade, context: ExecutionContext) -> Dict[str, Any]:
        return await self._post("/grades", context, grade.model_dump(by_alias=True, exclude_none=True))

"""Grade tools."""

from typing import Any, Dict, List

from ...schemas.backend import NewGrade
from ..protocol import Capability, Operation, ParameterSchema, string_param
from ..values import id_arg, optional_string_arg, string_arg


class GetStudentCourseGrades(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        return await self.resolver.grades.get_student_course_grades(
            id_arg(args, "studentId"),
            id_arg(args, "courseId"),
            string_arg(args, "semester"),
            context,
        )


class CreateGrade(Operation):
    async def execute(self, args: Dict[str, Any], context) -> Any:
        grade = NewGrade(
            student_id=string_arg(args, "studentId"),
            course_id=string_arg(args, "courseId"),
            semester=string_arg(args, "semester"),
            grade_type=string_arg(args, "gradeType"),
            item_id=string_arg(args, "itemId"),
            grade_value=string_arg(args, "gradeValue"),
            graded_by=optional_string_arg(args, "gradedBy"),
            comments=optional_string_arg(args, "comments"),
        )
        return await self.resolver.grades.create_grade(grade, context)


def grade_capabilities(resolver) -> List[Capability]:
    return [
        Capability(
            name="get_student_course_grades",
            description="Get all grades for a specific student in a specific course and semester",
            parameters=ParameterSchema.of(
                string_param("studentId", "The ID of the student"),
                string_param("courseId", "The ID of the course"),
                string_param("semester", "The semester (e.g., 'Fall 2025')"),
            ),
            operation=GetStudentCourseGrades(resolver),
        ),
        Capability(
            name="create_grade",
            description="Create a new grade entry for a student",
            parameters=ParameterSchema.of(
                string_param("studentId", "The ID of the student"),
                string_param("courseId", "The ID of the course"),
                string_param("semester", "The semester (e.g., 'Fall 2025')"),
                string_param("gradeType", "Type of grade (e.g., 'quiz', 'exam', 'homework')"),
                string_param("itemId", "ID of the graded item (e.g., 'Quiz 1', 'Midterm')"),
                string_param("gradeValue", "The actual grade value (e.g., '95', 'A-')"),
                string_param("gradedBy", "ID of the staff member who graded the item", required=False),
                string_param("comments", "Comments on the grade", required=False),
            ),
            operation=CreateGrade(resolver),
        ),
    ]

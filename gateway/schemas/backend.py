"""Request payloads sent to the backend microservices."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class NewStudent(_Payload):
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone_number: str = Field(..., alias="phoneNumber")


class NewStaff(_Payload):
    first_name: str = Field(..., alias="firstName")
    last_name: str = Field(..., alias="lastName")
    email: str
    phone_number: str = Field(..., alias="phoneNumber")
    title: Optional[str] = None
    office: Optional[str] = None


class NewCourse(_Payload):
    name: str
    semester: str
    description: Optional[str] = None


class NewGrade(_Payload):
    student_id: str = Field(..., alias="studentId")
    course_id: str = Field(..., alias="courseId")
    semester: str
    grade_type: str = Field(..., alias="gradeType")
    item_id: str = Field(..., alias="itemId")
    grade_value: str = Field(..., alias="gradeValue")
    graded_by: Optional[str] = Field(None, alias="gradedBy")
    comments: Optional[str] = None


class NewHomework(_Payload):
    course_id: str = Field(..., alias="courseId")
    title: str
    description: str
    workflow: str
    due_date: str = Field(..., alias="dueDate", description="ISO-8601 due date")


class NewAnnouncement(_Payload):
    course_id: str = Field(..., alias="courseId")
    title: str
    content: str

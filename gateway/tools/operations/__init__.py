"""
Built-in tools, one module per backend operation family.

build_registry() registers every family and seals the result.
"""

from .announcements import announcement_capabilities
from .chat import chat_capabilities
from .courses import course_capabilities
from .grades import grade_capabilities
from .homework import homework_capabilities
from .staff import staff_capabilities
from .students import student_capabilities
from ..registry import RegistryBuilder, ToolRegistry

FAMILIES = (
    student_capabilities,
    staff_capabilities,
    course_capabilities,
    grade_capabilities,
    homework_capabilities,
    announcement_capabilities,
    chat_capabilities,
)


def build_registry(resolver) -> ToolRegistry:
    builder = RegistryBuilder()
    for family in FAMILIES:
        builder.register_all(family(resolver))
    return builder.seal()


__all__ = ["FAMILIES", "build_registry"]

"""Unit tests for the two-phase tool registry."""

import pytest
from unittest.mock import Mock

from gateway.tools.errors import DuplicateCapabilityError, NotFoundError
from gateway.tools.operations import FAMILIES, build_registry
from gateway.tools.protocol import Capability, Operation, ParameterSchema, string_param
from gateway.tools.registry import RegistryBuilder, ToolRegistry

pytestmark = pytest.mark.tools

EXPECTED_TOOLS = {
    "get_student",
    "create_student",
    "get_staff",
    "create_staff",
    "get_course",
    "create_course",
    "get_course_students",
    "get_student_course_grades",
    "create_grade",
    "get_course_homework",
    "create_homework",
    "get_course_announcements",
    "create_announcement",
    "process_chat_message",
}


def make_capability(name: str, description: str = "A mock tool") -> Capability:
    return Capability(
        name=name,
        description=description,
        parameters=ParameterSchema.of(string_param("id", "The ID")),
        operation=Mock(spec=Operation),
    )


class TestRegistryBuilder:
    def test_register_and_seal(self):
        builder = RegistryBuilder()
        capability = make_capability("mock_tool")
        builder.register(capability)
        registry = builder.seal()
        assert isinstance(registry, ToolRegistry)
        assert registry.lookup("mock_tool") is capability

    def test_duplicate_name_raises_and_keeps_original(self):
        builder = RegistryBuilder()
        original = make_capability("mock_tool", "original")
        builder.register(original)
        with pytest.raises(DuplicateCapabilityError, match="already registered"):
            builder.register(make_capability("mock_tool", "replacement"))
        assert builder.seal().lookup("mock_tool").description == "original"

    def test_register_after_seal_rejected(self):
        builder = RegistryBuilder()
        builder.seal()
        with pytest.raises(RuntimeError, match="sealed"):
            builder.register(make_capability("late_tool"))

    def test_seal_twice_rejected(self):
        builder = RegistryBuilder()
        builder.seal()
        with pytest.raises(RuntimeError):
            builder.seal()

    def test_sealed_registry_unaffected_by_builder_state(self):
        builder = RegistryBuilder()
        builder.register(make_capability("a"))
        registry = builder.seal()
        builder._capabilities["b"] = make_capability("b")
        assert "b" not in registry
        assert len(registry) == 1


class TestToolRegistry:
    def test_lookup_missing_raises_not_found(self):
        registry = RegistryBuilder().seal()
        with pytest.raises(NotFoundError) as exc_info:
            registry.lookup("nonexistent")
        assert exc_info.value.name == "nonexistent"

    def test_list_all_sorted(self):
        builder = RegistryBuilder()
        for name in ("zeta", "alpha", "mid"):
            builder.register(make_capability(name))
        registry = builder.seal()
        assert [c.name for c in registry.list_all()] == ["alpha", "mid", "zeta"]
        assert registry.names() == ["alpha", "mid", "zeta"]
        assert [c.name for c in registry] == ["alpha", "mid", "zeta"]

    def test_mapping_is_read_only(self):
        builder = RegistryBuilder()
        builder.register(make_capability("a"))
        registry = builder.seal()
        with pytest.raises(TypeError):
            registry._capabilities["b"] = make_capability("b")


class TestBuildRegistry:
    def test_all_families_registered(self, registry):
        assert set(registry.names()) == EXPECTED_TOOLS
        assert len(FAMILIES) == 7

    def test_lookup_returns_registered_descriptor(self, fake_resolver):
        expected = {
            capability.name: capability
            for family in FAMILIES
            for capability in family(fake_resolver)
        }
        registry = build_registry(fake_resolver)
        for name, capability in expected.items():
            found = registry.lookup(name)
            assert found.name == capability.name
            assert found.description == capability.description
            assert found.parameters == capability.parameters

    def test_operations_share_resolver(self, registry, fake_resolver):
        for capability in registry.list_all():
            assert capability.operation.resolver is fake_resolver

    @pytest.mark.parametrize(
        "name, required",
        [
            ("get_student", ["id"]),
            ("create_student", ["firstName", "lastName", "email", "phoneNumber"]),
            ("create_staff", ["firstName", "lastName", "email", "phoneNumber"]),
            ("create_course", ["name", "semester"]),
            ("get_student_course_grades", ["studentId", "courseId", "semester"]),
            (
                "create_grade",
                ["studentId", "courseId", "semester", "gradeType", "itemId", "gradeValue"],
            ),
            ("create_homework", ["courseId", "title", "description", "workflow", "dueDate"]),
            ("create_announcement", ["courseId", "title", "content"]),
            ("process_chat_message", ["newMessage", "chatHistory"]),
        ],
    )
    def test_required_parameters(self, registry, name, required):
        assert registry.lookup(name).parameters.required == required

    def test_chat_history_is_array(self, registry):
        schema = registry.lookup("process_chat_message").parameters
        assert schema.properties["chatHistory"].type.value == "array"

    def test_duplicate_family_aborts_build(self, fake_resolver, monkeypatch):
        import gateway.tools.operations as operations

        monkeypatch.setattr(
            operations,
            "FAMILIES",
            operations.FAMILIES + (operations.student_capabilities,),
        )
        with pytest.raises(DuplicateCapabilityError):
            operations.build_registry(fake_resolver)

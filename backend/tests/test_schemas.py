"""
Tests for Entity Schemas and the Schema Registry

Schema composition, field overrides, freezing and lookup by entity kind.
"""

import pytest

from workwhiz.core.exceptions import (
    DuplicateConstraintError,
    SchemaConfigurationError,
    UnknownSchemaError,
)
from workwhiz.domain.entities import EntityKind
from workwhiz.domain.roles import Role
from workwhiz.domain.schemas import (
    EntitySchema,
    SchemaRegistry,
    get_registration_schema,
    get_schema,
    schema_registry,
)
from workwhiz.domain.validators import is_not_empty, is_string, min_length


class TestRegistrationSchemas:
    """Test suite for the default registration schemas"""

    def test_base_schema_fields(self):
        """Test that the base registration schema holds email and phone"""
        assert get_schema("base").field_names == ["email", "phone"]

    @pytest.mark.parametrize("kind, expected", [
        ("admin", ["email", "phone", "first_name", "last_name"]),
        ("candidate", ["email", "phone", "first_name", "last_name", "title"]),
        ("employer", ["email", "phone", "company", "industry"]),
    ])
    def test_derived_schemas_inherit_base_fields_first(self, kind, expected):
        """Test that derived schemas list inherited fields before their own"""
        assert get_schema(kind).field_names == expected

    def test_phone_is_south_african_for_every_role(self):
        """Test that every registration role validates ZA phone numbers"""
        for role in Role:
            schema = get_registration_schema(role)
            phone = schema.get_field("phone")
            assert phone.constraint_names == ["isValidPhoneNumber"]

    def test_candidate_field_constraints(self):
        """Test the constraint lists of candidate fields"""
        schema = get_schema(EntityKind.CANDIDATE)

        assert schema.get_field("email").constraint_names == ["isAllowedEmail"]
        assert schema.get_field("first_name").constraint_names == ["isString", "minLength"]
        assert schema.get_field("title").constraint_names == ["isString", "minLength"]

    def test_password_schemas(self):
        """Test that password fields opt out of whitespace trimming"""
        password = get_schema("password")
        update = get_schema("password_update")

        assert password.get_field("password").strip is False
        assert password.get_field("password").constraint_names == [
            "isNotEmpty", "minLength", "maxLength", "isStrongPassword"
        ]
        assert update.field_names == ["password", "password_confirmation"]
        assert update.get_field("password_confirmation").constraint_names == ["passwordsMatch"]

    def test_lookup_is_case_insensitive(self):
        """Test that entity kind strings are normalized"""
        assert get_schema("Candidate") is get_schema(EntityKind.CANDIDATE)

    def test_unknown_kind_raises(self):
        """Test that an unknown entity kind is a configuration error"""
        with pytest.raises(UnknownSchemaError) as exc_info:
            get_schema("recruiter")

        assert exc_info.value.kind == "recruiter"
        assert "candidate" in exc_info.value.known

    def test_registered_schemas_are_frozen(self):
        """Test that shared schemas cannot be changed after registration"""
        schema = get_schema("candidate")

        assert schema.frozen
        with pytest.raises(SchemaConfigurationError):
            schema.add_field("nickname", is_string())


class TestEntitySchema:
    """Test suite for building schemas"""

    def test_override_replaces_field_in_place(self):
        """Test that redefining an inherited field keeps its position"""
        base = EntitySchema("base").add_field("email", is_string()).add_field("phone", is_string())
        derived = EntitySchema("derived", base=base).add_field("email", is_not_empty())

        assert derived.field_names == ["email", "phone"]
        assert derived.get_field("email").constraint_names == ["isNotEmpty"]
        assert base.get_field("email").constraint_names == ["isString"]

    def test_duplicate_constraint_on_field_raises(self):
        """Test that two constraints sharing a name on one field are rejected"""
        schema = EntitySchema("candidate")

        with pytest.raises(DuplicateConstraintError):
            schema.add_field("title", min_length(2), min_length(3))

    def test_named_rules_resolve_through_scope(self):
        """Test that fields can reference rules registered in the schema scope"""
        base = EntitySchema("base")
        base.register_constraint("isJohn", lambda v, c: v == "John", lambda v, c: "Must be John")
        derived = EntitySchema("derived", base=base).add_field("first_name", "isJohn")

        assert derived.get_field("first_name").constraint_names == ["isJohn"]

    def test_unregistered_rule_name_raises(self):
        """Test that referencing an unknown rule name fails at build time"""
        with pytest.raises(SchemaConfigurationError):
            EntitySchema("candidate").add_field("title", "isTitle")

    def test_schema_local_rule_names(self):
        """Test that two sibling schemas may register the same rule name"""
        first = EntitySchema("first")
        second = EntitySchema("second")

        first.register_constraint("custom", lambda v, c: True, lambda v, c: "")
        second.register_constraint("custom", lambda v, c: True, lambda v, c: "")

        with pytest.raises(DuplicateConstraintError):
            first.register_constraint("custom", lambda v, c: True, lambda v, c: "")

    def test_container_protocol(self):
        """Test membership, length and iteration"""
        schema = EntitySchema("s").add_field("a").add_field("b")

        assert "a" in schema
        assert "c" not in schema
        assert len(schema) == 2
        assert [spec.name for spec in schema] == ["a", "b"]


class TestSchemaRegistry:
    """Test suite for SchemaRegistry"""

    def test_duplicate_registration_raises(self):
        """Test that an entity kind can only be registered once"""
        registry = SchemaRegistry()
        registry.register(EntityKind.BASE, EntitySchema("base"))

        with pytest.raises(SchemaConfigurationError):
            registry.register(EntityKind.BASE, EntitySchema("other"))

    def test_registered_kind_without_schema_raises(self):
        """Test that a known kind missing from a registry is unknown there"""
        registry = SchemaRegistry()

        with pytest.raises(UnknownSchemaError):
            registry.get_schema(EntityKind.ADMIN)

    def test_default_registry_kinds(self):
        """Test the kinds registered by default"""
        assert schema_registry.kinds == [
            "base", "admin", "candidate", "employer", "password", "password_update"
        ]
        assert EntityKind.USER not in schema_registry

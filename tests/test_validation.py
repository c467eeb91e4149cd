"""
Tests for deferred validation checks.
"""

from schema_translate.exceptions import (
    ImmutableForceNewConflictError,
    RequiredComputedConflictError,
)
from schema_translate.models.property import SchemaDefinitionProperty
from schema_translate.translate.validation import build_validation


def make_property(**kwargs):
    return SchemaDefinitionProperty(name="propertyName", type="string", **kwargs)


class TestBuildValidation:
    """Tests for build_validation()."""

    def test_no_conflicts(self):
        """Test a property without conflicts gets a check that always succeeds."""
        check = build_validation(make_property(required=True, force_new=True))

        assert check.is_noop
        warnings, errors = check("value", "propertyName")
        assert warnings == []
        assert errors == []

    def test_immutable_and_force_new(self):
        """Test immutable + forceNew is reported, not raised."""
        check = build_validation(make_property(immutable=True, force_new=True))

        warnings, errors = check("value", "propertyName")
        assert len(errors) == 1
        assert isinstance(errors[0], ImmutableForceNewConflictError)
        assert (
            "property 'propertyName' is configured as immutable and can not be configured "
            "with forceNew too" in str(errors[0])
        )

    def test_required_and_computed(self):
        """Test required + computed (raw flags) is reported."""
        check = build_validation(make_property(required=True, computed=True))

        _, errors = check("value", "propertyName")
        assert len(errors) == 1
        assert isinstance(errors[0], RequiredComputedConflictError)
        assert (
            "property 'propertyName' is configured as required and can not be configured "
            "as computed too" in errors[0].message
        )

    def test_both_conflicts(self):
        """Test both conflicts are reported together."""
        check = build_validation(
            make_property(required=True, computed=True, immutable=True, force_new=True)
        )

        _, errors = check(None, "propertyName")
        assert [type(e) for e in errors] == [
            ImmutableForceNewConflictError,
            RequiredComputedConflictError,
        ]

    def test_other_combinations_succeed(self):
        """Test single flags never produce errors."""
        for flags in (
            {"immutable": True},
            {"force_new": True},
            {"computed": True},
            {"required": True},
            {"read_only": True, "computed": True},
        ):
            _, errors = build_validation(make_property(**flags))("v", "propertyName")
            assert errors == [], flags

    def test_check_is_repeatable(self):
        """Test the check can be evaluated more than once with the same result."""
        check = build_validation(make_property(immutable=True, force_new=True))
        first = check("a", "k")
        second = check("b", "k")
        assert len(first[1]) == len(second[1]) == 1

    def test_repr(self):
        """Test repr names the property."""
        assert "propertyName" in repr(build_validation(make_property()))

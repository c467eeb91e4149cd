"""
Tests for reconciliation of property flags.
"""

from schema_translate.models.property import SchemaDefinitionProperty
from schema_translate.translate.modes import (
    PropertyMode,
    is_computed,
    is_optional_computed,
    reconcile,
    resolve_mode,
)


def make_property(**kwargs):
    return SchemaDefinitionProperty(name="string_prop", type="string", **kwargs)


class TestReconcile:
    """Tests for reconcile() decision table."""

    def test_required(self):
        """Test required properties are neither optional nor computed."""
        outcome = reconcile(make_property(required=True, default="d"))

        assert outcome.mode is PropertyMode.REQUIRED
        assert outcome.required is True
        assert outcome.optional is False
        assert outcome.computed is False
        assert outcome.default == "d"

    def test_required_wins_over_computed(self):
        """Test required and computed resolves to required (conflict is validated later)."""
        outcome = reconcile(make_property(required=True, computed=True))

        assert outcome.mode is PropertyMode.REQUIRED
        assert outcome.computed is False

    def test_read_only_discards_default(self):
        """Test read-only properties are optional-computed with no default."""
        outcome = reconcile(make_property(read_only=True, default="ignored"))

        assert outcome.mode is PropertyMode.COMPUTED_ONLY
        assert outcome.required is False
        assert outcome.optional is True
        assert outcome.computed is True
        assert outcome.default is None

    def test_computed_without_default(self):
        """Test computed with no default stays computed (unknown at plan time)."""
        outcome = reconcile(make_property(computed=True))

        assert outcome.mode is PropertyMode.OPTIONAL_COMPUTED_UNKNOWN
        assert outcome.optional is True
        assert outcome.computed is True
        assert outcome.default is None

    def test_computed_with_default(self):
        """Test computed with a default behaves as plain optional."""
        outcome = reconcile(make_property(computed=True, default="x"))

        assert outcome.mode is PropertyMode.OPTIONAL_COMPUTED_KNOWN_DEFAULT
        assert outcome.optional is True
        assert outcome.computed is False
        assert outcome.default == "x"

    def test_falsy_default_counts_as_present(self):
        """Test False and 0 are real defaults, only None means absent."""
        assert reconcile(make_property(computed=True, default=False)).computed is False
        assert reconcile(make_property(computed=True, default=0)).default == 0

    def test_plain_optional(self):
        """Test a property with no flags is plain optional."""
        outcome = reconcile(make_property(default="x"))

        assert outcome.mode is PropertyMode.OPTIONAL
        assert outcome.required is False
        assert outcome.optional is True
        assert outcome.computed is False
        assert outcome.default == "x"


class TestComputedPredicates:
    """Tests for is_computed() and is_optional_computed()."""

    def test_read_only_is_computed(self):
        """Test read-only optional properties are computed."""
        assert is_computed(make_property(read_only=True))

    def test_optional_computed_is_computed(self):
        """Test optional-computed properties without default are computed."""
        assert is_computed(make_property(computed=True))

    def test_required_is_not_computed(self):
        """Test required properties are not computed."""
        assert not is_computed(make_property(required=True))

    def test_plain_is_not_computed(self):
        """Test properties without flags are not computed."""
        assert not is_computed(make_property())

    def test_optional_computed(self):
        """Test optional, not read-only, computed and no default is optional-computed."""
        assert is_optional_computed(make_property(computed=True))

    def test_optional_computed_excludes_other_cases(self):
        """Test every other combination is not optional-computed."""
        assert not is_optional_computed(make_property(computed=False))
        assert not is_optional_computed(make_property(read_only=True, computed=True))
        assert not is_optional_computed(make_property(computed=True, default="default"))
        assert not is_optional_computed(make_property(required=True, computed=True))


class TestPropertyMode:
    """Tests for PropertyMode flags."""

    def test_str(self):
        """Test string representation."""
        assert str(PropertyMode.OPTIONAL) == "OPTIONAL"

    def test_resolve_mode_priority(self):
        """Test required beats read-only, which beats computed."""
        prop = make_property(required=True, read_only=True, computed=True)
        assert resolve_mode(prop) is PropertyMode.REQUIRED

        prop = make_property(read_only=True, computed=True, default="x")
        assert resolve_mode(prop) is PropertyMode.COMPUTED_ONLY

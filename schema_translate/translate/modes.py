"""
Reconciliation of property visibility and mutability flags.

A property carries independent ``required``, ``read_only`` and ``computed``
flags plus an optional default. The target schema needs one consistent
required/optional/computed combination per field, so the flags are resolved
here exactly once into a PropertyMode, and every consumer (translator,
documentation) branches on that mode rather than on the raw flags.
"""

from enum import Enum
from typing import Any, NamedTuple

from schema_translate.models.property import SchemaDefinitionProperty


class PropertyMode(Enum):
    """
    Reconciled visibility/mutability of a property.

    Modes:
        REQUIRED: user must supply the value
        COMPUTED_ONLY: read-only; value always comes from the remote system
        OPTIONAL_COMPUTED_UNKNOWN: user may supply it; otherwise the remote
            system fills it in and the value is unknown until applied
        OPTIONAL_COMPUTED_KNOWN_DEFAULT: computed but with a default, so the
            value is known ahead of time and behaves as plain optional
        OPTIONAL: plain optional value
    """

    REQUIRED = "REQUIRED"
    COMPUTED_ONLY = "COMPUTED_ONLY"
    OPTIONAL_COMPUTED_UNKNOWN = "OPTIONAL_COMPUTED_UNKNOWN"
    OPTIONAL_COMPUTED_KNOWN_DEFAULT = "OPTIONAL_COMPUTED_KNOWN_DEFAULT"
    OPTIONAL = "OPTIONAL"

    def __str__(self) -> str:
        """Return the string value for display."""
        return self.value

    @property
    def required(self) -> bool:
        return self is PropertyMode.REQUIRED

    @property
    def optional(self) -> bool:
        return self is not PropertyMode.REQUIRED

    @property
    def computed(self) -> bool:
        return self in (PropertyMode.COMPUTED_ONLY, PropertyMode.OPTIONAL_COMPUTED_UNKNOWN)

    @property
    def keeps_default(self) -> bool:
        """Return True if the declared default is passed through."""
        return self not in (PropertyMode.COMPUTED_ONLY, PropertyMode.OPTIONAL_COMPUTED_UNKNOWN)


class ModeOutcome(NamedTuple):
    """
    Result of reconciling a property's flags.

    Attributes:
        mode: Reconciled mode
        required: Target node required flag
        optional: Target node optional flag
        computed: Target node computed flag
        default: Default value for the target node (None when discarded)
    """

    mode: PropertyMode
    required: bool
    optional: bool
    computed: bool
    default: Any


def resolve_mode(prop: SchemaDefinitionProperty) -> PropertyMode:
    """
    Resolve the flags of a property into its PropertyMode.

    Priority order: required, then read-only, then computed (split on whether
    a default is present), then plain optional. A required property that is
    also computed resolves to REQUIRED; the conflict is reported by the
    validation check, not here.
    """
    if prop.required:
        return PropertyMode.REQUIRED
    if prop.read_only:
        return PropertyMode.COMPUTED_ONLY
    if prop.computed:
        if prop.default is None:
            return PropertyMode.OPTIONAL_COMPUTED_UNKNOWN
        return PropertyMode.OPTIONAL_COMPUTED_KNOWN_DEFAULT
    return PropertyMode.OPTIONAL


def reconcile(prop: SchemaDefinitionProperty) -> ModeOutcome:
    """
    Reconcile a property's flags into target node flags.

    Args:
        prop: Property to reconcile

    Returns:
        ModeOutcome with the mode and the flags to set on the target node

    Example:
        >>> outcome = reconcile(SchemaDefinitionProperty(name="id", read_only=True, default="x"))
        >>> outcome.optional, outcome.computed, outcome.default
        (True, True, None)
    """
    mode = resolve_mode(prop)
    return ModeOutcome(
        mode=mode,
        required=mode.required,
        optional=mode.optional,
        computed=mode.computed,
        default=prop.default if mode.keeps_default else None,
    )


def is_computed(prop: SchemaDefinitionProperty) -> bool:
    """Read-only, or optional-computed with no default."""
    return resolve_mode(prop).computed


def is_optional_computed(prop: SchemaDefinitionProperty) -> bool:
    """Optional, not read-only, computed and without a default."""
    return resolve_mode(prop) is PropertyMode.OPTIONAL_COMPUTED_UNKNOWN

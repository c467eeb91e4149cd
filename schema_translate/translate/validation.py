"""
Deferred validation of conflicting property flags.

Flag conflicts do not abort translation. Instead each translated node carries
a ValidationCheck that the host framework evaluates during configuration
validation, where the conflicts are reported as errors.
"""

from typing import Any

from schema_translate.exceptions import (
    ImmutableForceNewConflictError,
    RequiredComputedConflictError,
    ValidationConflictError,
)
from schema_translate.models.property import SchemaDefinitionProperty


class ValidationCheck:
    """
    Callable validation check bound to one property.

    Calling the check with ``(value, key)`` returns ``(warnings, errors)``,
    the signature the host framework expects from a validate function. The
    conflicts are computed once when the check is built; the check itself is
    pure and can be evaluated any number of times.

    Example:
        >>> check = build_validation(SchemaDefinitionProperty(name="p", required=True, computed=True))
        >>> warnings, errors = check("value", "p")
        >>> len(errors)
        1
    """

    def __init__(self, property_name: str, conflicts: list[ValidationConflictError]):
        self.property_name = property_name
        self.conflicts = tuple(conflicts)

    @property
    def is_noop(self) -> bool:
        return not self.conflicts

    def __call__(self, value: Any, key: str) -> tuple[list[str], list[Exception]]:
        return [], list(self.conflicts)

    def __repr__(self) -> str:
        return f"<ValidationCheck(property='{self.property_name}', conflicts={len(self.conflicts)})>"


def find_conflicts(prop: SchemaDefinitionProperty) -> list[ValidationConflictError]:
    """Return the flag conflicts of a property, judged on the raw input flags."""
    conflicts: list[ValidationConflictError] = []
    if prop.immutable and prop.force_new:
        conflicts.append(ImmutableForceNewConflictError(prop.name))
    if prop.required and prop.computed:
        conflicts.append(RequiredComputedConflictError(prop.name))
    return conflicts


def build_validation(prop: SchemaDefinitionProperty) -> ValidationCheck:
    """
    Build the deferred validation check for a property.

    A property without conflicts gets a check that always succeeds.
    """
    return ValidationCheck(prop.name, find_conflicts(prop))

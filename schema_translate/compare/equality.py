"""
Structural equality of property values.

Used by drift detection to decide whether a locally declared value and the
value observed on the remote system are the same, according to the declared
type of the property. Comparison never fails: any value whose shape does not
match the declared type makes the comparison return False.
"""

from collections.abc import Mapping
from typing import Any

from schema_translate.exceptions import UnsupportedTypeError
from schema_translate.models.property import PropertyType, SchemaDefinitionProperty

_MISSING = object()


def matches_type(value: Any, property_type: PropertyType | str | None) -> bool:
    """
    Check that a runtime value has the shape expected for a property type.

    Booleans never count as numbers. Floats accept ints as well, since JSON
    numbers without a fractional part decode to int.

    Args:
        value: Runtime value
        property_type: Declared type

    Returns:
        True if the value matches, False otherwise (including unknown types)
    """
    try:
        parsed = PropertyType.parse(property_type)
    except UnsupportedTypeError:
        return False

    if parsed is PropertyType.STRING:
        return isinstance(value, str)
    if parsed is PropertyType.INTEGER:
        return isinstance(value, int) and not isinstance(value, bool)
    if parsed is PropertyType.FLOAT:
        return isinstance(value, (int, float)) and not isinstance(value, bool)
    if parsed is PropertyType.BOOLEAN:
        return isinstance(value, bool)
    if parsed is PropertyType.LIST:
        return isinstance(value, (list, tuple))
    return isinstance(value, Mapping)


def equal(prop: SchemaDefinitionProperty, input_value: Any, remote_value: Any) -> bool:
    """
    Compare an input value with a remote value according to a property's type.

    - Primitives compare by value once both operands have the expected shape.
    - Lists must have the same length and compare item by item, or as
      permutations of each other when the property ignores item order.
    - Objects compare each declared sub-property by its own type; undeclared
      keys are ignored. A sub-property missing from both sides is skipped,
      missing from one side only makes the objects differ.

    Args:
        prop: Property describing both values
        input_value: Locally declared value
        remote_value: Remotely observed value

    Returns:
        True if both values are structurally equal

    Example:
        >>> roles = SchemaDefinitionProperty(
        ...     name="roles", type="list", array_items_type="string", ignore_items_order=True
        ... )
        >>> equal(roles, ["role1", "role2"], ["role2", "role1"])
        True
    """
    if not (matches_type(input_value, prop.type) and matches_type(remote_value, prop.type)):
        return False

    property_type = PropertyType.parse(prop.type)
    if property_type is PropertyType.LIST:
        return _equal_lists(prop, input_value, remote_value)
    if property_type is PropertyType.OBJECT:
        return _equal_objects(prop, input_value, remote_value)
    return input_value == remote_value


def _item_property(prop: SchemaDefinitionProperty) -> SchemaDefinitionProperty:
    # Items of a list of objects share the list's nested schema
    return SchemaDefinitionProperty(
        name=prop.name,
        type=prop.array_items_type,
        nested_schema=prop.nested_schema,
    )


def _equal_lists(prop: SchemaDefinitionProperty, input_items, remote_items) -> bool:
    if len(input_items) != len(remote_items):
        return False

    item_prop = _item_property(prop)
    if not prop.should_ignore_order():
        return all(
            equal(item_prop, input_item, remote_item)
            for input_item, remote_item in zip(input_items, remote_items)
        )

    # Multiset matching: every input item consumes one equal, unused remote item
    unmatched = list(remote_items)
    for input_item in input_items:
        for index, remote_item in enumerate(unmatched):
            if equal(item_prop, input_item, remote_item):
                del unmatched[index]
                break
        else:
            return False
    return True


def _equal_objects(prop: SchemaDefinitionProperty, input_object, remote_object) -> bool:
    if prop.nested_schema is None:
        return True

    for sub_prop in prop.nested_schema:
        input_value = input_object.get(sub_prop.name, _MISSING)
        remote_value = remote_object.get(sub_prop.name, _MISSING)
        if input_value is _MISSING and remote_value is _MISSING:
            continue
        if input_value is _MISSING or remote_value is _MISSING:
            return False
        if not equal(sub_prop, input_value, remote_value):
            return False
    return True

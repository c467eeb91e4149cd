"""
Translation of the Property Model into target schema nodes.

Entry points:
- translate(): one property into one TargetSchemaNode, recursing into nested schemas
- translate_definition(): every property of a SchemaDefinition into a Resource
- object_schema(): the nested Resource of an object or list-of-object property

Unsupported types and missing nested schemas are hard errors that propagate
to the caller and abort the whole tree; flag conflicts are deferred into each
node's validation check.
"""

import logging

from schema_translate.exceptions import (
    MissingNestedSchemaError,
    NonCompliantNameError,
    ObjectSchemaFormationError,
)
from schema_translate.models.property import (
    PropertyType,
    SchemaDefinition,
    SchemaDefinitionProperty,
    type_tag,
)
from schema_translate.models.target import NodeKind, Resource, TargetSchemaNode, TargetType
from schema_translate.translate.modes import reconcile
from schema_translate.translate.naming import compliant_name
from schema_translate.translate.types import map_type
from schema_translate.translate.validation import build_validation

logger = logging.getLogger(__name__)


def translate(prop: SchemaDefinitionProperty) -> TargetSchemaNode:
    """
    Translate a property into a target schema node.

    Args:
        prop: Property to translate

    Returns:
        Translated node; objects and lists of objects carry their nested
        Resource as ``elem``

    Raises:
        UnsupportedTypeError: If the property or its items have an unsupported type
        MissingNestedSchemaError: If an object-shaped property has no nested schema
        ObjectSchemaFormationError: If a list has neither a primitive items type
            nor object items

    Example:
        >>> node = translate(SchemaDefinitionProperty(name="label", type="string", required=True))
        >>> node.type, node.required
        (<TargetType.STRING: 'String'>, True)
    """
    property_type = PropertyType.parse(prop.type)
    node = TargetSchemaNode(type=map_type(property_type))

    if property_type is PropertyType.OBJECT:
        node.elem = object_schema(prop)
        if prop.should_use_legacy_block():
            node.type = TargetType.LIST
            node.kind = NodeKind.BLOCK_LIST
            node.max_items = 1
        else:
            node.kind = NodeKind.MAP
        logger.debug(f"Property '{prop.name}' translated as {node.kind} object")
    elif property_type is PropertyType.LIST:
        node.kind = NodeKind.LIST
        items_type = _items_type(prop)
        if items_type is not None and items_type.is_primitive:
            node.elem = TargetSchemaNode(type=map_type(items_type))
        else:
            node.elem = object_schema(prop)

    outcome = reconcile(prop)
    node.required = outcome.required
    node.optional = outcome.optional
    node.computed = outcome.computed
    node.default = outcome.default
    node.force_new = prop.force_new
    node.sensitive = prop.sensitive
    node.validate = build_validation(prop)
    return node


def object_schema(prop: SchemaDefinitionProperty) -> Resource:
    """
    Build the nested Resource of an object or list-of-object property.

    Raises:
        ObjectSchemaFormationError: If the property is not object-shaped
        MissingNestedSchemaError: If the property has no nested schema
    """
    property_type = PropertyType.parse(prop.type) if prop.type else None

    is_object = property_type is PropertyType.OBJECT
    is_list_of_objects = (
        property_type is PropertyType.LIST and _items_type(prop) is PropertyType.OBJECT
    )
    if not (is_object or is_list_of_objects):
        raise ObjectSchemaFormationError(
            type_tag(property_type), type_tag(prop.array_items_type)
        )

    if prop.nested_schema is None:
        raise MissingNestedSchemaError(prop.name, type_tag(property_type))

    return translate_definition(prop.nested_schema)


def translate_definition(definition: SchemaDefinition) -> Resource:
    """
    Translate every property of a definition into a Resource.

    Each node is registered under the compliant name of its property, in
    declaration order. When two properties share a compliant name the later
    one wins.

    Args:
        definition: Definition to translate

    Returns:
        Resource keyed by compliant name

    Raises:
        NonCompliantNameError: If a property name has no letters or digits
    """
    resource = Resource()
    for prop in definition:
        key = compliant_name(prop)
        if not key:
            raise NonCompliantNameError(prop.name)
        if key in resource.schema:
            logger.warning(
                f"Property '{prop.name}' overrides an earlier property registered as '{key}'"
            )
        resource.schema[key] = translate(prop)
    return resource


def _items_type(prop: SchemaDefinitionProperty) -> PropertyType | None:
    if not prop.array_items_type:
        return None
    return PropertyType.parse(prop.array_items_type)

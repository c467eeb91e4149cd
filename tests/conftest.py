"""
Pytest configuration and shared fixtures.
"""

import pytest

from schema_translate.models.property import SchemaDefinition, SchemaDefinitionProperty


@pytest.fixture
def string_property():
    """Return a plain optional string property."""
    return SchemaDefinitionProperty(name="string_prop", type="string")


@pytest.fixture
def nested_object_property():
    """
    Return a top level object with a nested object and a renamed float.

    The nested object forces the block representation of the top level object.
    """
    return SchemaDefinitionProperty(
        name="top_level_object",
        type="object",
        nested_schema=SchemaDefinition(
            [
                SchemaDefinitionProperty(
                    name="nested_object1",
                    type="object",
                    nested_schema=SchemaDefinition(
                        [SchemaDefinitionProperty(name="string_property_1", type="string")]
                    ),
                ),
                SchemaDefinitionProperty(
                    name="nested_float2",
                    preferred_name="nested_float_2",
                    type="float",
                ),
            ]
        ),
    )


@pytest.fixture
def group_object_property():
    """Return an object property with a single string sub-property 'group'."""
    return SchemaDefinitionProperty(
        name="object_prop",
        type="object",
        nested_schema=SchemaDefinition(
            [SchemaDefinitionProperty(name="group", type="string")]
        ),
    )


@pytest.fixture
def definition_yaml():
    """Return a serialized object definition in YAML."""
    return """
name: server
type: object
description: A server
schema:
  - name: serverName
    type: string
    required: true
  - name: id
    type: string
    read_only: true
  - name: tags
    type: list
    array_items_type: string
    ignore_items_order: true
  - name: settings
    type: object
    schema:
      - name: retries
        type: integer
        computed: true
        default: 3
"""

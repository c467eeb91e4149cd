"""
Data models.

This package contains the input Property Model and the output node shapes
of the target configuration-schema type system.

Modules:
- property: PropertyType, SchemaDefinitionProperty, SchemaDefinition
- target: TargetType, NodeKind, TargetSchemaNode, Resource
"""

"""Property Model: the read-only input tree produced by the OpenAPI document parser.

A ``SchemaDefinitionProperty`` describes one field of an API resource, and a
``SchemaDefinition`` is the ordered collection of fields owned by an object
(or list-of-object) property. The tree is built once, upstream, with every
``$ref`` already resolved, and is never mutated afterwards.
"""

from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from schema_translate.exceptions import UnsupportedTypeError


class PropertyType(Enum):
    """
    Closed set of property type tags.

    Examples:
        >>> PropertyType.parse("string")
        <PropertyType.STRING: 'string'>
        >>> PropertyType.parse("array")
        <PropertyType.LIST: 'list'>
    """

    STRING = "string"
    INTEGER = "integer"
    FLOAT = "float"
    BOOLEAN = "boolean"
    LIST = "list"
    OBJECT = "object"

    def __str__(self) -> str:
        """Return the string value for display."""
        return self.value

    @property
    def is_primitive(self) -> bool:
        """Return True for scalar types."""
        return self in _PRIMITIVE_TYPES

    @classmethod
    def parse(cls, tag: "PropertyType | str") -> "PropertyType":
        """
        Parse a raw type tag into a PropertyType.

        OpenAPI spellings ("number", "array") are accepted as aliases.

        Args:
            tag: PropertyType member or raw tag string

        Returns:
            Matching PropertyType

        Raises:
            UnsupportedTypeError: If the tag is not a supported type
        """
        if isinstance(tag, PropertyType):
            return tag
        if isinstance(tag, str):
            normalized = _TAG_ALIASES.get(tag, tag)
            for member in cls:
                if member.value == normalized:
                    return member
        raise UnsupportedTypeError(tag)


_PRIMITIVE_TYPES = frozenset(
    {PropertyType.STRING, PropertyType.INTEGER, PropertyType.FLOAT, PropertyType.BOOLEAN}
)

_TAG_ALIASES = {"number": "float", "array": "list"}


def type_tag(value: "PropertyType | str | None") -> str:
    """Return the display tag of a type, '' when absent."""
    if value is None:
        return ""
    return str(value)


@dataclass(frozen=True)
class SchemaDefinitionProperty:
    """
    One named field of a resource schema.

    ``type`` and ``array_items_type`` hold either a PropertyType or the raw tag
    emitted by the upstream parser; raw tags are parsed where they are used so
    an unsupported tag surfaces as UnsupportedTypeError during translation.

    Attributes:
        name: Raw identifier as declared in the source OpenAPI document
        type: Property type
        preferred_name: Explicit identifier override, used verbatim
        array_items_type: Item type, meaningful only for lists
        description: Free text, carried to documentation
        required: User must supply the value
        read_only: Value is always owned by the remote system
        computed: Value may be filled in by the remote system
        force_new: Changing the value replaces the resource
        sensitive: Value must not be displayed
        immutable: Value can not be updated in place
        ignore_items_order: Lists compare as multisets
        enable_legacy_complex_object_block: Objects use the single element list block
        default: Default value, None when absent
        nested_schema: Sub-properties of object and list-of-object properties
    """

    name: str = ""
    type: PropertyType | str | None = None
    preferred_name: str | None = None
    array_items_type: PropertyType | str | None = None
    description: str | None = None
    required: bool = False
    read_only: bool = False
    computed: bool = False
    force_new: bool = False
    sensitive: bool = False
    immutable: bool = False
    ignore_items_order: bool = False
    enable_legacy_complex_object_block: bool = False
    default: Any = None
    nested_schema: "SchemaDefinition | None" = None

    def _is(self, property_type: PropertyType) -> bool:
        try:
            return self.type is not None and PropertyType.parse(self.type) is property_type
        except UnsupportedTypeError:
            return False

    def is_primitive(self) -> bool:
        try:
            return self.type is not None and PropertyType.parse(self.type).is_primitive
        except UnsupportedTypeError:
            return False

    def is_object(self) -> bool:
        return self._is(PropertyType.OBJECT)

    def is_array(self) -> bool:
        return self._is(PropertyType.LIST)

    def is_optional(self) -> bool:
        return not self.required

    def should_ignore_order(self) -> bool:
        """Item order is irrelevant; only honoured on lists."""
        return self.is_array() and self.ignore_items_order

    def is_legacy_complex_object_extension_enabled(self) -> bool:
        """The legacy block flag only counts on object properties."""
        return self.is_object() and self.enable_legacy_complex_object_block

    def has_nested_objects(self) -> bool:
        """Return True if any direct child of this object is itself an object."""
        if not self.is_object() or self.nested_schema is None:
            return False
        return any(child.is_object() for child in self.nested_schema)

    def should_use_legacy_block(self) -> bool:
        """
        Decide whether an object is represented as a single element list block.

        Objects containing objects always use the block representation,
        regardless of the explicit flag.
        """
        return self.is_legacy_complex_object_extension_enabled() or self.has_nested_objects()


@dataclass(frozen=True)
class SchemaDefinition:
    """Ordered collection of properties owned by an object-shaped property."""

    properties: tuple[SchemaDefinitionProperty, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # Accept any iterable (lists from callers and loaders) but store a tuple
        object.__setattr__(self, "properties", tuple(self.properties))

    def __iter__(self) -> Iterator[SchemaDefinitionProperty]:
        return iter(self.properties)

    def __len__(self) -> int:
        return len(self.properties)

    def get(self, name: str) -> SchemaDefinitionProperty | None:
        """Return the property with the given raw name, or None."""
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

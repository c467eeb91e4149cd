"""Target configuration-schema node shapes.

These are the structures handed to the host configuration framework. They
carry no behaviour beyond a few read-only conveniences; everything about how
they are filled in lives in ``schema_translate.translate``.
"""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Union


class TargetType(Enum):
    """
    Primitive type tags of the target configuration-schema type system.

    INVALID is the explicit marker returned alongside an unsupported type
    error; it never appears on a successfully translated node.
    """

    INVALID = "Invalid"
    BOOL = "Bool"
    INT = "Int"
    FLOAT = "Float"
    STRING = "String"
    LIST = "List"
    MAP = "Map"

    def __str__(self) -> str:
        """Return the string value for display."""
        return self.value


class NodeKind(Enum):
    """
    Structural representation chosen for a translated node.

    Kinds:
        PRIMITIVE: scalar leaf (string, int, float, bool)
        MAP: nested object exposed directly as a map of sub-properties
        LIST: list of primitives or list of objects, unbounded
        BLOCK_LIST: nested object wrapped in a single element list (legacy block)
    """

    PRIMITIVE = "primitive"
    MAP = "map"
    LIST = "list"
    BLOCK_LIST = "block-list"

    def __str__(self) -> str:
        """Return the string value for display."""
        return self.value


# (value, key) -> (warnings, errors)
ValidateFunc = Callable[[Any, str], tuple[list[str], list[Exception]]]


@dataclass
class TargetSchemaNode:
    """
    One field of a target resource schema.

    Attributes:
        type: Target primitive type tag
        kind: Structural representation of the node
        elem: Element schema; a bare leaf for lists of primitives, a nested
            Resource for objects and lists of objects, None for primitives
        required: Field must be supplied by the user
        optional: Field may be supplied by the user
        computed: Field value may come from the remote system
        force_new: Changing the field replaces the resource
        sensitive: Field value must not be displayed
        default: Default value, None when unset
        max_items: 1 for legacy block lists, None otherwise
        validate: Deferred validation check, evaluated by the host framework
    """

    type: TargetType
    kind: NodeKind = NodeKind.PRIMITIVE
    elem: Union["TargetSchemaNode", "Resource", None] = None
    required: bool = False
    optional: bool = False
    computed: bool = False
    force_new: bool = False
    sensitive: bool = False
    default: Any = None
    max_items: int | None = None
    validate: ValidateFunc | None = None

    @property
    def resource(self) -> "Resource | None":
        """Return the nested resource schema, if the element is one."""
        return self.elem if isinstance(self.elem, Resource) else None


@dataclass
class Resource:
    """
    A nested resource schema: compliant field name -> node.

    Insertion order follows the declaration order of the source properties.
    """

    schema: dict[str, TargetSchemaNode] = field(default_factory=dict)

    def __contains__(self, key: str) -> bool:
        return key in self.schema

    def __getitem__(self, key: str) -> TargetSchemaNode:
        return self.schema[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self.schema)

    def __len__(self) -> int:
        return len(self.schema)

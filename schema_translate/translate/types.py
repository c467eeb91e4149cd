"""Mapping of property types onto target primitive types."""

from schema_translate.models.property import PropertyType
from schema_translate.models.target import TargetType

TYPE_MAPPING: dict[PropertyType, TargetType] = {
    PropertyType.STRING: TargetType.STRING,
    PropertyType.INTEGER: TargetType.INT,
    PropertyType.FLOAT: TargetType.FLOAT,
    PropertyType.BOOLEAN: TargetType.BOOL,
    PropertyType.OBJECT: TargetType.MAP,
    PropertyType.LIST: TargetType.LIST,
}


def map_type(tag: PropertyType | str) -> TargetType:
    """
    Map a property type onto the target primitive type.

    Args:
        tag: PropertyType member or raw type tag

    Returns:
        Target primitive type

    Raises:
        UnsupportedTypeError: If the tag is not supported; the error carries
            ``target_type = TargetType.INVALID``
    """
    return TYPE_MAPPING[PropertyType.parse(tag)]

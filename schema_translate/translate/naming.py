"""
Field identifier normalization.

Target schemas only accept lowercase, underscore separated identifiers. Raw
names coming from the OpenAPI document (``nonCompliantName``, ``ID``,
``the object``) are normalized here; an explicit preferred name is an escape
hatch and is returned untouched.
"""

import re

from schema_translate.models.property import SchemaDefinitionProperty

ID_PROPERTY_NAME = "id"
STATUS_PROPERTY_NAME = "status"

_SEPARATORS = re.compile(r"[^0-9a-zA-Z]+")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z]+)([A-Z][a-z])")
_CASE_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
_REPEATED_UNDERSCORES = re.compile(r"_+")


def to_compliant_name(name: str) -> str:
    """
    Convert a raw identifier into a compliant snake_case identifier.

    The result only contains ``[a-z0-9_]``, never starts or ends with an
    underscore and never repeats one, so applying the conversion twice gives
    the same result as applying it once.

    Args:
        name: Raw identifier

    Returns:
        Compliant identifier

    Examples:
        >>> to_compliant_name("nonCompliantName")
        'non_compliant_name'
        >>> to_compliant_name("HTTPServer")
        'http_server'
        >>> to_compliant_name("ID")
        'id'
    """
    converted = _SEPARATORS.sub("_", name)
    converted = _ACRONYM_BOUNDARY.sub(r"\1_\2", converted)
    converted = _CASE_BOUNDARY.sub(r"\1_\2", converted)
    converted = _REPEATED_UNDERSCORES.sub("_", converted.lower())
    return converted.strip("_")


def compliant_name(prop: SchemaDefinitionProperty) -> str:
    """
    Return the identifier a property is registered under in its parent schema.

    A non-empty preferred name wins and is returned verbatim, even when it is
    not compliant; the target framework rejects it at its own boundary.
    """
    if prop.preferred_name:
        return prop.preferred_name
    return to_compliant_name(prop.name)


def is_property_named_id(prop: SchemaDefinitionProperty) -> bool:
    return compliant_name(prop) == ID_PROPERTY_NAME


def is_property_named_status(prop: SchemaDefinitionProperty) -> bool:
    return compliant_name(prop) == STATUS_PROPERTY_NAME

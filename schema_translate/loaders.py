"""
Loading of serialized property definitions.

A definition document is one property (usually an object) in YAML or JSON,
with sub-properties listed under ``schema``. Documents are validated against
the bundled definition schema before the Property Model is built. No ``$ref``
resolution happens here; documents must already be fully expanded.

Example document:

    name: server
    type: object
    schema:
      - name: serverName
        type: string
        required: true
      - name: tags
        type: list
        array_items_type: string
        ignore_items_order: true
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from jsonschema import Draft7Validator
from jsonschema.exceptions import ValidationError

from schema_translate.config import PACKAGE_ROOT
from schema_translate.exceptions import DefinitionLoadError, DefinitionValidationError
from schema_translate.models.property import SchemaDefinition, SchemaDefinitionProperty

logger = logging.getLogger(__name__)

_FLAG_KEYS = (
    "required",
    "read_only",
    "computed",
    "force_new",
    "sensitive",
    "immutable",
    "ignore_items_order",
    "enable_legacy_complex_object_block",
)


def load_definition(file_path: str | Path) -> SchemaDefinitionProperty:
    """
    Load a property definition from a YAML or JSON file.

    JSON is used for ``.json`` files, YAML for everything else.

    Args:
        file_path: Path to the definition document

    Returns:
        Root SchemaDefinitionProperty

    Raises:
        DefinitionLoadError: If the file cannot be read or parsed
        DefinitionValidationError: If the document does not match the schema
    """
    path = Path(file_path)
    try:
        text = path.read_text()
    except OSError as e:
        raise DefinitionLoadError(str(path), str(e)) from e

    try:
        if path.suffix == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DefinitionLoadError(str(path), f"parse error: {e}") from e

    prop = definition_from_dict(data, file_path=str(path))
    logger.info(f"Loaded definition '{prop.name}' from {path}")
    return prop


def definition_from_dict(data: Any, file_path: str = None) -> SchemaDefinitionProperty:
    """
    Build a property tree from an already parsed definition document.

    Args:
        data: Parsed document
        file_path: Source file, used in error messages

    Returns:
        Root SchemaDefinitionProperty

    Raises:
        DefinitionValidationError: If the document does not match the schema
    """
    errors = validate_definition(data)
    if errors:
        raise DefinitionValidationError(errors, file_path)
    return _build_property(data)


def validate_definition(data: Any) -> list[str]:
    """
    Validate a definition document against the bundled schema.

    Returns:
        Formatted error messages, empty when the document is valid
    """
    schema = json.loads((PACKAGE_ROOT / "schema/definition.schema.json").read_text())
    validator = Draft7Validator(schema)
    errors: list[str] = []
    for error in sorted(validator.iter_errors(data), key=lambda e: [str(p) for p in e.path]):
        errors.extend(format_validation_error(error))
    return errors


def format_validation_error(error: ValidationError) -> list[str]:
    """
    Format a jsonschema ValidationError into user-friendly messages.

    Args:
        error: ValidationError from jsonschema

    Returns:
        List of formatted messages, the first naming the failing location
    """
    path = ".".join(str(p) for p in error.path) if error.path else "root"
    errors = [f"Validation error at '{path}': {error.message}"]

    if error.validator == "required":
        missing_props = error.message.split("'")[1::2]
        errors.append(f"  Required properties missing: {', '.join(missing_props)}")

    elif error.validator == "type":
        errors.append(f"  Expected type: {error.validator_value}")
        errors.append(f"  Got: {type(error.instance).__name__}")
        if error.validator_value == "boolean" and isinstance(error.instance, str):
            errors.append("  Hint: flags must be true or false, without quotes")

    elif error.validator == "enum":
        errors.append(f"  Allowed values: {', '.join(str(v) for v in error.validator_value)}")
        errors.append(f"  Got: {error.instance}")

    elif error.validator == "additionalProperties":
        errors.append("  Hint: property keys are snake_case, e.g. read_only, preferred_name")

    return errors


def _build_property(data: dict[str, Any]) -> SchemaDefinitionProperty:
    nested = data.get("schema")
    nested_schema = None
    if nested is not None:
        nested_schema = SchemaDefinition([_build_property(child) for child in nested])

    flags = {key: data[key] for key in _FLAG_KEYS if key in data}
    return SchemaDefinitionProperty(
        name=data["name"],
        type=data["type"],
        preferred_name=data.get("preferred_name"),
        array_items_type=data.get("array_items_type"),
        description=data.get("description"),
        default=data.get("default"),
        nested_schema=nested_schema,
        **flags,
    )

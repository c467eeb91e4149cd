"""
Custom exceptions for schema-translate with helpful error messages.
"""

from schema_translate.models.target import TargetType


class SchemaTranslateError(Exception):
    """Base exception for schema-translate errors."""

    def __init__(self, message: str, suggestion: str = None):
        self.message = message
        self.suggestion = suggestion
        super().__init__(self.message)

    def __str__(self):
        if self.suggestion:
            return f"{self.message}\n\nSuggestion: {self.suggestion}"
        return self.message


class TranslationError(SchemaTranslateError):
    """Hard errors that abort translation of a whole property tree."""

    pass


class UnsupportedTypeError(TranslationError):
    """Property type tag is not one of the supported types."""

    def __init__(self, tag):
        self.tag = tag
        self.target_type: TargetType = TargetType.INVALID
        message = f"non supported type {tag}"
        suggestion = (
            "Property types must be one of:\n"
            "  - string\n"
            "  - integer\n"
            "  - float (OpenAPI number)\n"
            "  - boolean\n"
            "  - list (OpenAPI array)\n"
            "  - object"
        )
        super().__init__(message, suggestion)


class MissingNestedSchemaError(TranslationError):
    """Object-shaped property declared without its nested schema."""

    def __init__(self, name: str, property_type: str):
        self.name = name
        self.property_type = property_type
        message = (
            f"missing spec schema definition for property '{name}' of type '{property_type}'"
        )
        suggestion = (
            "Object properties and lists of objects must carry the nested schema\n"
            "of their sub-properties. Check that every reference in the source\n"
            "OpenAPI document was resolved before translation."
        )
        super().__init__(message, suggestion)


class ObjectSchemaFormationError(TranslationError):
    """A nested resource schema was requested for a non object-shaped property."""

    def __init__(self, property_type: str, elem_type: str):
        self.property_type = property_type
        self.elem_type = elem_type
        message = (
            "object schema can only be formed for types object or types list with elems "
            f"of type object: found type='{property_type}' elemType='{elem_type}' instead"
        )
        suggestion = (
            "Declare the items type of list properties, and give list-of-object\n"
            "properties a nested schema."
        )
        super().__init__(message, suggestion)


class NonCompliantNameError(TranslationError):
    """Property name yields an empty identifier once made compliant."""

    def __init__(self, name: str):
        self.name = name
        message = f"property name '{name}' has no letters or digits to form a compliant name"
        suggestion = (
            "Compliant names are built from the ASCII letters and digits of the\n"
            "property name. Give the property a preferred name instead."
        )
        super().__init__(message, suggestion)


class ValidationConflictError(SchemaTranslateError):
    """
    Conflicting property flags.

    These are never raised during translation; the deferred validation check
    returns them so they surface when the configuration is validated.
    """

    pass


class ImmutableForceNewConflictError(ValidationConflictError):
    """Property is both immutable and force-new."""

    def __init__(self, name: str):
        self.name = name
        message = (
            f"property '{name}' is configured as immutable and can not be configured "
            "with forceNew too"
        )
        suggestion = "Remove either the immutable or the force-new flag from the property."
        super().__init__(message, suggestion)


class RequiredComputedConflictError(ValidationConflictError):
    """Property is both required and computed."""

    def __init__(self, name: str):
        self.name = name
        message = (
            f"property '{name}' is configured as required and can not be configured "
            "as computed too"
        )
        suggestion = (
            "A required value always comes from the user. Drop the computed flag,\n"
            "or make the property optional so the remote system can fill it in."
        )
        super().__init__(message, suggestion)


class DefinitionError(SchemaTranslateError):
    """Errors related to loading serialized property definitions."""

    pass


class DefinitionLoadError(DefinitionError):
    """Definition file could not be read or parsed."""

    def __init__(self, file_path: str, error_details: str):
        self.file_path = file_path
        message = f"Failed to load definition {file_path}: {error_details}"
        suggestion = (
            "Check that the file exists and contains valid YAML or JSON:\n" f"  ls -l {file_path}"
        )
        super().__init__(message, suggestion)


class DefinitionValidationError(DefinitionError):
    """Definition document does not match the definition schema."""

    def __init__(self, errors: list[str], file_path: str = None):
        self.errors = errors
        error_list = "\n  - ".join(errors)
        message = f"Definition validation failed with {len(errors)} error(s):\n  - {error_list}"

        if file_path:
            message = f"Definition validation failed for {file_path}:\n  - {error_list}"

        suggestion = (
            "Fix the validation errors in your definition file.\n"
            "Common issues:\n"
            "  - Missing required fields (name, type)\n"
            "  - Unknown property types\n"
            "  - Flags given as strings instead of booleans"
        )
        super().__init__(message, suggestion)


class ConfigurationError(SchemaTranslateError):
    """Configuration file errors."""

    pass


class InvalidConfigError(ConfigurationError):
    """Configuration file is invalid."""

    def __init__(self, error_details: str):
        message = f"Invalid configuration file: {error_details}"

        suggestion = (
            "Fix the schema-translate.yaml file.\n"
            "Supported sections are:\n"
            "  logging:\n"
            "    level: INFO\n"
            "  docs:\n"
            "    templates_dir: path/to/templates"
        )
        super().__init__(message, suggestion)


def format_error_for_cli(error: Exception) -> str:
    """
    Format an exception for console display with helpful information.

    Args:
        error: The exception to format

    Returns:
        Formatted error message string (rich console markup)
    """
    if isinstance(error, SchemaTranslateError):
        output = f"[red]Error:[/red] {error.message}"
        if error.suggestion:
            output += f"\n\n[yellow]{error.suggestion}[/yellow]"
        return output
    else:
        return f"[red]Error:[/red] {str(error)}"

"""Documentation model for provider resources and data sources.

These structures hold already computed data for the documentation templates.
``doc_property_from`` derives them from the Property Model through the same
naming and mode reconciliation used by the translator, so the documentation
never disagrees with the generated schema.
"""

from dataclasses import dataclass, field

from schema_translate.models.property import SchemaDefinitionProperty, type_tag
from schema_translate.translate.modes import PropertyMode, resolve_mode
from schema_translate.translate.naming import compliant_name


@dataclass
class DocProperty:
    """Describes one property of a resource for the documentation."""

    name: str
    type: str
    array_items_type: str = ""
    required: bool = False
    computed: bool = False
    is_optional_computed: bool = False
    is_sensitive: bool = False
    description: str = ""
    schema: list["DocProperty"] = field(default_factory=list)  # objects / lists of objects

    def contains_computed_sub_properties(self) -> bool:
        """Return True if any sub-property, at any depth, is computed."""
        return any(s.computed or s.contains_computed_sub_properties() for s in self.schema)


@dataclass
class DocExample:
    """Block of code or commands to include in the docs."""

    example: str


@dataclass
class DocResource:
    """Attributes to generate documentation for a provider resource."""

    name: str
    description: str = ""
    properties: list[DocProperty] = field(default_factory=list)
    parent_properties: list[str] | None = None
    examples: list[DocExample] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)

    def build_import_ids_example(self) -> str:
        """
        Build the identifier example shown in the import section.

        Examples:
            >>> DocResource(name="cdn").build_import_ids_example()
            'id'
            >>> DocResource(name="firewall", parent_properties=["cdn_id"]).build_import_ids_example()
            'cdn_id/firewall_id'
        """
        if self.parent_properties is None:
            return "id"
        id_examples = "".join(f"{prop}/" for prop in self.parent_properties)
        if id_examples:
            id_examples += f"{self.name}_id"
        return id_examples


@dataclass
class DocDataSource:
    """Attributes to generate documentation for a provider data source."""

    name: str
    other_example: str = ""
    properties: list[DocProperty] = field(default_factory=list)


@dataclass
class ProviderInstallation:
    """Details needed to install the provider plugin."""

    example: str = ""  # code or commands installing the provider
    other: str = ""  # further instructions to install or run the provider
    other_command: str = ""


@dataclass
class ProviderConfiguration:
    """
    Details needed to configure the provider.

    Attributes:
        regions: Regions the provider can be configured for, first is the default
        config_properties: Provider level arguments
        example_usage: Example provider blocks
        notes: Notes appended to the arguments reference (eg: known issues)
    """

    regions: list[str] = field(default_factory=list)
    config_properties: list[DocProperty] = field(default_factory=list)
    example_usage: list[DocExample] = field(default_factory=list)
    notes: list[str] = field(default_factory=list)


@dataclass
class ProviderDocumentation:
    """Everything rendered into a provider's documentation page."""

    provider_name: str
    installation: ProviderInstallation = field(default_factory=ProviderInstallation)
    configuration: ProviderConfiguration = field(default_factory=ProviderConfiguration)
    resources: list[DocResource] = field(default_factory=list)
    data_sources: list[DocDataSource] = field(default_factory=list)
    data_source_instances: list[DocDataSource] = field(default_factory=list)
    show_special_terms_definitions: bool = True

    def contains_resources_with_secret_properties(self) -> bool:
        return any(
            prop.is_sensitive for resource in self.resources for prop in resource.properties
        )


def doc_property_from(prop: SchemaDefinitionProperty) -> DocProperty:
    """
    Derive the documentation of a property (and its nested schema).

    Args:
        prop: Property to document

    Returns:
        DocProperty named by the property's compliant name
    """
    mode = resolve_mode(prop)
    sub_properties = []
    if prop.nested_schema is not None:
        sub_properties = [doc_property_from(child) for child in prop.nested_schema]

    return DocProperty(
        name=compliant_name(prop),
        type=type_tag(prop.type),
        array_items_type=type_tag(prop.array_items_type),
        required=mode.required,
        computed=mode.computed,
        is_optional_computed=mode is PropertyMode.OPTIONAL_COMPUTED_UNKNOWN,
        is_sensitive=prop.sensitive,
        description=prop.description or "",
        schema=sub_properties,
    )

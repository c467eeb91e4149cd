"""
Tests for console display of translated schemas.
"""

from rich.console import Console

from schema_translate.models.property import SchemaDefinitionProperty
from schema_translate.models.target import NodeKind, TargetSchemaNode, TargetType
from schema_translate.translate.schema import translate
from schema_translate.util.display import describe_node, schema_tree, show_schema


class TestDescribeNode:
    """Tests for describe_node()."""

    def test_required_primitive(self):
        """Test a required string."""
        node = TargetSchemaNode(type=TargetType.STRING, required=True)

        assert describe_node("label", node) == "[bold]label[/bold] String [red]required[/red]"

    def test_optional_computed(self):
        """Test optional computed nodes."""
        node = TargetSchemaNode(type=TargetType.INT, optional=True, computed=True)

        assert "optional, computed" in describe_node("size", node)

    def test_computed_only(self):
        """Test computed nodes that are not optional."""
        node = TargetSchemaNode(type=TargetType.STRING, computed=True)

        label = describe_node("id", node)
        assert "[cyan]computed[/cyan]" in label
        assert "optional" not in label

    def test_list_and_flags(self):
        """Test list item types and force-new/sensitive markers."""
        node = TargetSchemaNode(
            type=TargetType.LIST,
            kind=NodeKind.LIST,
            elem=TargetSchemaNode(type=TargetType.STRING),
            optional=True,
            force_new=True,
            sensitive=True,
        )

        label = describe_node("roles", node)
        assert "of String" in label
        assert "force-new" in label
        assert "sensitive" in label

    def test_block(self):
        """Test block nodes show their maximum size."""
        node = TargetSchemaNode(
            type=TargetType.LIST, kind=NodeKind.BLOCK_LIST, max_items=1, optional=True
        )

        assert "(block, max 1)" in describe_node("settings", node)


class TestSchemaTree:
    """Tests for schema_tree() and show_schema()."""

    def test_nested_branches(self, nested_object_property):
        """Test nested resources become sub-branches."""
        node = translate(nested_object_property)

        tree = schema_tree(node.resource, title="top_level_object")

        assert len(tree.children) == 2
        assert len(tree.children[0].children) == 1
        assert tree.children[1].children == []

    def test_show_schema(self, nested_object_property):
        """Test the tree is printed to the given console."""
        node = translate(nested_object_property)
        out = Console(record=True, width=120)

        show_schema(node.resource, title="top_level_object", out=out)

        text = out.export_text()
        assert "top_level_object" in text
        assert "nested_object1 Map optional" in text
        assert "string_property_1 String optional" in text
        assert "nested_float_2 Float optional" in text

"""
Console display of translated schemas using rich.
"""

from rich.console import Console
from rich.tree import Tree

from schema_translate.models.target import NodeKind, Resource, TargetSchemaNode

console = Console()


def describe_node(key: str, node: TargetSchemaNode) -> str:
    """Build the one-line rich markup label of a node."""
    label = f"[bold]{key}[/bold] {node.type}"
    if node.kind is NodeKind.BLOCK_LIST:
        label += f" [dim](block, max {node.max_items})[/dim]"
    elif node.kind is NodeKind.LIST and isinstance(node.elem, TargetSchemaNode):
        label += f" [dim]of {node.elem.type}[/dim]"

    if node.required:
        label += " [red]required[/red]"
    elif node.optional and node.computed:
        label += " [yellow]optional, computed[/yellow]"
    elif node.computed:
        label += " [cyan]computed[/cyan]"
    else:
        label += " [green]optional[/green]"

    if node.force_new:
        label += " [magenta]force-new[/magenta]"
    if node.sensitive:
        label += " [dim]sensitive[/dim]"
    return label


def schema_tree(resource: Resource, title: str = "schema") -> Tree:
    """
    Build a rich Tree of a translated resource schema.

    Args:
        resource: Translated resource
        title: Label of the root of the tree

    Returns:
        Tree with one branch per node, nested resources as sub-branches
    """
    tree = Tree(f"[bold blue]{title}[/bold blue]")
    _add_branches(tree, resource)
    return tree


def _add_branches(tree: Tree, resource: Resource) -> None:
    for key, node in resource.schema.items():
        branch = tree.add(describe_node(key, node))
        if node.resource is not None:
            _add_branches(branch, node.resource)


def show_schema(resource: Resource, title: str = "schema", out: Console | None = None) -> None:
    """Print a translated resource schema as a tree."""
    (out or console).print(schema_tree(resource, title))

"""Rich tree visualization for deletion plans."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from vendorprune.models.tree import DeletionPlan

console = Console()


def build_plan_tree(plan: DeletionPlan, vendor_root: Path) -> Tree:
    """Build a Rich tree of planned removals, grouped by kept parent dirs."""
    root = Tree(f"[bold]{escape(vendor_root.name)}/[/]", guide_style="dim")

    # Kept directories on the way to each removal
    dir_nodes: dict[tuple[str, ...], Tree] = {}

    for entry in plan:
        parent = root
        for depth in range(1, len(entry.rel_parts)):
            prefix = entry.rel_parts[:depth]
            if prefix not in dir_nodes:
                dir_nodes[prefix] = parent.add(f"[bold blue]{escape(prefix[-1])}/[/]")
            parent = dir_nodes[prefix]

        if entry.is_dir:
            parent.add(f"[red]x {escape(entry.name)}/[/]")
        else:
            parent.add(f"[red]x {escape(entry.name)}[/]")

    return root


def display_tree(tree: Tree, out: Console | None = None) -> None:
    """Display the tree to console."""
    out = out or console
    out.print()
    out.print(tree)
    out.print()

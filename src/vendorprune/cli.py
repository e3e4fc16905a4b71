"""VendorPrune CLI - remove unused packages from a glide vendor tree."""

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from vendorprune import __version__
from vendorprune.config import build_policy, load_config
from vendorprune.errors import VendorPruneError
from vendorprune.models.results import PruneResults
from vendorprune.output.json_writer import write_report
from vendorprune.output.tree import build_plan_tree, display_tree
from vendorprune.paths import find_project_root
from vendorprune.pruning.pipeline import cleanup

app = typer.Typer(
    name="vendorprune",
    help="Remove unused packages and files from a glide vendor directory",
    no_args_is_help=False,
    rich_markup_mode="rich",
)
console = Console()


def version_callback(value: bool) -> None:
    if value:
        console.print(f"vendorprune version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    project: Path = typer.Argument(
        Path("."),
        help="Path inside the glide project to prune",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        "--dryrun",
        "-n",
        help="Just output what will be removed",
    ),
    only_code: bool = typer.Option(
        False,
        "--only-code",
        help="Keep only code files (including test files) inside needed packages",
    ),
    no_tests: bool = typer.Option(
        False,
        "--no-tests",
        help="Remove also test files (requires --only-code)",
    ),
    no_legal_files: bool = typer.Option(
        False,
        "--no-legal-files",
        help="Remove also licenses and legal files",
    ),
    dev_imports: Optional[bool] = typer.Option(
        None,
        "--dev-imports/--no-dev-imports",
        help="Treat devImports from the lockfile as needed packages [default: on]",
    ),
    no_test_imports: bool = typer.Option(
        False,
        "--no-test-imports",
        help="Same as --no-dev-imports",
    ),
    keep: Optional[list[str]] = typer.Option(
        None,
        "--keep",
        "-k",
        help=(
            "Pattern of extra files to keep inside needed packages, relative to "
            "the innermost vendor dir. Supports '**'. Can be repeated, "
            "e.g. --keep '**/*.json'"
        ),
    ),
    code_suffix: Optional[list[str]] = typer.Option(
        None,
        "--code-suffix",
        help="Extra file suffix counted as code by --only-code. Can be repeated",
    ),
    lockfile: Optional[Path] = typer.Option(
        None,
        "--lockfile",
        "-l",
        help="Path to glide.lock (default: <project>/glide.lock)",
    ),
    vendor: Optional[Path] = typer.Option(
        None,
        "--vendor",
        help="Path to the vendor dir (default: <project>/vendor)",
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to a TOML config file (default: .vendorprune.toml or pyproject.toml)",
    ),
    report: Optional[Path] = typer.Option(
        None,
        "--report",
        "-o",
        help="Write a JSON report of the removals",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show the removals as a tree",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Only print errors",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Remove unused packages and files from a glide vendor directory."""
    if no_test_imports:
        dev_imports = False

    try:
        project_root = find_project_root(project)
        config_data = load_config(config, project_root)
        policy = build_policy(
            config_data,
            dry_run=dry_run,
            only_code=only_code,
            no_tests=no_tests,
            no_legal_files=no_legal_files,
            dev_imports=dev_imports,
            keep=keep,
            code_suffixes=code_suffix,
        )
        plan, results = cleanup(
            project_root,
            policy,
            lockfile_path=lockfile,
            vendor_path=vendor,
            console=console,
            quiet=quiet,
        )
        if report is not None:
            write_report(results, report)
    except VendorPruneError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}", soft_wrap=True)
        raise typer.Exit(1)

    if quiet:
        return

    if verbose and plan:
        vendor_root = Path(results.metadata.vendor_path) if results.metadata else project_root
        display_tree(build_plan_tree(plan, vendor_root), out=console)

    _display_summary(results, dry_run=policy.dry_run)

    if report is not None:
        console.print(f"\n[green]Report saved to:[/] {report}")


def _display_summary(results: PruneResults, dry_run: bool) -> None:
    """Display prune summary."""
    summary = results.summary

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Entries visited", str(summary.visited))
    table.add_row("Entries kept", str(summary.kept))
    table.add_row("Files removed", str(summary.removed_files))
    table.add_row("Dirs removed", str(summary.removed_dirs))
    table.add_row("Bytes reclaimed", _format_bytes(summary.bytes_removed))

    title = "[bold]Dry Run Summary[/]" if dry_run else "[bold]Prune Summary[/]"
    console.print(Panel(table, title=title, border_style="blue"))


def _format_bytes(size: int) -> str:
    """Format a byte count for humans."""
    for unit in ("B", "KiB", "MiB"):
        if size < 1024:
            return f"{size} {unit}" if unit == "B" else f"{size:.1f} {unit}"
        size /= 1024
    return f"{size:.1f} GiB"


if __name__ == "__main__":
    app()

"""Removal of planned vendor entries."""

import os
import shutil
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from vendorprune.errors import RemovalError
from vendorprune.models.results import RemovalRecord, RemovalStatus
from vendorprune.models.tree import DeletionPlan, VendorEntry

console = Console()


def execute_plan(
    plan: DeletionPlan,
    dry_run: bool = False,
    out: Console | None = None,
    quiet: bool = False,
) -> list[RemovalRecord]:
    """Report and (unless dry_run) remove every planned entry in order.

    The first failing removal aborts the run; earlier removals stay done.

    Raises:
        RemovalError: If an entry cannot be removed.
    """
    out = out or console
    records: list[RemovalRecord] = []

    for entry in plan:
        label = "dir" if entry.is_dir else "file"
        if not quiet:
            out.print(f"Removing unused {label}: {escape(entry.rel_path)}", soft_wrap=True)

        size = measure_entry(entry)
        if dry_run:
            status = RemovalStatus.DRY_RUN
        else:
            status = remove_entry(entry)

        records.append(
            RemovalRecord(path=entry.rel_path, kind=entry.kind, bytes=size, status=status)
        )

    return records


def remove_entry(entry: VendorEntry) -> RemovalStatus:
    """Remove a file or a whole directory tree."""
    try:
        if entry.is_dir:
            shutil.rmtree(entry.path)
        else:
            entry.path.unlink()
    except FileNotFoundError:
        return RemovalStatus.MISSING
    except OSError as e:
        raise RemovalError(entry.rel_path, e) from e
    return RemovalStatus.REMOVED


def measure_entry(entry: VendorEntry) -> int:
    """Bytes held by an entry (recursively for directories)."""
    if not entry.is_dir:
        return _file_size(entry.path)
    total = 0
    for dirpath, _dirnames, filenames in os.walk(entry.path):
        total += sum(_file_size(Path(dirpath) / name) for name in filenames)
    return total


def _file_size(path: Path) -> int:
    try:
        return path.lstat().st_size
    except FileNotFoundError:
        return 0

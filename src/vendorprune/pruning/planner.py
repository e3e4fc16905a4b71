"""Keep set closure and deletion planning."""

from pathlib import Path
from typing import Iterable

from vendorprune.models.imports import PackageParts
from vendorprune.models.tree import ClassificationDecision, DeletionPlan
from vendorprune.pruning.walker import walk_vendor


def build_keep_set(decisions: Iterable[ClassificationDecision]) -> set[PackageParts]:
    """Collect kept entries together with all of their ancestors."""
    keep: set[PackageParts] = set()
    for decision in decisions:
        if decision.keep:
            promote_ancestors(keep, decision.entry.rel_parts)
    return keep


def promote_ancestors(keep: set[PackageParts], rel_parts: PackageParts) -> None:
    """Add rel_parts and every ancestor below the vendor root to keep.

    keep is closed under ancestors, so the climb stops at the first path
    already present.
    """
    for depth in range(len(rel_parts), 0, -1):
        prefix = rel_parts[:depth]
        if prefix in keep:
            break
        keep.add(prefix)


def plan_deletions(vendor_root: Path, keep: set[PackageParts]) -> DeletionPlan:
    """Walk the tree again and list everything outside the keep set.

    Removed directories are not entered, so no planned entry lies inside
    another one.
    """
    plan = DeletionPlan()
    for entry in walk_vendor(vendor_root, descend=lambda e: e.rel_parts in keep):
        if entry.rel_parts not in keep:
            plan.add(entry)
    return plan

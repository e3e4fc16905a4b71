"""End-to-end vendor pruning."""

from datetime import datetime
from pathlib import Path

from rich.console import Console

from vendorprune import __version__
from vendorprune.config import RetentionPolicy
from vendorprune.lockfile import load_lockfile
from vendorprune.models.results import PruneMetadata, PruneResults, PruneSummary
from vendorprune.models.tree import ClassificationDecision, DeletionPlan
from vendorprune.paths import ensure_vendor_dir, get_lockfile_path, get_vendor_path
from vendorprune.pruning.classifier import RetentionClassifier
from vendorprune.pruning.executor import execute_plan
from vendorprune.pruning.importset import ImportSet, import_set_from_lockfile
from vendorprune.pruning.planner import build_keep_set, plan_deletions


class VendorPruner:
    """Run classification, planning and removal over one vendor tree.

    Each stage finishes before the next one starts, so no decision is made
    against a tree that is already partly removed.
    """

    def __init__(
        self,
        vendor_root: Path,
        import_set: ImportSet,
        policy: RetentionPolicy,
        console: Console | None = None,
        quiet: bool = False,
    ) -> None:
        self.vendor_root = vendor_root
        self.import_set = import_set
        self.policy = policy
        self.console = console
        self.quiet = quiet
        self.classifier = RetentionClassifier(import_set, policy)

    def classify(self) -> list[ClassificationDecision]:
        return self.classifier.classify_tree(self.vendor_root)

    def plan(self, decisions: list[ClassificationDecision]) -> DeletionPlan:
        return plan_deletions(self.vendor_root, build_keep_set(decisions))

    def run(self) -> tuple[list[ClassificationDecision], DeletionPlan, PruneResults]:
        """Prune the tree, returning decisions, the plan and the results."""
        decisions = self.classify()
        keep = build_keep_set(decisions)
        plan = plan_deletions(self.vendor_root, keep)
        records = execute_plan(
            plan,
            dry_run=self.policy.dry_run,
            out=self.console,
            quiet=self.quiet,
        )

        summary = PruneSummary(
            visited=len(decisions),
            kept=len(keep),
            removed_files=sum(1 for r in records if r.kind == "file"),
            removed_dirs=sum(1 for r in records if r.kind == "dir"),
            bytes_removed=sum(r.bytes for r in records),
        )
        return decisions, plan, PruneResults(summary=summary, removals=records)


def cleanup(
    project_root: Path,
    policy: RetentionPolicy,
    lockfile_path: Path | None = None,
    vendor_path: Path | None = None,
    console: Console | None = None,
    quiet: bool = False,
) -> tuple[DeletionPlan, PruneResults]:
    """Prune the vendor tree of a glide project.

    Raises:
        ConfigurationError: Invalid policy or import paths.
        LockfileError: Missing or malformed lockfile.
        VendorNotFoundError: No vendor directory.
        RemovalError: A removal failed.
    """
    policy.validate()

    lockfile_path = lockfile_path or get_lockfile_path(project_root)
    lockfile = load_lockfile(lockfile_path)
    import_set = import_set_from_lockfile(lockfile, policy.include_dev_imports)

    vendor_root = ensure_vendor_dir(vendor_path) if vendor_path else get_vendor_path(project_root)

    pruner = VendorPruner(vendor_root, import_set, policy, console=console, quiet=quiet)
    _decisions, plan, results = pruner.run()

    results.metadata = PruneMetadata(
        vendor_path=str(vendor_root),
        lockfile_path=str(lockfile_path),
        pruned_at=datetime.now(),
        vendorprune_version=__version__,
        dry_run=policy.dry_run,
        policy=policy.to_dict(),
    )
    return plan, results

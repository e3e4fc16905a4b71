"""Data models for VendorPrune."""

from vendorprune.models.imports import (
    ImportRecord,
    Lockfile,
    PackageParts,
    PackagePathSet,
    split_import_path,
)
from vendorprune.models.results import (
    PruneMetadata,
    PruneResults,
    PruneSummary,
    RemovalRecord,
    RemovalStatus,
)
from vendorprune.models.tree import (
    ClassificationDecision,
    DeletionPlan,
    KeepReason,
    VendorEntry,
)

__all__ = [
    # Import models
    "ImportRecord",
    "Lockfile",
    "PackageParts",
    "PackagePathSet",
    "split_import_path",
    # Tree models
    "ClassificationDecision",
    "DeletionPlan",
    "KeepReason",
    "VendorEntry",
    # Results models
    "PruneMetadata",
    "PruneResults",
    "PruneSummary",
    "RemovalRecord",
    "RemovalStatus",
]
